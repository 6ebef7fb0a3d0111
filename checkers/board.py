from __future__ import annotations

from typing import Iterable, Optional

from .pieces import Color, Piece


BOARD_SIZE = 8
INITIAL_ROWS = 3

BoardStatePiece = tuple[int, int, str, int]
BoardState = tuple[int, tuple[BoardStatePiece, ...]]

_DIAGRAM_SYMBOLS = {"w": Color.WHITE, "b": Color.BLACK}


class Board:
    def __init__(self, boardSize: int = BOARD_SIZE) -> None:
        self.board: list[list[Optional[Piece]]] = [
            [None for _ in range(boardSize)] for _ in range(boardSize)
        ]
        self.boardSize = boardSize
        self._set_start_pieces()

    @classmethod
    def empty(cls, boardSize: int = BOARD_SIZE) -> "Board":
        board = cls.__new__(cls)
        board.boardSize = boardSize
        board.board = [[None for _ in range(boardSize)] for _ in range(boardSize)]
        return board

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece], boardSize: int = BOARD_SIZE) -> "Board":
        board = cls.empty(boardSize)
        for piece in pieces:
            board._place(piece)
        return board

    @classmethod
    def from_diagram(cls, rows: Iterable[str]) -> "Board":
        """Build a board from one string per row.

        ``w`` and ``b`` mark white and black pieces, ``.`` (or a space) an
        empty cell. Whitespace around a row is ignored.
        """
        lines = [line.strip() for line in rows]
        size = len(lines)
        pieces: list[Piece] = []
        for row, line in enumerate(lines):
            if len(line) != size:
                raise ValueError(f"Diagram row {row} has {len(line)} cells, expected {size}.")
            for col, symbol in enumerate(line):
                if symbol in ". ":
                    continue
                color = _DIAGRAM_SYMBOLS.get(symbol.lower())
                if color is None:
                    raise ValueError(f"Unknown diagram symbol '{symbol}' at row {row}, col {col}.")
                pieces.append(Piece(color, row, col))
        return cls.from_pieces(pieces, boardSize=size)

    def to_state(self) -> BoardState:
        pieces: list[BoardStatePiece] = []
        for piece in self.getAllPieces():
            pieces.append((piece.row, piece.col, piece.color.value, piece.id))
        return (self.boardSize, tuple(pieces))

    @classmethod
    def from_state(cls, state: BoardState) -> "Board":
        board_size, pieces = state
        return cls.from_pieces(
            (
                Piece(Color(color_value), row, col, identifier=identifier)
                for row, col, color_value, identifier in pieces
            ),
            boardSize=board_size,
        )

    def getPiece(self, row: int, col: int) -> Optional[Piece]:
        if self.isWithinBoard(row, col):
            return self.board[row][col]
        return None

    def isEmpty(self, row: int, col: int) -> bool:
        return self.getPiece(row, col) is None

    def isWithinBoard(self, row: int, col: int) -> bool:
        return 0 <= row < self.boardSize and 0 <= col < self.boardSize

    @staticmethod
    def isDarkSquare(row: int, col: int) -> bool:
        return (row + col) % 2 == 1

    def getAllPieces(self) -> list[Piece]:
        pieces: list[Piece] = []
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                if self.isDarkSquare(row, col):
                    piece = self.getPiece(row, col)
                    if piece:
                        pieces.append(piece)
        return pieces

    def countPieces(self, color: Color) -> int:
        return sum(1 for piece in self.getAllPieces() if piece.color == color)

    def _place(self, piece: Piece) -> None:
        if not self.isWithinBoard(piece.row, piece.col):
            raise ValueError(f"Piece {piece!r} lies outside the board.")
        if not self.isDarkSquare(piece.row, piece.col):
            raise ValueError(f"Piece {piece!r} must stand on a dark square.")
        if self.board[piece.row][piece.col] is not None:
            raise ValueError(f"Cell {piece.position} is already occupied.")
        self.board[piece.row][piece.col] = piece

    def _set_start_pieces(self) -> None:
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                if self.isDarkSquare(row, col):
                    if row < INITIAL_ROWS:
                        self.board[row][col] = Piece(Color.BLACK, row, col)
                    elif row >= self.boardSize - INITIAL_ROWS:
                        self.board[row][col] = Piece(Color.WHITE, row, col)

    def __str__(self) -> str:
        lines = []
        for row in self.board:
            lines.append(
                "".join("." if piece is None else piece.color.value[0] for piece in row)
            )
        return "\n".join(lines)
