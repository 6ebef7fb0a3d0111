"""Pure legality predicates for simple moves and jump captures.

Every function here is a total boolean query over the board: out-of-range
coordinates simply yield ``False`` and nothing is mutated.
"""

from __future__ import annotations

from .board import Board
from .move import Coordinate
from .pieces import Color, Piece


MOVE_STEP = 1
CAPTURE_STEP = 2
MOVE_DIRECTIONS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
CAPTURE_DIRECTIONS = tuple((dr * CAPTURE_STEP, dc * CAPTURE_STEP) for dr, dc in MOVE_DIRECTIONS)


def canMove(board: Board, startRow: int, startCol: int, endRow: int, endCol: int, color: Color) -> bool:
    if not board.isWithinBoard(endRow, endCol):
        return False
    if not board.isEmpty(endRow, endCol):
        return False

    row_diff = endRow - startRow
    col_diff = abs(endCol - startCol)
    if col_diff != MOVE_STEP or abs(row_diff) != MOVE_STEP:
        return False
    return row_diff == color.forward


def canCapture(board: Board, startRow: int, startCol: int, endRow: int, endCol: int, color: Color) -> bool:
    if not board.isWithinBoard(endRow, endCol):
        return False
    if not board.isEmpty(endRow, endCol):
        return False

    row_diff = endRow - startRow
    col_diff = endCol - startCol
    if abs(row_diff) != CAPTURE_STEP or abs(col_diff) != CAPTURE_STEP:
        return False

    jumped = board.getPiece(*jumpedCell((startRow, startCol), (endRow, endCol)))
    return jumped is not None and jumped.color != color


def jumpedCell(start: Coordinate, end: Coordinate) -> Coordinate:
    return ((start[0] + end[0]) // 2, (start[1] + end[1]) // 2)


def canPieceCaptureAgain(board: Board, piece: Piece) -> bool:
    row, col = piece.position
    return any(
        canCapture(board, row, col, row + dr, col + dc, piece.color)
        for dr, dc in CAPTURE_DIRECTIONS
    )


def legalDestinations(board: Board, piece: Piece, *, captures_only: bool = False) -> set[Coordinate]:
    row, col = piece.position
    destinations = {
        (row + dr, col + dc)
        for dr, dc in CAPTURE_DIRECTIONS
        if canCapture(board, row, col, row + dr, col + dc, piece.color)
    }
    if captures_only:
        return destinations
    destinations.update(
        (row + dr, col + dc)
        for dr, dc in MOVE_DIRECTIONS
        if canMove(board, row, col, row + dr, col + dc, piece.color)
    )
    return destinations
