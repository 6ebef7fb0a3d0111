from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .board import Board
from .move import Coordinate, Move
from .pieces import Color, Piece
from .rules import canCapture, canMove, canPieceCaptureAgain, jumpedCell, legalDestinations


logger = logging.getLogger(__name__)


class EngineState(str, Enum):
    IDLE = "idle"
    SELECTED = "selected"
    CHAIN_CAPTURE = "chain_capture"
    GAME_OVER = "game_over"


class RejectReason(str, Enum):
    GAME_OVER = "game_over"
    TRANSITION_IN_FLIGHT = "transition_in_flight"
    OUT_OF_BOUNDS = "out_of_bounds"
    EMPTY_CELL = "empty_cell"
    NOT_YOUR_TURN = "not_your_turn"
    CHAIN_LOCKED = "chain_locked"
    NO_SELECTION = "no_selection"
    CAPTURE_REQUIRED = "capture_required"
    ILLEGAL_DESTINATION = "illegal_destination"


@dataclass
class GameState:
    current_player: Color = Color.WHITE
    selected_piece: Optional[Piece] = None
    pending_capture: Optional[Piece] = None
    game_over: bool = False
    winner: Optional[Color] = None
    is_moving: bool = False


@dataclass
class MoveRecord:
    piece_id: int
    color: Color
    move: Move
    captured: Optional[Piece] = None


@dataclass(frozen=True)
class TransitionResult:
    accepted: bool
    state: EngineState
    current_player: Color
    reason: Optional[RejectReason] = None
    selected: Optional[Coordinate] = None
    move: Optional[Move] = None
    captured_piece: Optional[Piece] = None
    chain_pending: bool = False
    turn_switched: bool = False
    game_over: bool = False
    winner: Optional[Color] = None


class Game:
    """Rule and turn engine for a single game of checkers.

    Every interaction is resolved synchronously against the board. Once a move
    is accepted the engine refuses further interactions until the presentation
    layer calls :meth:`completeTransition`.
    """

    def __init__(self, board: Optional[Board] = None, current_player: Color = Color.WHITE) -> None:
        self.board = board if board is not None else Board()
        self.game_state = GameState(current_player=current_player)
        self.move_history: list[MoveRecord] = []

    # state accessors ----------------------------------------------------

    @property
    def state(self) -> EngineState:
        if self.game_state.game_over:
            return EngineState.GAME_OVER
        if self.game_state.pending_capture is not None:
            return EngineState.CHAIN_CAPTURE
        if self.game_state.selected_piece is not None:
            return EngineState.SELECTED
        return EngineState.IDLE

    @property
    def current_player(self) -> Color:
        return self.game_state.current_player

    @property
    def selected_piece(self) -> Optional[Piece]:
        return self.game_state.selected_piece

    @property
    def pending_capture(self) -> Optional[Piece]:
        return self.game_state.pending_capture

    @property
    def game_over(self) -> bool:
        return self.game_state.game_over

    @property
    def winner(self) -> Optional[Color]:
        return self.game_state.winner

    @property
    def is_moving(self) -> bool:
        return self.game_state.is_moving

    # queries ------------------------------------------------------------

    def legalDestinations(self, piece: Piece) -> set[Coordinate]:
        gs = self.game_state
        if gs.game_over or piece.color != gs.current_player:
            return set()
        if self.board.getPiece(piece.row, piece.col) is not piece:
            return set()
        if gs.pending_capture is not None:
            if piece is not gs.pending_capture:
                return set()
            return legalDestinations(self.board, piece, captures_only=True)
        return legalDestinations(self.board, piece)

    # commands -----------------------------------------------------------

    def attemptInteraction(self, row: int, col: int, *, on_piece: Optional[bool] = None) -> TransitionResult:
        rejection = self._gate(row, col)
        if rejection is not None:
            return rejection

        piece = self.board.getPiece(row, col)
        if on_piece is None:
            on_piece = piece is not None
        if on_piece and piece is not None:
            return self.select(row, col)
        return self.moveSelectedTo(row, col)

    def select(self, row: int, col: int) -> TransitionResult:
        rejection = self._gate(row, col)
        if rejection is not None:
            return rejection

        gs = self.game_state
        piece = self.board.getPiece(row, col)
        if piece is None:
            return self._reject(RejectReason.EMPTY_CELL)
        if piece.color != gs.current_player:
            return self._reject(RejectReason.NOT_YOUR_TURN)
        if gs.pending_capture is not None and piece is not gs.pending_capture:
            return self._reject(RejectReason.CHAIN_LOCKED)

        gs.selected_piece = piece
        logger.debug("%s selected %s", gs.current_player.value, piece)
        return self._result(accepted=True)

    def moveSelectedTo(self, row: int, col: int) -> TransitionResult:
        rejection = self._gate(row, col)
        if rejection is not None:
            return rejection

        gs = self.game_state
        piece = gs.selected_piece
        if piece is None:
            return self._reject(RejectReason.NO_SELECTION)

        start_row, start_col = piece.position
        player = gs.current_player
        if canCapture(self.board, start_row, start_col, row, col, player):
            move = Move(
                start=piece.position,
                end=(row, col),
                captured=jumpedCell(piece.position, (row, col)),
            )
            return self._execute(piece, move)
        if canMove(self.board, start_row, start_col, row, col, player):
            if gs.pending_capture is not None:
                return self._reject(RejectReason.CAPTURE_REQUIRED)
            return self._execute(piece, Move(start=piece.position, end=(row, col)))
        return self._reject(RejectReason.ILLEGAL_DESTINATION)

    def completeTransition(self) -> bool:
        if not self.game_state.is_moving:
            return False
        self.game_state.is_moving = False
        return True

    # helpers ------------------------------------------------------------

    def _gate(self, row: int, col: int) -> Optional[TransitionResult]:
        if self.game_state.game_over:
            return self._reject(RejectReason.GAME_OVER)
        if self.game_state.is_moving:
            return self._reject(RejectReason.TRANSITION_IN_FLIGHT)
        if not self.board.isWithinBoard(row, col):
            return self._reject(RejectReason.OUT_OF_BOUNDS)
        return None

    def _execute(self, piece: Piece, move: Move) -> TransitionResult:
        gs = self.game_state
        grid = self.board.board

        start_row, start_col = move.start
        end_row, end_col = move.end
        grid[start_row][start_col] = None
        grid[end_row][end_col] = piece
        piece.move(end_row, end_col)

        captured: Optional[Piece] = None
        if move.captured is not None:
            cap_row, cap_col = move.captured
            captured = grid[cap_row][cap_col]
            grid[cap_row][cap_col] = None

        self.move_history.append(
            MoveRecord(piece_id=piece.id, color=piece.color, move=move, captured=captured)
        )

        chain_pending = captured is not None and canPieceCaptureAgain(self.board, piece)
        if chain_pending:
            gs.pending_capture = piece
            gs.selected_piece = piece
        else:
            gs.pending_capture = None
            gs.selected_piece = None
            gs.current_player = gs.current_player.opponent

        if captured is not None:
            self._check_winner()

        gs.is_moving = True
        logger.debug("%s played %s", piece.color.value, move)
        return self._result(
            accepted=True,
            move=move,
            captured_piece=captured,
            chain_pending=chain_pending,
            turn_switched=not chain_pending,
        )

    def _check_winner(self) -> None:
        gs = self.game_state
        if gs.game_over:
            return
        for color in (Color.WHITE, Color.BLACK):
            if self.board.countPieces(color) == 0:
                gs.game_over = True
                gs.winner = color.opponent
                gs.selected_piece = None
                gs.pending_capture = None
                logger.info("Game over, %s wins", gs.winner.value)
                return

    def _reject(self, reason: RejectReason) -> TransitionResult:
        logger.debug("Interaction rejected: %s", reason.value)
        return self._result(accepted=False, reason=reason)

    def _result(self, *, accepted: bool, **changes) -> TransitionResult:
        gs = self.game_state
        selected = gs.selected_piece.position if gs.selected_piece is not None else None
        return TransitionResult(
            accepted=accepted,
            state=self.state,
            current_player=gs.current_player,
            selected=selected,
            game_over=gs.game_over,
            winner=gs.winner,
            **changes,
        )
