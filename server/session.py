from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Optional

from checkers.game import Game
from checkers.pieces import Piece

from .schemas import InteractionRequest
from .serializers import serialize_destinations, serialize_game, serialize_result


logger = logging.getLogger(__name__)


class GameSession:
    """Thread-safe orchestrator around a single Game instance."""

    def __init__(self, game: Optional[Game] = None) -> None:
        self.lock = Lock()
        self.game = game if game is not None else Game()

    # public API ---------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return self._serialize_locked()

    def reset(self) -> dict[str, Any]:
        with self.lock:
            self.game = Game()
            logger.info("New game started")
            return self._serialize_locked()

    def get_legal_destinations(self, row: int, col: int) -> dict[str, Any]:
        with self.lock:
            piece = self._require_piece(row, col)
            return serialize_destinations(piece, self.game.legalDestinations(piece))

    def interact(self, payload: InteractionRequest) -> dict[str, Any]:
        with self.lock:
            on_piece = None if payload.target is None else payload.target == "piece"
            result = self.game.attemptInteraction(payload.row, payload.col, on_piece=on_piece)
            if result.accepted and result.game_over and result.move is not None:
                logger.info("Game finished after %s, winner %s", result.move, result.winner.value)
            return {
                "result": serialize_result(result),
                "game": self._serialize_locked(),
            }

    def complete_transition(self) -> dict[str, Any]:
        with self.lock:
            self.game.completeTransition()
            return self._serialize_locked()

    # helpers ------------------------------------------------------------

    def _serialize_locked(self) -> dict[str, Any]:
        return serialize_game(self.game)

    def _require_piece(self, row: int, col: int) -> Piece:
        piece = self.game.board.getPiece(row, col)
        if piece is None:
            raise ValueError(f"No piece at row {row}, col {col}.")
        return piece
