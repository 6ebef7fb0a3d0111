from __future__ import annotations

from typing import Any, Iterable, Optional

from checkers.game import Game, TransitionResult
from checkers.move import Coordinate, Move
from checkers.pieces import Color, Piece


def _coord_tuple_to_dict(coord: Optional[Coordinate]) -> Optional[dict[str, int]]:
    if coord is None:
        return None
    row, col = coord
    return {"row": row, "col": col}


def _coords_to_list(coords: Iterable[Coordinate]) -> list[dict[str, int]]:
    return [_coord_tuple_to_dict(coord) for coord in sorted(coords)]


def serialize_piece(piece: Piece) -> dict[str, Any]:
    return {
        "id": piece.id,
        "row": piece.row,
        "col": piece.col,
        "color": piece.color.value,
    }


def serialize_move(move: Move) -> dict[str, Any]:
    return {
        "start": _coord_tuple_to_dict(move.start),
        "end": _coord_tuple_to_dict(move.end),
        "captured": _coord_tuple_to_dict(move.captured),
        "isCapture": move.is_capture,
    }


def serialize_result(result: TransitionResult) -> dict[str, Any]:
    return {
        "accepted": result.accepted,
        "reason": result.reason.value if result.reason else None,
        "state": result.state.value,
        "turn": result.current_player.value,
        "selected": _coord_tuple_to_dict(result.selected),
        "move": serialize_move(result.move) if result.move else None,
        "capturedPiece": serialize_piece(result.captured_piece) if result.captured_piece else None,
        "chainPending": result.chain_pending,
        "turnSwitched": result.turn_switched,
        "gameOver": result.game_over,
        "winner": result.winner.value if result.winner else None,
    }


def serialize_destinations(piece: Piece, destinations: Iterable[Coordinate]) -> dict[str, Any]:
    return {
        "piece": serialize_piece(piece),
        "destinations": _coords_to_list(destinations),
    }


def serialize_game(game: Game) -> dict[str, Any]:
    pieces = game.board.getAllPieces()
    selected = game.selected_piece
    pending = game.pending_capture
    last_record = game.move_history[-1] if game.move_history else None

    return {
        "boardSize": game.board.boardSize,
        "state": game.state.value,
        "turn": game.current_player.value,
        "winner": game.winner.value if game.winner else None,
        "gameOver": game.game_over,
        "isMoving": game.is_moving,
        "pieces": [serialize_piece(piece) for piece in pieces],
        "pieceCounts": {
            color.value: sum(1 for piece in pieces if piece.color == color)
            for color in (Color.WHITE, Color.BLACK)
        },
        "selected": _coord_tuple_to_dict(selected.position) if selected else None,
        "pendingCapture": _coord_tuple_to_dict(pending.position) if pending else None,
        "legalDestinations": _coords_to_list(game.legalDestinations(selected)) if selected else [],
        "moveCount": len(game.move_history),
        "lastMove": serialize_move(last_record.move) if last_record else None,
    }
