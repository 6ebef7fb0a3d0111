"""Checkers rule engine and turn state machine."""

from .board import BOARD_SIZE, Board
from .game import EngineState, Game, GameState, MoveRecord, RejectReason, TransitionResult
from .move import Coordinate, Move
from .pieces import Color, Piece
from .rules import canCapture, canMove, canPieceCaptureAgain, legalDestinations

__all__ = [
	"BOARD_SIZE",
	"Board",
	"Game",
	"GameState",
	"EngineState",
	"RejectReason",
	"TransitionResult",
	"MoveRecord",
	"Move",
	"Coordinate",
	"Color",
	"Piece",
	"canMove",
	"canCapture",
	"canPieceCaptureAgain",
	"legalDestinations",
]
