from __future__ import annotations

from enum import Enum
from itertools import count
from typing import Optional

from .move import Coordinate


_PIECE_ID_COUNTER = count()


class Color(Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        """Row delta of a forward step: white heads for row 0, black for the last row."""
        return -1 if self is Color.WHITE else 1


class Piece:
    def __init__(self, color: Color, row: int, col: int, *, identifier: Optional[int] = None) -> None:
        self.color = color
        self.row = row
        self.col = col
        self.id = identifier if identifier is not None else next(_PIECE_ID_COUNTER)

    def move(self, new_row: int, new_col: int) -> None:
        self.row = new_row
        self.col = new_col

    @property
    def position(self) -> Coordinate:
        return (self.row, self.col)

    def __repr__(self) -> str:
        return f"P({self.color.name},{self.row},{self.col})"
