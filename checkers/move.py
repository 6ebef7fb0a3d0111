from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

Coordinate = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Move:
    start: Coordinate
    end: Coordinate
    captured: Optional[Coordinate] = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def as_path(self) -> tuple[Coordinate, Coordinate]:
        return (self.start, self.end)

    def __str__(self) -> str:
        connector = " x " if self.is_capture else " - "
        return connector.join(f"{row},{col}" for row, col in self.as_path())
