from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class CoordinateModel(BaseModel):
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)


class InteractionRequest(CoordinateModel):
    target: Optional[Literal["piece", "cell"]] = Field(
        default=None,
        description="What the click landed on; derived from board occupancy when omitted.",
    )
