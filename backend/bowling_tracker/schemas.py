from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class FrameOut(BaseModel):
    first_roll: int = Field(..., alias="firstRoll")
    second_roll: Optional[int] = Field(None, alias="secondRoll")
    state: Literal["open", "complete"]

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class BowlingSummaryOut(BaseModel):
    """Scoreboard for a single bowling game.

    ``frames`` lists every recorded frame, including bonus frames past the
    tenth; ``scores`` and ``runningTotals`` stop at ten entries.
    """

    frames: List[FrameOut]
    scores: List[Optional[int]]
    running_totals: List[Optional[int]] = Field(..., alias="runningTotals")
    total: int
    complete: bool = False

    model_config = ConfigDict(populate_by_name=True, extra="forbid")
