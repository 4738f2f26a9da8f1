"""Ten-pin bowling scoring engine with strike and spare lookahead."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .. import config as settings
from ..config import ALL_PINS, MAX_SCORED_FRAMES
from ..schemas import BowlingSummaryOut, FrameOut
from ..services.validation import validate_roll

logger = logging.getLogger(__name__)

NextTwoRolls = Tuple[Optional[int], Optional[int]]


class FrameState(str, Enum):
    OPEN = "open"
    COMPLETE = "complete"


@dataclass(frozen=True)
class Frame:
    first_roll: int
    second_roll: Optional[int] = None

    @property
    def is_strike(self) -> bool:
        return self.first_roll == ALL_PINS

    @property
    def is_spare(self) -> bool:
        return not self.is_strike and self.first_roll + (self.second_roll or 0) == ALL_PINS

    @property
    def is_complete(self) -> bool:
        return self.second_roll is not None or self.is_strike

    @property
    def state(self) -> FrameState:
        return FrameState.COMPLETE if self.is_complete else FrameState.OPEN

    @property
    def rolls(self) -> Tuple[int, ...]:
        if self.second_roll is None:
            return (self.first_roll,)
        return (self.first_roll, self.second_roll)

    def score(self, next_two_rolls: NextTwoRolls) -> Optional[int]:
        """Score this frame alone, or ``None`` while its bonus is unknown."""
        roll1, roll2 = next_two_rolls
        if self.is_strike:
            if roll1 is None or roll2 is None:
                return None
            return ALL_PINS + roll1 + roll2
        if self.is_spare:
            if roll1 is None:
                return None
            return ALL_PINS + roll1
        return self.first_roll + (self.second_roll or 0)


class ScoreTracker:
    """Group rolls into frames and score them on demand.

    Pin counts are never validated here; see
    :mod:`bowling_tracker.services.validation` for the opt-in checks.
    Bonus balls after a strike or spare in the tenth frame land in extra
    frames which are used for lookahead but never scored themselves.
    """

    def __init__(self) -> None:
        self._frames: List[Frame] = []

    @classmethod
    def from_rolls(cls, rolls: Iterable[int]) -> "ScoreTracker":
        tracker = cls()
        for pins in rolls:
            tracker.record_roll(pins)
        return tracker

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return tuple(self._frames)

    @property
    def rolls(self) -> List[int]:
        return [pins for frame in self._frames for pins in frame.rolls]

    def record_roll(self, pins: int) -> None:
        last = self._frames[-1] if self._frames else None
        if last is None or last.is_complete:
            self._frames.append(Frame(first_roll=pins))
        else:
            self._frames[-1] = replace(last, second_roll=pins)

    def two_rolls_after(self, frame_index: int) -> NextTwoRolls:
        next_frame = self._frame_at(frame_index + 1)
        first = next_frame.first_roll if next_frame else None
        second = next_frame.second_roll if next_frame else None
        if second is None:
            after_next = self._frame_at(frame_index + 2)
            second = after_next.first_roll if after_next else None
        return first, second

    def scores_by_frame(self) -> List[Optional[int]]:
        scored = self._frames[:MAX_SCORED_FRAMES]
        return [
            frame.score(self.two_rolls_after(index))
            for index, frame in enumerate(scored)
        ]

    def total_score(self) -> int:
        return sum(s for s in self.scores_by_frame() if s is not None)

    def running_totals(self) -> List[Optional[int]]:
        """Cumulative totals; ``None`` from the first unresolved frame on."""
        totals: List[Optional[int]] = []
        cumulative: Optional[int] = 0
        for score in self.scores_by_frame():
            if cumulative is not None and score is not None:
                cumulative += score
            else:
                cumulative = None
            totals.append(cumulative)
        return totals

    def is_complete(self) -> bool:
        if len(self._frames) < MAX_SCORED_FRAMES:
            return False
        if not self._frames[MAX_SCORED_FRAMES - 1].is_complete:
            return False
        return all(s is not None for s in self.scores_by_frame())

    def _frame_at(self, index: int) -> Optional[Frame]:
        if 0 <= index < len(self._frames):
            return self._frames[index]
        return None


def init_state(config: Dict) -> Dict:
    return {
        "config": config,
        "tracker": ScoreTracker(),
        "validate": bool(config.get("validateRolls", settings.VALIDATE_ROLLS)),
    }


def apply(event: Dict, state: Dict) -> Dict:
    if event.get("type") != "ROLL":
        raise ValueError("invalid bowling event")
    raw = event.get("pins", 0)
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise ValueError("pins must be an integer")
    try:
        pins = int(raw)
    except (TypeError, ValueError):
        raise ValueError("pins must be an integer")

    tracker: ScoreTracker = state["tracker"]
    if state.get("validate"):
        validate_roll(tracker, pins)
    tracker.record_roll(pins)

    frame_no = len(tracker.frames)
    logger.debug("Recorded %d pin(s) in frame %d", pins, frame_no)
    if tracker.frames[-1].is_complete and frame_no <= MAX_SCORED_FRAMES:
        logger.debug("Frame %d complete", frame_no)
    return state


def summary(state: Dict) -> Dict:
    tracker: ScoreTracker = state["tracker"]
    out = BowlingSummaryOut(
        frames=[
            FrameOut(
                first_roll=f.first_roll,
                second_roll=f.second_roll,
                state=f.state.value,
            )
            for f in tracker.frames
        ],
        scores=tracker.scores_by_frame(),
        running_totals=tracker.running_totals(),
        total=tracker.total_score(),
        complete=tracker.is_complete(),
    )
    return out.model_dump(by_alias=True)


def record_rolls(rolls: Iterable[int], state: Optional[Dict] = None):
    """Generate and apply one ROLL event per pin count.

    Returns ``(events, state)`` so callers can persist the event log next to
    the resulting scoreboard.
    """

    state = state or init_state({})
    events = []
    for pins in rolls:
        ev = {"type": "ROLL", "pins": pins}
        events.append(ev)
        state = apply(ev, state)
    return events, state
