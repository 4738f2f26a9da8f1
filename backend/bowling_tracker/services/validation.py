from typing import Any, List, Sequence

from ..config import ALL_PINS

class ValidationError(Exception):
    """Raised when a roll would be illegal in a real game of bowling."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


def validate_pins(pins: Any) -> int:
    """Validate a single pin count and return it as an ``int``.

    Rules:
    - Booleans are rejected (bool is a subclass of int in Python)
    - The value must convert to an integer without truncation
    - The value must be between 0 and 10 inclusive
    """

    if isinstance(pins, bool):
        raise ValidationError("Pin count must be an integer (not a boolean).")
    if isinstance(pins, float) and not pins.is_integer():
        raise ValidationError("Pin count must be an integer.")
    try:
        value = int(pins)
    except (TypeError, ValueError):
        raise ValidationError("Pin count must be an integer.")

    if value < 0:
        raise ValidationError("Pin count must be >= 0.")
    if value > ALL_PINS:
        raise ValidationError(f"Pin count must be <= {ALL_PINS}.")
    return value


def validate_roll(tracker, pins: Any) -> int:
    """Check that ``pins`` may legally be recorded next on ``tracker``.

    The tracker itself is left untouched.
    """

    value = validate_pins(pins)

    if tracker.is_complete():
        raise ValidationError("Game is complete; no rolls remain.")

    frames = tracker.frames
    last = frames[-1] if frames else None
    if last is not None and not last.is_complete:
        if last.first_roll + value > ALL_PINS:
            raise ValidationError(
                f"Frame #{len(frames)} cannot knock down more than {ALL_PINS} pins "
                f"({last.first_roll} + {value})."
            )
    return value


def validate_rolls(rolls: Sequence[Any]) -> List[int]:
    """Validate a full roll sequence, returning the normalised pin counts."""

    from ..scoring.bowling import ScoreTracker

    if not isinstance(rolls, Sequence) or isinstance(rolls, (str, bytes)):
        raise ValidationError("Rolls must be provided as a sequence of integers.")

    tracker = ScoreTracker()
    normalized: List[int] = []
    for index, raw in enumerate(rolls, start=1):
        try:
            value = validate_roll(tracker, raw)
        except ValidationError as exc:
            raise ValidationError(f"Roll #{index}: {exc.detail}") from exc
        tracker.record_roll(value)
        normalized.append(value)

    return normalized
