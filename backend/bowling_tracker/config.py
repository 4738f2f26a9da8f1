import logging
import os

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(env_var: str, default: bool = False) -> bool:
    """
    Read a boolean flag from the environment:
      - unset/empty values fall back to ``default``
      - accepts 1/true/yes/on and 0/false/no/off (case-insensitive)
      - anything else logs a warning and falls back to ``default``
    """
    raw_value = os.getenv(env_var)
    if raw_value is None or not raw_value.strip():
        return default

    value = raw_value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False

    logger.warning(
        "%s is not a valid boolean (got %r); defaulting to %s",
        env_var,
        raw_value,
        default,
    )
    return default


VALIDATE_ROLLS = _parse_bool("BOWLING_VALIDATE_ROLLS")

# Bonus balls after a strike or spare in the tenth frame are stored as
# notional frames 11/12 and never emitted.
MAX_SCORED_FRAMES = 10

ALL_PINS = 10
