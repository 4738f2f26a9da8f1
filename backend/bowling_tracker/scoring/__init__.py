"""Scoring engines."""

from . import bowling
from .bowling import Frame, FrameState, ScoreTracker

ENGINES = {"bowling": bowling}

__all__ = [
    "bowling",
    "ENGINES",
    "Frame",
    "FrameState",
    "ScoreTracker",
]
