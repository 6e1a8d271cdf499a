"""Data models for the live score display."""

from .config import DEFAULT_URL, PollerConfig
from .score import MatchRow, ScoreLine, UNKNOWN_PLAYER

__all__ = ["DEFAULT_URL", "PollerConfig", "MatchRow", "ScoreLine", "UNKNOWN_PLAYER"]
