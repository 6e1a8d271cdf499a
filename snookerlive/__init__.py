"""Snooker Live - a terminal live score board for snooker.org results."""

from .api import LiveScoresAPI, extract_score_lines
from .models import MatchRow, PollerConfig
from .ui import LiveScoreDisplay, render_score_table

__version__ = "1.0.0"
__all__ = [
    "LiveScoresAPI",
    "extract_score_lines",
    "MatchRow",
    "PollerConfig",
    "LiveScoreDisplay",
    "render_score_table",
]
