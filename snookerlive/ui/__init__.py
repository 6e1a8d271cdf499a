"""Terminal UI for the live score display."""

from .live_display import CycleOutcome, LiveScoreDisplay, PollState, run_live_display
from .score_table import format_score_table, render_score_table

__all__ = [
    "CycleOutcome",
    "LiveScoreDisplay",
    "PollState",
    "run_live_display",
    "format_score_table",
    "render_score_table",
]
