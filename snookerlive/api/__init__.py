"""API module for live score fetching and extraction."""

from .live_scores_api import LiveScoresAPI
from .score_extractor import extract_score_lines, parse_match_row

__all__ = ["LiveScoresAPI", "extract_score_lines", "parse_match_row"]
