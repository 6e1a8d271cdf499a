"""Score line model and related utilities."""

from pydantic import BaseModel

# Formatted "<Player A> <ScoreA> - <ScoreB> <Player B>" display unit
ScoreLine = str

UNKNOWN_PLAYER = "Unknown Player"


class MatchRow(BaseModel):
    """One live match row: two player names and two raw score texts"""

    model_config = {"frozen": True}

    player1: str = UNKNOWN_PLAYER
    score1: str = ""
    score2: str = ""
    player2: str = UNKNOWN_PLAYER

    @property
    def score_line(self) -> ScoreLine:
        # Scores are passed through verbatim, live matches can show partial text
        return f"{self.player1} {self.score1} - {self.score2} {self.player2}"
