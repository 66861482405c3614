import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RawGameRow(BaseModel):
    """Uncleaned text of one home game, as read from a schedule table row."""

    model_config = ConfigDict(frozen=True)

    date_text: str
    home_team: str
    away_team: str
    result_text: str


class GameResult(BaseModel):
    """Scores derived from a result string such as 'W85-72 OT'."""

    model_config = ConfigDict(frozen=True)

    winner_score: int = Field(..., ge=0)
    loser_score: int = Field(..., ge=0)
    home_score: int = Field(..., ge=0)
    away_score: int = Field(..., ge=0)
    overtime: str = ""  # "OT", "2OT", ... or empty for regulation


class Game(BaseModel):
    """A final regular-season game, recorded once from the host's page."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    home_team: str
    home_score: int = Field(..., ge=0)
    away_team: str
    away_score: int = Field(..., ge=0)
    overtime: str = ""

    @model_validator(mode="after")
    def _check_matchup(self) -> "Game":
        if self.home_team == self.away_team:
            raise ValueError(f"{self.home_team} cannot play itself")
        if self.home_score == self.away_score:
            raise ValueError(
                f"Tied score {self.home_score}-{self.away_score} for {self.away_team} @ {self.home_team}"
            )
        return self

    def to_row(self) -> list:
        """Field values in CSV column order."""
        return [
            self.date.isoformat(),
            self.home_team,
            self.home_score,
            self.away_team,
            self.away_score,
            self.overtime,
        ]
