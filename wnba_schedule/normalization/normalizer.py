from datetime import date
from typing import Dict, Iterable, List
import re

from loguru import logger
from pydantic import ValidationError

from wnba_schedule.models.game import Game, GameResult, RawGameRow

# Result cells for games that have no final score
NON_FINAL_MARKERS = {"Postponed", "Canceled", "Cancelled", "Suspended", "TBD"}
# Scheduled games show the tip-off time instead of a result, e.g. "7:00 PM ET"
_TIPOFF_PATTERN = re.compile(r"^\d{1,2}:\d{2}\s*[AP]M\b", re.IGNORECASE)

# "W85-72", "L 70-88 OT", "W90-88 2OT"
_RESULT_PATTERN = re.compile(
    r"^(?P<outcome>[WL])\s*(?P<first>\d+)-(?P<second>\d+)(?:\s+(?P<overtime>\S+))?$"
)

# Regular season window
MONTHS: Dict[str, int] = {"Jun": 6, "Jul": 7, "Aug": 8, "Sep": 9}


class NormalizationError(Exception):
    """Custom exception for data normalization errors."""

    pass


class ResultParseError(NormalizationError):
    """Raised for result text that is not a final score."""

    pass


class DateParseError(NormalizationError):
    """Raised for date text outside the known format or season window."""

    pass


def is_final_result(text: str) -> bool:
    """True when the result cell holds a final score rather than a status."""
    text = text.strip()
    if not text or text in NON_FINAL_MARKERS:
        return False
    return not _TIPOFF_PATTERN.match(text)


def parse_result(text: str) -> GameResult:
    """Parses a result cell from the host team's perspective.

    The outcome letter says whether the host won; the winning score is
    listed first on the page, so the larger number is always the winner's.

    Raises:
        ResultParseError: the text is a non-final marker or not a W/L score.
    """
    cleaned = text.strip()
    if cleaned in NON_FINAL_MARKERS:
        raise ResultParseError(f"'{cleaned}' is not a final result")

    match = _RESULT_PATTERN.match(cleaned)
    if not match:
        raise ResultParseError(f"Unrecognized result text '{text}'")

    first = int(match.group("first"))
    second = int(match.group("second"))
    if first == second:
        raise ResultParseError(f"Tied score in result '{text}'")

    winner_score, loser_score = max(first, second), min(first, second)
    if match.group("outcome") == "W":
        home_score, away_score = winner_score, loser_score
    else:
        home_score, away_score = loser_score, winner_score

    try:
        return GameResult(
            winner_score=winner_score,
            loser_score=loser_score,
            home_score=home_score,
            away_score=away_score,
            overtime=match.group("overtime") or "",
        )
    except ValidationError as e:
        raise ResultParseError(f"Invalid scores in result '{text}': {e}") from e


def parse_date(text: str, season_year: int) -> date:
    """Parses schedule date text such as 'Thu, Jun 4' for the given season.

    Raises:
        DateParseError: unknown month abbreviation or unreadable day.
    """
    cleaned = text.strip()
    month_token = cleaned[5:8]
    month = MONTHS.get(month_token)
    if month is None:
        raise DateParseError(f"Unrecognized month '{month_token}' in date '{text}'")

    day_token = cleaned[9:].strip()
    if not day_token.isdigit():
        raise DateParseError(f"Unrecognized day '{day_token}' in date '{text}'")

    try:
        return date(season_year, month, int(day_token))
    except ValueError as e:
        raise DateParseError(f"Invalid calendar date '{text}' in {season_year}") from e


class Normalizer:
    """Turns raw schedule rows into typed Game records for one season."""

    def __init__(self, season_year: int):
        self.season_year = season_year

    def filter_final(self, raw_rows: Iterable[RawGameRow]) -> List[RawGameRow]:
        """Drops rows whose result is postponed, cancelled or not yet played."""
        final_rows = []
        for raw in raw_rows:
            if is_final_result(raw.result_text):
                final_rows.append(raw)
            else:
                logger.debug(
                    f"Dropping non-final game {raw.away_team} @ {raw.home_team} "
                    f"on '{raw.date_text}': '{raw.result_text}'"
                )
        return final_rows

    def to_game(self, raw: RawGameRow) -> Game:
        result = parse_result(raw.result_text)
        game_date = parse_date(raw.date_text, self.season_year)
        try:
            return Game(
                date=game_date,
                home_team=raw.home_team,
                home_score=result.home_score,
                away_team=raw.away_team,
                away_score=result.away_score,
                overtime=result.overtime,
            )
        except ValidationError as e:
            raise NormalizationError(f"Invalid game from row {raw}: {e}") from e
