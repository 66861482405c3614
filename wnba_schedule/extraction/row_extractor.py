from typing import List, Optional

from bs4 import BeautifulSoup, Tag
from loguru import logger

from wnba_schedule.models.enums import HostMarker, ScanState
from wnba_schedule.models.game import RawGameRow
from wnba_schedule.models.team import Team

REGULAR_SEASON_MARKER = "Regular Season"
PRESEASON_MARKER = "Preseason"
COLUMN_HEADER_CLASS = "colhead"


class ExtractionError(Exception):
    """Raised when a schedule row lacks the cells or elements of a game row."""

    pass


def _is_column_header(row: Tag) -> bool:
    # BeautifulSoup returns class as a list of tokens
    return COLUMN_HEADER_CLASS in (row.get("class") or [])


def _parse_game_row(row: Tag, team: Team) -> Optional[RawGameRow]:
    """Reads one game row. Returns None when the scanned team played away."""
    cells = row.find_all(["td", "th"], recursive=False)
    if len(cells) < 3:
        raise ExtractionError(f"Expected at least 3 cells, found {len(cells)}")

    date_text = cells[0].get_text(" ", strip=True)
    opponent_field = cells[1]
    status = opponent_field.select_one(".game-status")
    opponent = opponent_field.select_one(".team-name")
    if status is None or opponent is None:
        raise ExtractionError("Opponent cell is missing .game-status or .team-name")
    result_text = cells[2].get_text(" ", strip=True)

    marker = status.get_text(strip=True)
    if marker == HostMarker.HOME.value:
        return RawGameRow(
            date_text=date_text,
            home_team=team.name,
            away_team=opponent.get_text(strip=True),
            result_text=result_text,
        )
    if marker != HostMarker.AWAY.value:
        raise ExtractionError(f"Unknown host marker '{marker}'")
    # Away games are recorded from the host's page
    return None


def extract_home_games(doc: BeautifulSoup, team: Team) -> List[RawGameRow]:
    """Collects the regular-season home games listed on a team's schedule page.

    Rows are scanned in document order. Everything before the "Regular Season"
    banner is ignored, and the scan ends at the first row mentioning
    "Preseason" after it. Rows that cannot be read are logged and skipped.

    Args:
        doc: Parsed schedule page.
        team: The team whose page this is; it is the host of every emitted row.

    Returns:
        Raw rows for games the team hosted, in page order.
    """
    rows: List[RawGameRow] = []
    state = ScanState.BEFORE

    for index, row in enumerate(doc.find_all("tr")):
        text = row.get_text(" ", strip=True)

        if state is ScanState.BEFORE:
            if REGULAR_SEASON_MARKER in text:
                state = ScanState.IN_SEASON
            continue

        if PRESEASON_MARKER in text:
            state = ScanState.AFTER
            break

        if _is_column_header(row):
            continue

        try:
            raw = _parse_game_row(row, team)
        except ExtractionError as e:
            logger.warning(f"Skipping malformed row {index} on {team.name} page: {e}")
            continue

        if raw is not None:
            rows.append(raw)

    if state is ScanState.BEFORE:
        logger.warning(f"No '{REGULAR_SEASON_MARKER}' section found on {team.name} page")

    logger.debug(f"Extracted {len(rows)} home games for {team.name}")
    return rows
