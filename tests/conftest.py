"""Pytest configuration and fixtures."""

from typing import Callable, Dict, Sequence, Tuple

import httpx
import pytest
from bs4 import BeautifulSoup

from wnba_schedule.scrapers.espn_schedule_scraper import EspnScheduleScraper

BASE_URL = "http://espn.test"

# (date, host marker, opponent, result)
GameSpec = Tuple[str, str, str, str]


def _game_row(date_text: str, marker: str, opponent: str, result: str) -> str:
    if result[:1] in ("W", "L") and len(result) > 1:
        outcome, score = result[0], result[1:].strip()
        result_cell = (
            '<ul class="game-schedule">'
            f'<li class="game-status {"win" if outcome == "W" else "loss"}"><span>{outcome}</span></li>'
            f'<li class="score"><a href="#">{score}</a></li>'
            "</ul>"
        )
    else:
        result_cell = result
    return (
        '<tr class="oddrow">'
        f"<td>{date_text}</td>"
        '<td><ul class="game-schedule">'
        f'<li class="game-status">{marker}</li>'
        '<li class="logo-small logo-wnba-small"></li>'
        f'<li class="team-name"><a href="#">{opponent}</a></li>'
        "</ul></td>"
        f"<td>{result_cell}</td>"
        "<td>1-0</td>"
        "</tr>"
    )


def render_schedule_page(
    games: Sequence[GameSpec],
    preseason_games: Sequence[GameSpec] = (),
    extra_rows: Sequence[str] = (),
) -> str:
    """Builds a schedule page shaped like ESPN's team schedule table."""
    rows = ['<tr class="stathead"><td colspan="4">2015 Regular Season Schedule</td></tr>']
    rows.append(
        '<tr class="colhead"><td>DATE</td><td>OPPONENT</td><td>RESULT</td><td>W-L</td></tr>'
    )
    rows.extend(_game_row(*game) for game in games)
    rows.extend(extra_rows)
    if preseason_games:
        rows.append('<tr class="stathead"><td colspan="4">2015 Preseason Schedule</td></tr>')
        rows.append(
            '<tr class="colhead"><td>DATE</td><td>OPPONENT</td><td>RESULT</td><td>W-L</td></tr>'
        )
        rows.extend(_game_row(*game) for game in preseason_games)
    header = '<tr><td><a href="/wnba/">WNBA</a></td></tr>'
    return (
        "<html><body><div id='my-teams-table'><table class='tablehead'>"
        + header
        + "".join(rows)
        + "</table></div></body></html>"
    )


@pytest.fixture
def schedule_page() -> Callable[..., str]:
    return render_schedule_page


@pytest.fixture
def parse_page() -> Callable[[str], BeautifulSoup]:
    return lambda html: BeautifulSoup(html, "html.parser")


@pytest.fixture
def make_scraper() -> Callable[[Dict[str, object]], EspnScheduleScraper]:
    """Returns a factory for scrapers served by an in-memory transport.

    Keys are team ids; unknown ids get a 404.
    """

    def factory(pages: Dict[str, object]) -> EspnScheduleScraper:
        def handler(request: httpx.Request) -> httpx.Response:
            team_id = request.url.path.split("/name/")[1].split("/")[0]
            page = pages.get(team_id)
            if page is None:
                return httpx.Response(404, text="Not Found")
            if isinstance(page, Exception):
                raise page
            if isinstance(page, httpx.Response):
                return page
            return httpx.Response(200, text=page)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return EspnScheduleScraper(client=client, base_url=BASE_URL, sport="wnba")

    return factory
