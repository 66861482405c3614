# wnba_schedule/scrapers/espn_schedule_scraper.py

from typing import Optional

from bs4 import BeautifulSoup
from loguru import logger

from wnba_schedule.config.settings import settings
from .base_scraper import BaseScraper

SCHEDULE_PATH_TEMPLATE = "/{sport}/team/schedule/_/name/{team_id}/year/{year}"


class EspnScheduleScraper(BaseScraper):
    """Fetches per-team schedule pages from ESPN."""

    source: str = "ESPN"

    def __init__(
        self,
        *args,
        base_url: Optional[str] = None,
        sport: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.base_url = (base_url or settings.espn_base_url).rstrip("/")
        self.sport = sport or settings.sport

    def schedule_url(self, team_id: str, year: int) -> str:
        """Builds the schedule page URL for one team and season."""
        path = SCHEDULE_PATH_TEMPLATE.format(
            sport=self.sport, team_id=team_id, year=year
        )
        return f"{self.base_url}{path}"

    async def fetch_schedule(self, team_id: str, year: int) -> BeautifulSoup:
        """Fetches and parses a team's schedule page.

        Raises:
            FetchError: the request failed or returned a non-success status.
            ParseError: the body could not be parsed as HTML.
        """
        url = self.schedule_url(team_id, year)
        logger.info(f"Fetching {year} schedule for '{team_id}' from {url}")
        response = await self._make_request(method="GET", url=url)
        return self._parse_html(response.text, url)
