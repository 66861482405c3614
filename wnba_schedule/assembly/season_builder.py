from typing import List, Optional

from loguru import logger

from wnba_schedule.config.settings import settings
from wnba_schedule.config.teams import all_teams
from wnba_schedule.extraction.row_extractor import extract_home_games
from wnba_schedule.models.game import Game, RawGameRow
from wnba_schedule.models.team import Team
from wnba_schedule.normalization.normalizer import NormalizationError, Normalizer
from wnba_schedule.scrapers.base_scraper import ScraperError
from wnba_schedule.scrapers.espn_schedule_scraper import EspnScheduleScraper


class SeasonBuildError(Exception):
    """Raised when a season build fails; names the team and pipeline stage."""

    def __init__(self, stage: str, message: str, team: Optional[str] = None):
        self.stage = stage
        self.team = team
        where = f" for team '{team}'" if team else ""
        super().__init__(f"Season build failed at {stage}{where}: {message}")


class SeasonBuilder:
    """Builds the date-sorted list of a season's final games across all teams."""

    def __init__(
        self,
        scraper: Optional[EspnScheduleScraper] = None,
        teams: Optional[List[Team]] = None,
        skip_failed_teams: Optional[bool] = None,
    ):
        self.scraper = scraper or EspnScheduleScraper()
        self.teams = teams if teams is not None else all_teams()
        self.skip_failed_teams = (
            settings.skip_failed_teams
            if skip_failed_teams is None
            else skip_failed_teams
        )

    async def collect_raw_rows(self, year: int) -> List[RawGameRow]:
        """Fetches every team's page in turn and gathers its home game rows."""
        raw_rows: List[RawGameRow] = []

        for team in self.teams:
            logger.info(f"Scraping {team.name} ({team.id})")
            try:
                doc = await self.scraper.fetch_schedule(team.id, year)
            except ScraperError as e:
                if self.skip_failed_teams:
                    logger.warning(f"Skipping {team.name}: {e}")
                    continue
                raise SeasonBuildError("fetch", str(e), team=team.id) from e

            team_rows = extract_home_games(doc, team)
            logger.info(f"Found {len(team_rows)} home games for {team.name}")
            raw_rows.extend(team_rows)

        return raw_rows

    async def build_season(self, year: int) -> List[Game]:
        """Scrapes, cleans and sorts all final regular-season games of a year.

        Games with the same date keep the order in which they were collected.
        """
        logger.info(f"Building {year} season from {len(self.teams)} teams")
        raw_rows = await self.collect_raw_rows(year)

        normalizer = Normalizer(season_year=year)
        team_ids = {team.name: team.id for team in self.teams}
        games: List[Game] = []
        for raw in normalizer.filter_final(raw_rows):
            try:
                games.append(normalizer.to_game(raw))
            except NormalizationError as e:
                raise SeasonBuildError(
                    "normalize", str(e), team=team_ids.get(raw.home_team, raw.home_team)
                ) from e

        games.sort(key=lambda game: game.date)
        logger.success(f"Built {len(games)} games for the {year} season")
        return games

    async def close(self):
        await self.scraper.close()


async def build_season(
    year: int, scraper: Optional[EspnScheduleScraper] = None
) -> List[Game]:
    """Runs a full season build and closes the HTTP client afterwards."""
    builder = SeasonBuilder(scraper=scraper)
    try:
        return await builder.build_season(year)
    finally:
        await builder.close()
