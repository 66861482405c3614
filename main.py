import sys
import asyncio
from typing import List

# --- Settings/Logging ---
from wnba_schedule.logging.setup import setup_logging
from wnba_schedule.config.settings import settings

setup_logging()

from loguru import logger

from wnba_schedule.assembly.season_builder import SeasonBuildError, build_season
from wnba_schedule.models.game import Game
from wnba_schedule.storage.csv_writer import write_games_csv

from rich import print
from rich.panel import Panel


def summarize(games: List[Game], output_path: str) -> Panel:
    """Builds the end-of-run summary panel."""
    if not games:
        return Panel("No final games found.", title=f"{settings.season_year} season")

    overtime_games = sum(1 for game in games if game.overtime)
    home_wins = sum(1 for game in games if game.home_score > game.away_score)
    lines = [
        f"Games: {len(games)}",
        f"Home wins: {home_wins} ({home_wins / len(games):.1%})",
        f"Overtime games: {overtime_games}",
        f"Dates: {games[0].date.isoformat()} to {games[-1].date.isoformat()}",
        f"Output: {output_path}",
    ]
    return Panel("\n".join(lines), title=f"{settings.season_year} season")


async def main() -> None:
    """Main entry point: scrape the configured season and write the CSV."""
    logger.info(
        f"Starting {settings.sport.upper()} schedule scrape for {settings.season_year}"
    )
    games = await build_season(settings.season_year)
    output_path = write_games_csv(games, settings.output_path)
    print(summarize(games, str(output_path)))


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except SeasonBuildError as e:
        logger.critical(f"{e}")
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
