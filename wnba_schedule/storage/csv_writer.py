import csv
import io
from pathlib import Path
from typing import Iterable, Union

from loguru import logger

from wnba_schedule.models.game import Game

CSV_HEADER = ["date", "home", "home.score", "away", "away.score", "overtime"]


def render_games_csv(games: Iterable[Game]) -> str:
    """Renders games as unquoted comma-separated text with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(
        buffer, quoting=csv.QUOTE_NONE, escapechar="\\", lineterminator="\n"
    )
    writer.writerow(CSV_HEADER)
    for game in games:
        writer.writerow(game.to_row())
    return buffer.getvalue()


def write_games_csv(games: Iterable[Game], path: Union[str, Path]) -> Path:
    """Writes the season dataset to a CSV file, replacing any previous one."""
    games = list(games)
    output_path = Path(path)
    content = render_games_csv(games)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except IOError as e:
        logger.error(f"Failed to write games to {output_path}: {e}")
        raise
    logger.success(f"Saved {len(games)} games to {output_path}")
    return output_path
