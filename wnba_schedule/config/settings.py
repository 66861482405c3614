import logging
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # ESPN Source Configuration
    espn_base_url: str = Field(
        "http://espn.go.com", description="Host serving the team schedule pages."
    )
    sport: str = Field("wnba", description="Sport path segment in the schedule URL.")
    user_agent: str = Field(
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        description="User-Agent header sent with every request.",
    )
    request_timeout: float = Field(
        30.0, gt=0, description="Timeout in seconds for a single page request."
    )
    html_parser: str = Field(
        "html.parser", description="Tree builder handed to BeautifulSoup."
    )

    # Season Build Configuration
    season_year: int = Field(2015, ge=1997, description="Season to scrape.")
    output_path: str = Field("wnba15.csv", description="Destination of the CSV file.")
    skip_failed_teams: bool = Field(
        False,
        description="Skip a team whose page cannot be fetched instead of aborting the run.",
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )
    log_file: Optional[str] = Field(
        None, description="Optional path of a rotating log file."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
