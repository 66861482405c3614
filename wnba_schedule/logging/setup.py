import sys
import logging

from loguru import logger

from wnba_schedule.config.settings import settings


class InterceptHandler(logging.Handler):
    """Routes standard logging records (httpx, httpcore) into Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging() -> None:
    """Configures Loguru logger based on application settings."""
    logger.remove()  # Remove default handler

    # Basic console logging
    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    if settings.log_file:
        logger.add(
            settings.log_file,
            level="DEBUG",
            rotation="10 MB",
            retention="7 days",
            encoding="utf-8",
        )
        logger.info(f"File logging enabled at {settings.log_file}")

    logger.info(f"Logging initialized with level: {settings.log_level}")

    # httpx logs every request at INFO through the standard library
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logger.info("Standard logging intercepted.")
