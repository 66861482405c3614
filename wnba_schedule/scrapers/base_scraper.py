from typing import Any, Dict, Optional

import httpx
from bs4 import BeautifulSoup
from loguru import logger

from wnba_schedule.config.settings import settings


class ScraperError(Exception):
    """Custom exception for scraper-related errors."""

    pass


class FetchError(ScraperError):
    """Exception raised when a page cannot be retrieved (network or HTTP status)."""

    pass


class ParseError(ScraperError):
    """Exception raised when a response body cannot be parsed as markup."""

    pass


class BaseScraper:
    """Base class for HTML page scrapers.

    Requests are made one at a time and never retried; a failed request
    surfaces immediately as a FetchError.
    """

    source: str = "Unknown"

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout),
            follow_redirects=True,
            headers={"User-Agent": settings.user_agent},
        )

    async def _make_request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> httpx.Response:
        """Makes an asynchronous HTTP request and checks the response status."""
        logger.debug(f"Making request: {method} {url}")
        try:
            response = await self.client.request(
                method,
                url,
                headers=headers,
                params=params,
                **kwargs,
            )
            response.raise_for_status()  # Raises HTTPStatusError for 4xx/5xx
            logger.debug(f"Request successful: {response.status_code} for {url}")
            return response

        except httpx.HTTPStatusError as e:
            logger.error(
                f"HTTP error during request to {self.source}: {e.response.status_code} for {url}"
            )
            raise FetchError(
                f"HTTP error {e.response.status_code} fetching {url}"
            ) from e
        except httpx.RequestError as e:
            # Network errors, timeouts etc.
            logger.error(f"Request error for {self.source} at {url}: {e!r}")
            raise FetchError(f"Request to {url} failed: {e!r}") from e

    def _parse_html(self, markup: str, url: str) -> BeautifulSoup:
        """Parses a response body into a document, rejecting empty or non-markup bodies."""
        if not markup or not markup.strip():
            raise ParseError(f"Empty response body from {url}")
        try:
            soup = BeautifulSoup(markup, settings.html_parser)
        except Exception as e:
            logger.exception(f"HTML parser failed on response from {url}: {e}")
            raise ParseError(f"Could not parse markup from {url}") from e

        if soup.find() is None:
            raise ParseError(f"Response from {url} contains no markup elements")
        return soup

    async def close(self):
        """Closes the underlying HTTP client."""
        await self.client.aclose()
        logger.info(f"Closed HTTP client for {self.source}")
