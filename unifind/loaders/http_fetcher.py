# Path: unifind/loaders/http_fetcher.py
"""
HTTP/HTTPS Fetcher with Retry Logic

Reliable document fetching with automatic retry and exponential backoff.

Features:
- Automatic retry with exponential backoff (connection errors, timeouts)
- Connection pooling
- Timeout handling
"""

from typing import Optional
from datetime import datetime

import requests
from requests import Session
from tenacity import Retrying, stop_after_attempt, wait_exponential, retry_if_exception_type

from ..config_loader import ConfigLoader
from ..core.logger import get_input_logger


class HTTPFetcher:
    """
    HTTP/HTTPS fetcher with retry logic.

    HTTP status errors (4xx, 5xx) are raised immediately; only
    connection errors and timeouts are retried.

    Example:
        fetcher = HTTPFetcher(config)
        content = fetcher.fetch("https://www.unicode.org/Public/UCD/latest/ucd/NamesList.txt")
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        session: Optional[Session] = None,
    ):
        """
        Initialize HTTP fetcher.

        Args:
            config: Optional ConfigLoader instance
            session: Optional pre-built session (tests inject a mock)
        """
        self.config = config if config else ConfigLoader()
        self.logger = get_input_logger('http_fetcher')

        # Get configuration
        self.http_timeout = self.config.get('http_timeout', 30)
        self.max_retries = max(1, self.config.get('http_max_retries', 3))
        self.backoff_min = self.config.get('http_backoff_min', 2.0)
        self.backoff_max = self.config.get('http_backoff_max', 10.0)
        self.user_agent = self.config.get('user_agent', 'unifind')

        self.session = session if session is not None else self._create_session()

    def _create_session(self) -> Session:
        """Create configured HTTP session with pooling."""
        session = Session()

        session.headers.update({
            'User-Agent': self.user_agent,
            'Accept': 'text/plain, */*',
            'Accept-Encoding': 'gzip, deflate'
        })

        return session

    def fetch(self, url: str) -> bytes:
        """
        Fetch resource with retry logic.

        Args:
            url: URL to fetch

        Returns:
            Response body

        Raises:
            requests.HTTPError: For HTTP errors (4xx, 5xx)
            requests.Timeout: When every attempt timed out
            requests.ConnectionError: When every attempt failed to connect
        """
        retrying = Retrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=1, min=self.backoff_min, max=self.backoff_max),
            retry=retry_if_exception_type((requests.exceptions.ConnectionError,
                                           requests.exceptions.Timeout)),
            reraise=True
        )

        attempts = 0
        start_time = datetime.now()

        try:
            for attempt in retrying:
                with attempt:
                    attempts += 1
                    response = self._get(url)
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Error fetching {url} after {attempts} attempt(s): {e}")
            raise

        duration = (datetime.now() - start_time).total_seconds()
        self.logger.info(
            f"Fetched {url}: {len(response.content)} bytes in {duration:.2f}s "
            f"({attempts} attempt(s))"
        )

        return response.content

    def _get(self, url: str) -> requests.Response:
        """Single GET attempt; raises for HTTP error statuses."""
        self.logger.debug(f"Fetching {url}")

        response = self.session.get(
            url,
            timeout=self.http_timeout,
            allow_redirects=True
        )
        response.raise_for_status()
        return response


__all__ = ['HTTPFetcher']
