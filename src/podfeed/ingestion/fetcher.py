"""HTTP transport for retrieving podcast feed documents.

Fetches feed text with httpx, retrying connection failures and timeouts
with exponential backoff, and maps failures to the podfeed error types.
"""

import httpx
import structlog
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from podfeed.config import get_settings
from podfeed.errors import FeedFetchError, FeedHTTPError, FeedTimeoutError

logger = structlog.get_logger(__name__)


class FeedFetcher:
    """Downloads feed documents over HTTP."""

    def __init__(
        self,
        timeout_seconds: float | None = None,
        http2: bool | None = None,
        max_attempts: int | None = None,
        follow_redirects: bool | None = None,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the feed fetcher.

        Unset arguments fall back to the ``PODFEED_FETCH_*`` settings.

        Args:
            timeout_seconds: HTTP request timeout.
            http2: Negotiate HTTP/2 when available.
            max_attempts: Attempts on connection errors and timeouts.
            follow_redirects: Follow HTTP redirects.
            user_agent: User-Agent header sent with requests.
            transport: Custom httpx transport, mainly for tests.
        """
        settings = get_settings().fetch
        self.timeout = settings.timeout_seconds if timeout_seconds is None else timeout_seconds
        self.http2 = settings.http2 if http2 is None else http2
        self.max_attempts = settings.max_attempts if max_attempts is None else max_attempts
        self.follow_redirects = (
            settings.follow_redirects if follow_redirects is None else follow_redirects
        )
        self.user_agent = user_agent or settings.user_agent
        self.transport = transport
        self.logger = logger.bind(component="feed_fetcher")

    def fetch(self, feed_url: str) -> str:
        """Fetch the text of a feed.

        Args:
            feed_url: URL of the RSS feed.

        Returns:
            The decoded response body.

        Raises:
            FeedTimeoutError: If the request timed out on every attempt.
            FeedHTTPError: If the server answered with an error status.
            FeedFetchError: On any other network failure.
        """
        self.logger.info("Fetching feed", url=feed_url)

        try:
            for attempt in Retrying(
                retry=retry_if_exception_type(httpx.TransportError),
                stop=stop_after_attempt(self.max_attempts),
                wait=wait_exponential(multiplier=1, min=1, max=10),
                before_sleep=self._log_retry,
                reraise=True,
            ):
                with attempt:
                    text = self._get(feed_url)
        except httpx.TimeoutException as e:
            raise FeedTimeoutError(
                f"Timeout fetching podcast feed: {feed_url}", feed_url=feed_url
            ) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            raise FeedHTTPError(
                f"Failed to fetch podcast (HTTP {status_code}): {feed_url}",
                status_code=status_code,
                feed_url=feed_url,
            ) from e
        except httpx.HTTPError as e:
            raise FeedFetchError(f"Failed to fetch podcast: {e}", feed_url=feed_url) from e

        self.logger.info("Fetched feed", url=feed_url, size_kb=round(len(text) / 1024, 1))
        return text

    def _get(self, url: str) -> str:
        with httpx.Client(
            timeout=self.timeout,
            http2=self.http2,
            follow_redirects=self.follow_redirects,
            headers={"User-Agent": self.user_agent},
            transport=self.transport,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.text

    def _log_retry(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        self.logger.warning(
            "Retrying feed fetch",
            attempt=retry_state.attempt_number,
            error=str(error),
        )
