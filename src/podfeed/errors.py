"""Feed loading error classes."""


class PodcastFeedError(Exception):
    """Base error for feed fetching and parsing failures."""

    def __init__(self, message: str, feed_url: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.feed_url = feed_url


class FeedParseError(PodcastFeedError):
    """The feed document is not well-formed markup."""

    pass


class FeedFetchError(PodcastFeedError):
    """Generic network failure while fetching a feed."""

    pass


class FeedTimeoutError(FeedFetchError):
    """The feed request timed out."""

    pass


class FeedHTTPError(FeedFetchError):
    """The feed server answered with an error status."""

    def __init__(self, message: str, status_code: int, feed_url: str | None = None) -> None:
        super().__init__(message, feed_url=feed_url)
        self.status_code = status_code
