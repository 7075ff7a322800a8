"""Post-parse normalization of a podcast record."""

from podfeed.models import Episode, Podcast


def _published_sort_key(episode: Episode) -> float:
    # Undated episodes sort as the earliest possible timestamp.
    return episode.published.timestamp() if episode.published else float("-inf")


def finalize_podcast(podcast: Podcast) -> Podcast:
    """Order episodes newest first, default ``updated`` and normalize categories.

    The sort is stable, so episodes with equal (or equally missing)
    publication dates keep their document order.

    Args:
        podcast: Podcast collected from a complete document.

    Returns:
        The same podcast, normalized in place.
    """
    podcast.episodes = sorted(podcast.episodes, key=_published_sort_key, reverse=True)

    if podcast.updated is None:
        podcast.updated = podcast.episodes[0].published if podcast.episodes else None

    podcast.categories = sorted(set(podcast.categories))
    return podcast
