"""Live comment source backed by the YouTube Data API v3.

One request per batch: ``commentThreads.list`` scoped to every thread on the
channel (``allThreadsRelatedToChannelId``) and bounded to a single page. The
listing does not include the title of the video a thread belongs to, so every
comment gets UNKNOWN_ITEM_LABEL instead of an empty label.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Any

import aiohttp

from leadstream_core.errors import ConfigurationError, SourceFetchError
from leadstream_core.models import RawComment
from leadstream_core.sources.base import BaseSource

logger = logging.getLogger(__name__)

COMMENT_THREADS_URL = "https://www.googleapis.com/youtube/v3/commentThreads"
DEFAULT_PAGE_SIZE = 10
UNKNOWN_ITEM_LABEL = "Unknown Video (API Limitation)"


class YouTubeSource(BaseSource):
    """Fetches the latest comment threads for a channel.

    A caller-supplied ``session`` is reused and left open; otherwise a
    ClientSession is opened and closed around each fetch.
    """

    def __init__(
        self,
        api_key: str | None,
        channel_id: str | None,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: float = 10.0,
        session: aiohttp.ClientSession | None = None,
    ):
        self._api_key = api_key
        self._channel_id = channel_id
        self._page_size = page_size
        self._timeout = timeout
        self._session = session

    def _check_configured(self) -> None:
        missing = []
        if not self._api_key:
            missing.append("YOUTUBE_API_KEY")
        if not self._channel_id:
            missing.append("channel_id")
        if missing:
            raise ConfigurationError(f"Remote mode requires {' and '.join(missing)} to be set.")

    async def fetch_batch(self) -> list[RawComment]:
        self._check_configured()
        params = {
            "part": "snippet",
            "allThreadsRelatedToChannelId": self._channel_id,
            "maxResults": self._page_size,
            "key": self._api_key,
        }

        if self._session is not None:
            data = await self._request(self._session, params)
        else:
            async with aiohttp.ClientSession() as session:
                data = await self._request(session, params)

        items = data.get("items") or []
        logger.debug("YouTube returned %d comment threads for %s", len(items), self._channel_id)
        return [self._to_raw_comment(item) for item in items]

    async def _request(self, session, params: dict) -> dict[str, Any]:
        try:
            async with session.get(
                COMMENT_THREADS_URL,
                params=params,
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as response:
                status = response.status
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise SourceFetchError(f"Failed to reach the YouTube API: {type(e).__name__}: {e}") from e
        except ValueError as e:
            raise SourceFetchError(f"YouTube API returned malformed JSON: {e}") from e

        if not isinstance(data, dict):
            raise SourceFetchError("YouTube API returned an unexpected payload.", status=status)
        if "error" in data:
            error = data["error"]
            message = (error.get("message") if isinstance(error, dict) else error) or "unknown error"
            raise SourceFetchError(f"YouTube API error: {message}", status=status)
        if status != 200:
            raise SourceFetchError(f"YouTube API returned HTTP {status}.", status=status)
        return data

    @staticmethod
    def _to_raw_comment(item: dict) -> RawComment:
        try:
            snippet = item["snippet"]["topLevelComment"]["snippet"]
            return RawComment(
                external_id=item["id"],
                author_name=snippet["authorDisplayName"],
                text=snippet["textDisplay"],
                item_label=UNKNOWN_ITEM_LABEL,
                published_at=_parse_timestamp(snippet["publishedAt"]),
                avatar_ref=snippet.get("authorProfileImageUrl", ""),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise SourceFetchError(f"Malformed comment thread in YouTube response: {e!r}") from e


def _parse_timestamp(value: str) -> datetime:
    # YouTube uses RFC 3339 with a trailing "Z".
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
