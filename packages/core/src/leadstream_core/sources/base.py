"""Abstract comment source interface.

The triage pipeline depends on BaseSource, not on a concrete adapter, so the
offline fixture set and the live YouTube listing are interchangeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from leadstream_core.models import ReviewStatus

if TYPE_CHECKING:
    from leadstream_core.models import RawComment


class BaseSource(ABC):
    """Produces one batch of normalized comments per call."""

    @abstractmethod
    async def fetch_batch(self) -> list[RawComment]:
        """Return one batch in the order the underlying source returned it.

        Raises ConfigurationError when required settings are missing and
        SourceFetchError when retrieval fails. Never returns a partial batch.
        """

    def initial_status(self, external_id: str) -> ReviewStatus:
        """Review status a freshly triaged comment starts with.

        Live comments are always unread; only seeded data overrides this.
        """
        return ReviewStatus.UNREAD
