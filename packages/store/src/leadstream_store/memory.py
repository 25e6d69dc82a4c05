"""ReviewStore — in-memory review state for the current session.

The store is the only mutable shared state in leadstream. All mutation goes
through replace_all() and toggle_replied(); readers get fresh lists, never the
internal one.

replace_all() validates the new list, then installs it in a single assignment:
view() and count() see either the previous batch or the new one in full.
Badge counts are derived on every call; nothing is cached.

Everything runs on one event loop. Overlapping triage runs are not cancelled;
replace_all() calls apply in completion order, so the last run to finish wins.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from leadstream_core.models import ReviewStatus, TriagedComment
from leadstream_store.filters import LeadFilter, StatusFilter

logger = logging.getLogger(__name__)


class ReviewStore:
    def __init__(self):
        self._comments: list[TriagedComment] = []

    def __len__(self) -> int:
        return len(self._comments)

    def replace_all(self, batch: Iterable[TriagedComment]) -> None:
        """Discard the current contents and install batch.

        Raises ValueError, leaving the store untouched, if two records share an
        external_id.
        """
        new_comments = list(batch)
        seen: set[str] = set()
        for comment in new_comments:
            if comment.external_id in seen:
                raise ValueError(f"Duplicate comment id in batch: {comment.external_id!r}")
            seen.add(comment.external_id)
        self._comments = new_comments
        logger.debug("ReviewStore now holds %d comments", len(new_comments))

    def get(self, external_id: str) -> TriagedComment | None:
        for comment in self._comments:
            if comment.external_id == external_id:
                return comment
        return None

    def toggle_replied(self, external_id: str) -> TriagedComment | None:
        """Flip a record between unread and replied and return the new record.

        Returns None without touching the store when the id is not present,
        e.g. because a reload replaced the batch it came from.
        """
        comments = self._comments
        for index, comment in enumerate(comments):
            if comment.external_id == external_id:
                updated = comment.with_status(comment.review_status.toggled())
                self._comments = [*comments[:index], updated, *comments[index + 1 :]]
                return updated
        logger.debug("toggle_replied: no comment with id %r", external_id)
        return None

    def view(
        self,
        status: StatusFilter = StatusFilter.ANY,
        lead: LeadFilter = LeadFilter.ANY,
    ) -> list[TriagedComment]:
        return [c for c in self._comments if status.matches(c) and lead.matches(c)]

    def count(self, predicate: Callable[[TriagedComment], bool] | None = None) -> int:
        if predicate is None:
            return len(self._comments)
        return sum(1 for c in self._comments if predicate(c))

    def unread_leads(self) -> int:
        return self.count(lambda c: c.is_lead and c.review_status is ReviewStatus.UNREAD)
