"""View filters for the review store: the status tab and the leads-only toggle."""

from __future__ import annotations

from enum import Enum

from leadstream_core.models import ReviewStatus, TriagedComment


class StatusFilter(str, Enum):
    UNREAD = "unread"
    REPLIED = "replied"
    ANY = "any"

    def matches(self, comment: TriagedComment) -> bool:
        if self is StatusFilter.ANY:
            return True
        return comment.review_status is ReviewStatus(self.value)


class LeadFilter(str, Enum):
    LEADS = "leads"
    ANY = "any"

    def matches(self, comment: TriagedComment) -> bool:
        return self is LeadFilter.ANY or comment.is_lead
