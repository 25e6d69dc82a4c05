"""Comment triage data models.

RawComment and ClassificationResult are produced independently (by a source
adapter and a classifier strategy) and merged into a TriagedComment by the
triage pipeline. All three are frozen: the only field that ever changes after
creation is ``review_status``, and the review store changes it by swapping in
a replaced copy rather than mutating the record it handed out.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum


class SourceMode(str, Enum):
    FIXTURE = "fixture"
    REMOTE = "remote"


class ReviewStatus(str, Enum):
    UNREAD = "unread"
    REPLIED = "replied"

    def toggled(self) -> ReviewStatus:
        return ReviewStatus.UNREAD if self is ReviewStatus.REPLIED else ReviewStatus.REPLIED


@dataclass(frozen=True)
class RawComment:
    """A comment as retrieved from a source, before classification."""

    external_id: str
    author_name: str
    text: str
    item_label: str
    published_at: datetime
    avatar_ref: str


@dataclass(frozen=True)
class ClassificationResult:
    is_lead: bool
    rationale: str
    suggested_reply: str


@dataclass(frozen=True)
class TriagedComment:
    """A RawComment merged with its classification plus review metadata."""

    external_id: str
    author_name: str
    text: str
    item_label: str
    published_at: datetime
    avatar_ref: str
    is_lead: bool
    rationale: str
    suggested_reply: str
    review_status: ReviewStatus = ReviewStatus.UNREAD

    @classmethod
    def from_parts(
        cls,
        raw: RawComment,
        result: ClassificationResult,
        status: ReviewStatus = ReviewStatus.UNREAD,
    ) -> TriagedComment:
        return cls(
            external_id=raw.external_id,
            author_name=raw.author_name,
            text=raw.text,
            item_label=raw.item_label,
            published_at=raw.published_at,
            avatar_ref=raw.avatar_ref,
            is_lead=result.is_lead,
            rationale=result.rationale,
            suggested_reply=result.suggested_reply,
            review_status=status,
        )

    @property
    def replied(self) -> bool:
        return self.review_status is ReviewStatus.REPLIED

    def with_status(self, status: ReviewStatus) -> TriagedComment:
        return replace(self, review_status=status)
