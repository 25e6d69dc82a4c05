"""Offline seed comments for demo mode and tests.

Each seed carries the verdict, rationale and draft reply that the
FixedAnswerClassifier hands back, plus the review status it starts with, so
demo mode shows realistic triage results without network access or API keys.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from leadstream_core.models import ClassificationResult, RawComment, ReviewStatus
from leadstream_core.sources.base import BaseSource

_AVATAR_URL = "https://api.dicebear.com/7.x/avataaars/svg?seed={}"


@dataclass(frozen=True)
class _Seed:
    external_id: str
    author_name: str
    text: str
    item_label: str
    age: timedelta
    avatar_seed: str
    answer: ClassificationResult
    review_status: ReviewStatus = ReviewStatus.UNREAD


SEED_COMMENTS: tuple[_Seed, ...] = (
    _Seed(
        external_id="c1",
        author_name="Sarah Jenkins",
        text=(
            "Great video! I am actually looking to move to the area next month. "
            "Do you have a list of recommended buyer agents?"
        ),
        item_label="Top 5 Neighborhoods in 2024",
        age=timedelta(0),
        avatar_seed="Sarah",
        answer=ClassificationResult(
            is_lead=True,
            rationale="User explicitly states intent to move and asks for agent recommendations.",
            suggested_reply=(
                "Hi Sarah! Thanks for watching. I'd love to help you find the perfect spot. "
                "I have a trusted list of agents I work with. Could you email me at [Email] "
                "or DM me on Instagram so I can send that over?"
            ),
        ),
    ),
    _Seed(
        external_id="c2",
        author_name="Mike_Gaming_99",
        text="First!! Love the editing on this one.",
        item_label="House Tour: $2M Modern Farmhouse",
        age=timedelta(days=1),
        avatar_seed="Mike",
        review_status=ReviewStatus.REPLIED,
        answer=ClassificationResult(
            is_lead=False,
            rationale="General compliment about video editing.",
            suggested_reply="Thanks Mike! Appreciate the support.",
        ),
    ),
    _Seed(
        external_id="c3",
        author_name="InvestWithTom",
        text=(
            "What is the cap rate you usually see for duplexes in this zip code? "
            "Im looking to invest around $500k."
        ),
        item_label="Investment Property Guide",
        age=timedelta(days=2),
        avatar_seed="Tom",
        answer=ClassificationResult(
            is_lead=True,
            rationale="User is an investor asking for specific financial metrics (cap rate) with a budget.",
            suggested_reply=(
                "Great question Tom. In this zip, we're seeing around 5-6% for turnkey duplexes. "
                "I have a spreadsheet of recent comps. Shoot me an email and we can discuss "
                "your $500k target specifically."
            ),
        ),
    ),
)


def fixture_answers() -> dict[str, ClassificationResult]:
    """Map each seed comment's text to its embedded verdict."""
    return {seed.text: seed.answer for seed in SEED_COMMENTS}


class FixtureSource(BaseSource):
    def __init__(self, now: datetime | None = None, delay: float = 0.0):
        self._now = now
        self._delay = delay

    async def fetch_batch(self) -> list[RawComment]:
        if self._delay > 0:
            await asyncio.sleep(self._delay)
        now = self._now or datetime.now(timezone.utc)
        return [
            RawComment(
                external_id=seed.external_id,
                author_name=seed.author_name,
                text=seed.text,
                item_label=seed.item_label,
                published_at=now - seed.age,
                avatar_ref=_AVATAR_URL.format(seed.avatar_seed),
            )
            for seed in SEED_COMMENTS
        ]

    def initial_status(self, external_id: str) -> ReviewStatus:
        for seed in SEED_COMMENTS:
            if seed.external_id == external_id:
                return seed.review_status
        return ReviewStatus.UNREAD
