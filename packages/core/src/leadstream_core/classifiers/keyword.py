"""Keyword heuristic classifier used against live comments.

A comment is a lead when its lower-cased text contains any trigger word as a
substring ("help" also matches "helpful"). The suggested reply is the same
template for both verdicts: it is a placeholder until a model-backed strategy
drafts replies, not an oversight.
"""

from __future__ import annotations

from typing import Iterable

from leadstream_core.classifiers.base import BaseClassifier
from leadstream_core.config import DEFAULT_REPLY_TEMPLATE, DEFAULT_TRIGGER_WORDS
from leadstream_core.models import ClassificationResult

LEAD_RATIONALE = "Detected intent keywords."
GENERAL_RATIONALE = "General comment."


class KeywordClassifier(BaseClassifier):
    """Deterministic trigger-word matcher.

    The API key is not used by the heuristic itself; it gates live analysis so
    that an unconfigured install reports "not configured" instead of guessing.
    """

    def __init__(
        self,
        api_key: str | None,
        trigger_words: Iterable[str] = DEFAULT_TRIGGER_WORDS,
        reply_template: str = DEFAULT_REPLY_TEMPLATE,
    ):
        self._api_key = api_key
        self.trigger_words = tuple(w.lower() for w in trigger_words if w)
        self.reply_template = reply_template

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def matches(self, text: str) -> list[str]:
        """Return the trigger words found in text, in trigger-word order."""
        lower = text.lower()
        return [w for w in self.trigger_words if w in lower]

    async def _classify(self, text: str) -> ClassificationResult:
        is_lead = bool(self.matches(text))
        return ClassificationResult(
            is_lead=is_lead,
            rationale=LEAD_RATIONALE if is_lead else GENERAL_RATIONALE,
            suggested_reply=self.reply_template,
        )
