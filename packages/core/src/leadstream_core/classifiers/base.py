"""Base classifier implementing the Template Method pattern.

Every strategy shares the same outer contract:
    classify() → is_configured?  ── no ──→ NOT_CONFIGURED
                     │ yes
                     └→ _classify()   ← only this differs per strategy
                          └─ raises → fallback result (never propagates)

Subclasses implement two things only:
  - is_configured: whether the credentials the strategy needs are present
  - _classify: produce a ClassificationResult for one comment text

The "never raise" guarantee lives here so a single bad comment, a missing key
or a flaky provider can never abort a triage batch.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from leadstream_core.models import ClassificationResult

logger = logging.getLogger(__name__)

GENERIC_REPLY = "Thanks!"

NOT_CONFIGURED = ClassificationResult(
    is_lead=False,
    rationale="Classifier not configured (no API key).",
    suggested_reply=GENERIC_REPLY,
)


class BaseClassifier(ABC):
    # ------------------------------------------------------------------ #
    # Public interface                                                     #
    # ------------------------------------------------------------------ #

    @property
    def is_configured(self) -> bool:
        return True

    async def classify(self, text: str) -> ClassificationResult:
        """Return a verdict, rationale and draft reply for one comment.

        Concrete here because the absence and failure handling is identical for
        every strategy. Never raises.
        """
        if not self.is_configured:
            return NOT_CONFIGURED
        try:
            return await self._classify(text)
        except Exception as e:
            logger.warning(
                "%s failed to classify comment (%s): %s",
                self.__class__.__name__,
                type(e).__name__,
                e,
            )
            return ClassificationResult(
                is_lead=False,
                rationale=f"Classification failed: {type(e).__name__}.",
                suggested_reply=GENERIC_REPLY,
            )

    # ------------------------------------------------------------------ #
    # Abstract — implement in each strategy                               #
    # ------------------------------------------------------------------ #

    @abstractmethod
    async def _classify(self, text: str) -> ClassificationResult:
        """Classify one comment. May raise; classify() absorbs the failure."""
