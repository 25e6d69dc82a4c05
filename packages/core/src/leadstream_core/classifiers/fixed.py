"""Fixed-answer classifier for fixture data.

Fixture comments already carry their verdict, so classification is a lookup
keyed by comment text rather than an analysis.
"""

from __future__ import annotations

from typing import Mapping

from leadstream_core.classifiers.base import GENERIC_REPLY, BaseClassifier
from leadstream_core.models import ClassificationResult

NO_FIXTURE_ANSWER = ClassificationResult(
    is_lead=False,
    rationale="No fixture answer for this comment.",
    suggested_reply=GENERIC_REPLY,
)


class FixedAnswerClassifier(BaseClassifier):
    def __init__(self, answers: Mapping[str, ClassificationResult]):
        self._answers = dict(answers)

    async def _classify(self, text: str) -> ClassificationResult:
        return self._answers.get(text, NO_FIXTURE_ANSWER)
