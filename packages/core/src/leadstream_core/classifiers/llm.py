"""Shared LLM-backed classification.

All providers share the same algorithm:
    _classify() → _build_system_prompt() + _build_user_prompt()
               → _call_with_retry() → _call_api()   ← only this differs per provider
               → _parse()

Subclasses implement two things only:
  - __init__: validate and store the async SDK client
  - _call_api: make one raw API call and return the text response
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from abc import abstractmethod

from leadstream_core.classifiers.base import BaseClassifier
from leadstream_core.errors import ClassificationError
from leadstream_core.models import ClassificationResult

logger = logging.getLogger(__name__)

_MAX_RETRIES = 3
_MAX_TOKENS = 512


class LLMClassifier(BaseClassifier):
    MAX_RETRIES: int = _MAX_RETRIES
    MAX_TOKENS: int = _MAX_TOKENS

    def __init__(self, api_key: str | None, lead_criteria: str = ""):
        self._api_key = api_key
        self.lead_criteria = lead_criteria

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def _classify(self, text: str) -> ClassificationResult:
        system = self._build_system_prompt(self.lead_criteria)
        user = self._build_user_prompt(text)
        raw = await self._call_with_retry(system, user)
        if raw is None:
            raise ClassificationError(f"{self.__class__.__name__} API gave no response")
        return self._parse(raw)

    @abstractmethod
    async def _call_api(self, system_prompt: str, user_prompt: str) -> str:
        """Make a single API call and return the raw text response.

        It should raise on failure — _call_with_retry handles retries and logging.
        """

    async def _call_with_retry(self, system_prompt: str, user_prompt: str) -> str | None:
        """Retry _call_api up to MAX_RETRIES times with exponential backoff."""
        for attempt in range(self.MAX_RETRIES):
            try:
                return await self._call_api(system_prompt, user_prompt)
            except Exception as e:
                if attempt == self.MAX_RETRIES - 1:
                    logger.error(
                        "%s API failed after %d attempts: %s",
                        self.__class__.__name__,
                        self.MAX_RETRIES,
                        e,
                    )
                    return None
                delay = 2**attempt
                logger.warning(
                    "%s API error (attempt %d/%d): %s. Retrying in %ds...",
                    self.__class__.__name__,
                    attempt + 1,
                    self.MAX_RETRIES,
                    e,
                    delay,
                )
                await asyncio.sleep(delay)
        return None

    def _build_system_prompt(self, lead_criteria: str) -> str:
        return f"""You triage YouTube comments for a channel owner who sells a service.
Decide whether each comment is a sales lead and draft a reply.

{lead_criteria}"""

    def _build_user_prompt(self, text: str) -> str:
        return f"""## Comment
{text}

### Output Format:
Respond with **only** a valid JSON object:

{{
  "is_lead": <true|false>,
  "reason": "<one sentence explaining the verdict>",
  "reply": "<the draft reply>"
}}

Do not return any text outside the JSON block."""

    def _parse(self, raw: str) -> ClassificationResult:
        """Parse the model's raw text response into a ClassificationResult."""
        cleaned = re.sub(r"^```(?:json)?\s*", "", raw.strip())
        cleaned = re.sub(r"\s*```$", "", cleaned.strip())
        try:
            data = json.loads(cleaned)
        except json.JSONDecodeError:
            logger.warning(
                "%s: failed to parse response as JSON: %s",
                self.__class__.__name__,
                raw[:200],
            )
            raise ClassificationError("response is not valid JSON")

        if not isinstance(data, dict) or not isinstance(data.get("is_lead"), bool):
            raise ClassificationError("response is missing a boolean 'is_lead'")
        return ClassificationResult(
            is_lead=data["is_lead"],
            rationale=str(data.get("reason") or ""),
            suggested_reply=str(data.get("reply") or ""),
        )
