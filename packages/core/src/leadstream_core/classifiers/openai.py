from __future__ import annotations

try:
    from openai import AsyncOpenAI as _AsyncOpenAI
except ImportError:
    _AsyncOpenAI = None  # type: ignore[assignment,misc]

from leadstream_core.classifiers.llm import LLMClassifier


class OpenAIClassifier(LLMClassifier):
    MODEL = "gpt-4o"
    TEMPERATURE = 0.0

    def __init__(self, api_key: str | None, lead_criteria: str = ""):
        super().__init__(api_key, lead_criteria)
        if _AsyncOpenAI is None:
            raise ImportError(
                "The 'openai' package is required for this classifier. "
                "Install it with: pip install 'leadstream[openai]'"
            )
        self.client = _AsyncOpenAI(api_key=api_key) if api_key else None

    async def _call_api(self, system_prompt: str, user_prompt: str) -> str:
        response = await self.client.chat.completions.create(
            model=self.MODEL,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=self.TEMPERATURE,
            max_tokens=self.MAX_TOKENS,
            response_format={"type": "json_object"},
        )
        return response.choices[0].message.content or ""
