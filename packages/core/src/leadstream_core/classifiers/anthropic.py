from __future__ import annotations

from leadstream_core.classifiers.llm import LLMClassifier


class AnthropicClassifier(LLMClassifier):
    MODEL = "claude-sonnet-4-20250514"
    # Verdicts should be repeatable for the same comment.
    TEMPERATURE = 0.0

    def __init__(self, api_key: str | None, lead_criteria: str = ""):
        super().__init__(api_key, lead_criteria)
        try:
            from anthropic import AsyncAnthropic
        except ImportError:
            raise ImportError(
                "The 'anthropic' package is required for this classifier. "
                "Install it with: pip install 'leadstream[anthropic]'"
            )
        self.client = AsyncAnthropic(api_key=api_key) if api_key else None

    async def _call_api(self, system_prompt: str, user_prompt: str) -> str:
        # Imported inside the method because the anthropic package is optional;
        # __init__ already validated it is installed before we reach here.
        from anthropic.types import TextBlock

        response = await self.client.messages.create(
            model=self.MODEL,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
            temperature=self.TEMPERATURE,
            max_tokens=self.MAX_TOKENS,
        )
        text_blocks = [block.text for block in response.content if isinstance(block, TextBlock)]
        return "".join(text_blocks).strip()
