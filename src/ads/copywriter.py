"""Ad copy generation via the OpenAI chat completions API."""

from __future__ import annotations

import logging

from openai import AsyncOpenAI, OpenAIError

from src.ads.prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class CopyGenerationFailure(Exception):
    """The language model did not return usable ad copy."""


class AdCopywriter:
    """Turns a prompt into ad copy with a single chat completion."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4",
        max_tokens: int = 150,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._client = client or AsyncOpenAI(api_key=api_key)
        self._model = model
        self._max_tokens = max_tokens

    async def write(self, prompt: str) -> str:
        """Return the generated ad copy for *prompt*.

        Raises ``CopyGenerationFailure`` on API errors or an empty completion.
        """
        logger.debug("generating ad copy", extra={"model": self._model, "prompt_length": len(prompt)})
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=self._max_tokens,
            )
        except OpenAIError as exc:
            raise CopyGenerationFailure("ad copy request failed") from exc

        if not response.choices or not response.choices[0].message.content:
            raise CopyGenerationFailure("ad copy response was empty")

        ad_copy = response.choices[0].message.content.strip()
        usage = response.usage
        logger.info(
            "ad copy generated",
            extra={
                "model": self._model,
                "length": len(ad_copy),
                "total_tokens": usage.total_tokens if usage else 0,
            },
        )
        return ad_copy
