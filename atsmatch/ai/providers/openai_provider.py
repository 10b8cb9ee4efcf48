from __future__ import annotations

import os
from typing import Optional

from openai import AsyncOpenAI

from atsmatch.core.config import settings
from atsmatch.core.errors import EnhancementFailure

_SYSTEM_PROMPT = (
    "You rewrite resume content for applicant tracking systems. "
    "Return only the requested text, without commentary or markdown headings."
)


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def openai_key_configured() -> bool:
    api_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    return bool(api_key) and not _looks_like_placeholder(api_key)


class OpenAIEnhancer:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        max_retries: Optional[int] = None,
        temperature: float = 0.4,
        max_output_tokens: int = 600,
    ):
        self._model = model
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens
        key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY is missing")

        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(base_url or os.getenv("OPENAI_BASE_URL") or None),
            timeout=timeout_s if timeout_s is not None else settings.openai_timeout_s,
            max_retries=max_retries if max_retries is not None else settings.openai_max_retries,
        )

    async def enhance(self, prompt: str) -> str:
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": _SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=self._temperature,
            max_tokens=self._max_output_tokens,
        )
        content = response.choices[0].message.content if response.choices else ""
        text = (content or "").strip()
        if not text:
            raise EnhancementFailure("OpenAI returned an empty completion", code="empty_response")
        return text
