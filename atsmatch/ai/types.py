from __future__ import annotations

from typing import Protocol


class TextEnhancer(Protocol):
    async def enhance(self, prompt: str) -> str: ...
