from __future__ import annotations

from atsmatch.core.errors import EnhancementFailure


class NoopEnhancer:
    """Enhancer used when no text-generation backend is configured."""

    def __init__(self, reason: str = "text enhancement is not configured") -> None:
        self._reason = reason

    async def enhance(self, prompt: str) -> str:
        raise EnhancementFailure(self._reason, code="enhancement_disabled")
