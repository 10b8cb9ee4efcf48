import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    enabled: bool


def load_ai_config() -> AIConfig:
    provider = os.getenv("AI_PROVIDER", "openai").strip().lower()
    model = (os.getenv("AI_MODEL") or os.getenv("OPENAI_MODEL") or "gpt-4o-mini").strip()
    enabled = os.getenv("ENHANCEMENT_ENABLED", "true").strip().lower() in {"1", "true", "yes", "y", "on"}
    return AIConfig(provider=provider, model=model, enabled=enabled)
