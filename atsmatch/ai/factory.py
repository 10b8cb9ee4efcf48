import logging

from atsmatch.ai.config import load_ai_config
from atsmatch.ai.providers.noop_provider import NoopEnhancer
from atsmatch.ai.providers.openai_provider import OpenAIEnhancer, openai_key_configured
from atsmatch.ai.types import TextEnhancer

logger = logging.getLogger(__name__)


def get_text_enhancer() -> TextEnhancer:
    cfg = load_ai_config()

    if not cfg.enabled or cfg.provider in {"none", "noop"}:
        return NoopEnhancer("text enhancement disabled by configuration")

    if cfg.provider == "openai":
        if not openai_key_configured():
            logger.info("text_enhancer_fallback provider=openai reason=missing_api_key")
            return NoopEnhancer("OPENAI_API_KEY is missing")
        return OpenAIEnhancer(model=cfg.model)

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
