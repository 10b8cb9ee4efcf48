from .noop_provider import NoopEnhancer
from .openai_provider import OpenAIEnhancer, openai_key_configured

__all__ = ["NoopEnhancer", "OpenAIEnhancer", "openai_key_configured"]
