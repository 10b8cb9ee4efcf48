from .factory import get_text_enhancer
from .providers import NoopEnhancer, OpenAIEnhancer
from .types import TextEnhancer

__all__ = ["TextEnhancer", "NoopEnhancer", "OpenAIEnhancer", "get_text_enhancer"]
