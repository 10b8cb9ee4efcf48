import logging
import os
import sys
import unittest
from dataclasses import fields, replace
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch.ai import NoopEnhancer, OpenAIEnhancer, get_text_enhancer  # noqa: E402
from atsmatch.ai.config import AIConfig, load_ai_config  # noqa: E402
from atsmatch.core.config import settings  # noqa: E402
from atsmatch.core.errors import EnhancementFailure  # noqa: E402
from atsmatch.core.logging import configure_logging  # noqa: E402


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class TextEnhancerFactoryTests(unittest.TestCase):
    def test_disabled_enhancement_returns_noop(self):
        with patch.dict(os.environ, {"ENHANCEMENT_ENABLED": "false", "OPENAI_API_KEY": "sk-test"}):
            self.assertIsInstance(get_text_enhancer(), NoopEnhancer)

    def test_placeholder_key_returns_noop(self):
        with patch.dict(os.environ, {"AI_PROVIDER": "openai", "ENHANCEMENT_ENABLED": "true", "OPENAI_API_KEY": "your_key_here"}):
            self.assertIsInstance(get_text_enhancer(), NoopEnhancer)

    def test_real_key_returns_openai_enhancer(self):
        with patch.dict(os.environ, {"AI_PROVIDER": "openai", "ENHANCEMENT_ENABLED": "true", "OPENAI_API_KEY": "sk-test"}):
            self.assertIsInstance(get_text_enhancer(), OpenAIEnhancer)

    def test_unknown_provider_is_rejected(self):
        with patch.dict(os.environ, {"AI_PROVIDER": "carrier-pigeon", "ENHANCEMENT_ENABLED": "true"}):
            with self.assertRaises(ValueError):
                get_text_enhancer()

    def test_ai_config_is_read_per_call(self):
        with patch.dict(os.environ, {"AI_PROVIDER": " OpenAI ", "AI_MODEL": "gpt-4.1-mini", "ENHANCEMENT_ENABLED": "no"}):
            cfg = load_ai_config()
        self.assertEqual(cfg, AIConfig(provider="openai", model="gpt-4.1-mini", enabled=False))
        self.assertNotIn("ai_provider", {field.name for field in fields(settings)})


class ProviderTests(unittest.IsolatedAsyncioTestCase):
    async def test_noop_always_fails(self):
        with self.assertRaises(EnhancementFailure) as ctx:
            await NoopEnhancer().enhance("anything")
        self.assertEqual(ctx.exception.code, "enhancement_disabled")

    async def test_openai_enhancer_returns_stripped_completion(self):
        enhancer = OpenAIEnhancer(model="gpt-4o-mini", api_key="sk-test")
        create = AsyncMock(return_value=_completion("  Sharper objective.  "))
        enhancer._client = MagicMock()
        enhancer._client.chat.completions.create = create

        self.assertEqual(await enhancer.enhance("rewrite this"), "Sharper objective.")
        kwargs = create.await_args.kwargs
        self.assertEqual(kwargs["model"], "gpt-4o-mini")
        self.assertEqual(kwargs["messages"][-1], {"role": "user", "content": "rewrite this"})

    async def test_openai_enhancer_empty_completion_fails(self):
        enhancer = OpenAIEnhancer(model="gpt-4o-mini", api_key="sk-test")
        enhancer._client = MagicMock()
        enhancer._client.chat.completions.create = AsyncMock(return_value=_completion(None))
        with self.assertRaises(EnhancementFailure) as ctx:
            await enhancer.enhance("rewrite this")
        self.assertEqual(ctx.exception.code, "empty_response")


class LoggingSetupTests(unittest.TestCase):
    def test_sentry_initialised_only_with_dsn(self):
        with patch.object(logging, "basicConfig") as basic_config, patch("sentry_sdk.init") as sentry_init:
            with patch("atsmatch.core.logging.settings", replace(settings, sentry_dsn=None)):
                configure_logging("DEBUG")
            sentry_init.assert_not_called()
            basic_config.assert_called_once_with(level="DEBUG", format="%(message)s")

            with patch("atsmatch.core.logging.settings", replace(settings, sentry_dsn="https://key@example.invalid/1")):
                configure_logging()
            sentry_init.assert_called_once_with(dsn="https://key@example.invalid/1")


if __name__ == "__main__":
    unittest.main()
