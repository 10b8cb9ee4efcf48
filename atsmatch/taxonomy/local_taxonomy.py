from __future__ import annotations

import json
import re
from pathlib import Path

from atsmatch.normalize.utils import normalize_whitespace

from .provider import SkillBucket

_BUCKET_ORDER: tuple[SkillBucket, ...] = ("database", "frontend", "backend")
_SHORT_MARKER_LEN = 3
_WHOLE_TOKEN_MARKERS = frozenset({"less", "rails"})
_TOKEN_SPLIT_RE = re.compile(r"[^a-z0-9+#]+")


class LocalTaxonomy:
    def __init__(self, categories_path: str | Path | None = None) -> None:
        path = Path(categories_path) if categories_path else Path(__file__).with_name("skill_categories.json")
        self._markers = self._load_markers(path)

    @staticmethod
    def _load_markers(path: Path) -> dict[str, tuple[str, ...]]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        return {
            str(bucket).strip().lower(): tuple(str(marker).strip().lower() for marker in markers)
            for bucket, markers in raw.items()
        }

    @staticmethod
    def _matches(marker: str, lowered: str, tokens: set[str]) -> bool:
        # Short markers like "go" and common word fragments only count as whole tokens.
        if len(marker) <= _SHORT_MARKER_LEN or marker in _WHOLE_TOKEN_MARKERS:
            return marker in tokens
        return marker in lowered

    def _bucket_for(self, raw: str) -> SkillBucket | None:
        lowered = normalize_whitespace(raw).lower()
        if not lowered:
            return None
        tokens = {token for token in _TOKEN_SPLIT_RE.split(lowered) if token}
        for bucket in _BUCKET_ORDER:
            if any(self._matches(marker, lowered, tokens) for marker in self._markers.get(bucket, ())):
                return bucket
        return None

    def categorize_skill(self, raw: str) -> SkillBucket:
        return self._bucket_for(raw) or "tools"
