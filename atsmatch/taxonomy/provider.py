from __future__ import annotations

from typing import Literal, Protocol

SkillBucket = Literal["frontend", "backend", "database", "tools"]


class TaxonomyProvider(Protocol):
    def categorize_skill(self, raw: str) -> SkillBucket:
        """Return the technical-skill bucket a skill belongs to."""
