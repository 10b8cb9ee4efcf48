from __future__ import annotations

import math
import re
from datetime import date, datetime

_PUNCT_RE = re.compile(r"[^\w\s]")
_SPACE_RE = re.compile(r"\s+")
_WORD_RE = re.compile(r"[A-Za-z][A-Za-z0-9+#.\-/]*[A-Za-z0-9+#]|[A-Za-z]")
_DATE_FORMATS = ("%Y-%m-%d", "%Y-%m", "%Y/%m/%d", "%Y/%m", "%m/%Y", "%Y")
_DAYS_PER_YEAR = 365


def normalize_whitespace(text: str | None) -> str:
    return _SPACE_RE.sub(" ", text or "").strip()


def normalize_skill(text: str | None) -> str:
    return normalize_whitespace(_PUNCT_RE.sub("", (text or "").lower()))


def token_set(text: str | None) -> set[str]:
    normalized = normalize_skill(text)
    return set(normalized.split()) if normalized else set()


def jaccard_similarity(left: str | None, right: str | None) -> float:
    left_tokens = token_set(left)
    right_tokens = token_set(right)
    union = left_tokens | right_tokens
    if not union:
        return 0.0
    return len(left_tokens & right_tokens) / len(union)


def contains_ci(text: str | None, needle: str | None) -> bool:
    if not needle:
        return False
    return needle.lower() in (text or "").lower()


def count_occurrences(text: str | None, needle: str | None) -> int:
    if not needle or not text:
        return 0
    return len(re.findall(re.escape(needle), text, flags=re.IGNORECASE))


def words(text: str | None) -> list[str]:
    return [token.lower() for token in _WORD_RE.findall(text or "")]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    return max(0, min(100, round_half_up(value)))


def dedupe_preserving_order(values: list[str], *, key=normalize_skill) -> list[str]:
    seen: set[str] = set()
    output: list[str] = []
    for value in values:
        marker = key(value)
        if not marker or marker in seen:
            continue
        seen.add(marker)
        output.append(value)
    return output


def parse_date(value: str | None) -> date | None:
    raw = (value or "").strip()
    if not raw:
        return None
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def years_between(start: date | None, end: date | None) -> float:
    if start is None or end is None:
        return 0.0
    return max(0.0, (end - start).days / _DAYS_PER_YEAR)
