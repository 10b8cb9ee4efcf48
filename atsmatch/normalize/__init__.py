from .utils import (
    clamp_score,
    contains_ci,
    count_occurrences,
    dedupe_preserving_order,
    jaccard_similarity,
    normalize_skill,
    normalize_whitespace,
    parse_date,
    round_half_up,
    token_set,
    words,
    years_between,
)

__all__ = [
    "clamp_score",
    "contains_ci",
    "count_occurrences",
    "dedupe_preserving_order",
    "jaccard_similarity",
    "normalize_skill",
    "normalize_whitespace",
    "parse_date",
    "round_half_up",
    "token_set",
    "words",
    "years_between",
]
