from __future__ import annotations

from atsmatch.core.config.scoring import get_scoring_value
from atsmatch.normalize.utils import jaccard_similarity, normalize_skill
from atsmatch.schemas import (
    CandidateProfile,
    Education,
    EducationMatchAnalysis,
    EducationRequirement,
    JobPostingProfile,
    UserEducationSummary,
)

EDUCATION_LEVELS: tuple[str, ...] = ("HIGH_SCHOOL", "ASSOCIATE", "BACHELOR", "MASTER", "PHD")
UNKNOWN_LEVEL = "UNKNOWN"

# (level, whole-word abbreviations, substrings) checked in order.
_LEVEL_MARKERS: tuple[tuple[str, frozenset[str], tuple[str, ...]], ...] = (
    ("PHD", frozenset({"phd", "dphil"}), ("doctorate", "doctor of")),
    ("MASTER", frozenset({"msc", "ms", "ma", "mba", "meng", "mphil"}), ("master",)),
    ("BACHELOR", frozenset({"bsc", "bs", "ba", "beng", "bba"}), ("bachelor",)),
    ("ASSOCIATE", frozenset({"aa", "aas"}), ("associate",)),
)


def map_education_level(degree: str | None) -> str:
    normalized = normalize_skill(degree)
    if not normalized:
        return UNKNOWN_LEVEL
    tokens = set(normalized.split())
    for level, abbreviations, phrases in _LEVEL_MARKERS:
        if tokens & abbreviations or any(phrase in normalized for phrase in phrases):
            return level
    return "BACHELOR"


def is_education_level_sufficient(user_level: str, required_level: str) -> bool:
    if user_level not in EDUCATION_LEVELS:
        return False
    if required_level not in EDUCATION_LEVELS:
        return True
    return EDUCATION_LEVELS.index(user_level) >= EDUCATION_LEVELS.index(required_level)


def is_field_match(user_field: str | None, required_field: str | None, *, threshold: float | None = None) -> bool:
    cutoff = float(threshold if threshold is not None else get_scoring_value("matching.similarity.field_match", 0.6))
    return jaccard_similarity(user_field, required_field) > cutoff


def _education_relevance(education: Education, requirements: list[EducationRequirement]) -> float:
    job_field = requirements[0].field if requirements else None
    if not job_field:
        return 0.5
    return round(jaccard_similarity(job_field, education.field), 4)


def analyze_education_match(candidate: CandidateProfile, job: JobPostingProfile) -> EducationMatchAnalysis:
    requirements = job.education_requirements
    summaries = [
        UserEducationSummary(
            level=map_education_level(entry.degree),
            field=entry.field,
            institution=entry.university,
            relevance_score=_education_relevance(entry, requirements),
        )
        for entry in candidate.education
    ]
    certifications = [cert.name for cert in candidate.certificates if cert.name]

    if not requirements:
        with_education = int(get_scoring_value("matching.education.no_requirements_with_education", 100))
        without_education = int(get_scoring_value("matching.education.no_requirements_without_education", 70))
        return EducationMatchAnalysis(
            score=with_education if candidate.education else without_education,
            has_required_level=bool(candidate.education),
            has_required_field=True,
            user_education=summaries,
            additional_certifications=certifications,
        )

    # Only flagged requirements gate the level check; unflagged ones count when none are flagged.
    level_requirements = [req for req in requirements if req.is_required] or requirements
    has_required_level = any(
        is_education_level_sufficient(summary.level, req.level)
        for req in level_requirements
        for summary in summaries
    )
    has_required_field = any(
        is_field_match(summary.field, req.field)
        for req in requirements
        if req.field
        for summary in summaries
    )

    score = 0
    if has_required_level:
        score += int(get_scoring_value("matching.education.level_points", 60))
    if has_required_field:
        score += int(get_scoring_value("matching.education.field_points", 30))
    if certifications:
        score += int(get_scoring_value("matching.education.certificate_points", 10))

    return EducationMatchAnalysis(
        score=min(100, score),
        has_required_level=has_required_level,
        has_required_field=has_required_field,
        user_education=summaries,
        additional_certifications=certifications,
    )
