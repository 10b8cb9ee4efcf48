from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, TypeVar

from pydantic import BaseModel, ValidationError

from atsmatch.ai import TextEnhancer, get_text_enhancer
from atsmatch.compliance import check_ats_compliance
from atsmatch.core.config import settings
from atsmatch.core.config.scoring import get_scoring_value
from atsmatch.core.errors import InputError, ReevaluationFailure
from atsmatch.matching import (
    analyze_education_match,
    analyze_experience_match,
    analyze_keyword_match,
    analyze_skills_match,
    calculate_overall_score,
    generate_recommendations,
    identify_gaps_and_strengths,
)
from atsmatch.matching.keywords import job_keyword_terms
from atsmatch.normalize.utils import dedupe_preserving_order, round_half_up
from atsmatch.optimization import (
    EnhancementSession,
    OptimizationContext,
    extract_added_keywords,
    identify_enhanced_sections,
    run_optimization,
    track_changes,
)
from atsmatch.schemas import (
    OPTIMIZATION_LEVELS,
    CandidateProfile,
    ComplianceCheck,
    JobPostingProfile,
    MatchResult,
    OptimizationResult,
    OptimizationSection,
)
from atsmatch.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _coerce(model: type[ModelT], value: Any, label: str) -> ModelT:
    if isinstance(value, model):
        return value
    if not isinstance(value, dict):
        raise InputError(f"{label} must be a {model.__name__} or a mapping", code=f"invalid_{label}")
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        raise InputError(f"invalid {label}: {exc.error_count()} validation errors", code=f"invalid_{label}") from exc


def _coerce_sections(raw: list[Any] | None) -> list[OptimizationSection]:
    sections: list[OptimizationSection] = []
    for item in raw or []:
        if isinstance(item, str):
            item = {"section": item.strip().upper()}
        sections.append(_coerce(OptimizationSection, item, "target_section"))
    return sections


def estimate_after_score(before: int, change_count: int) -> int:
    per_change = int(get_scoring_value("optimization.score_estimate.per_change", 3))
    max_bonus = int(get_scoring_value("optimization.score_estimate.max_bonus", 20))
    return min(100, before + min(max_bonus, per_change * change_count))


def improvement_percentage(before: int, after: int) -> int:
    if before == 0:
        return 0 if after == 0 else 100
    return round_half_up((after - before) / before * 100)


class MatchEngine:
    """Scores a candidate against a job posting and rewrites the profile toward it."""

    def __init__(
        self,
        enhancer: TextEnhancer | None = None,
        *,
        taxonomy: TaxonomyProvider | None = None,
        enhancement_timeout_s: float | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._enhancer = enhancer if enhancer is not None else get_text_enhancer()
        self._taxonomy = taxonomy or get_default_taxonomy_provider()
        self._timeout_s = settings.enhancement_timeout_s if enhancement_timeout_s is None else enhancement_timeout_s
        self._clock = clock or _utc_now
        if self._timeout_s <= 0:
            raise ValueError("enhancement_timeout_s must be positive")

    def match(self, candidate: CandidateProfile | dict[str, Any], job: JobPostingProfile | dict[str, Any]) -> MatchResult:
        candidate = _coerce(CandidateProfile, candidate, "candidate")
        job = _coerce(JobPostingProfile, job, "job")
        now = self._clock()

        skills = analyze_skills_match(candidate, job)
        experience = analyze_experience_match(candidate, job, as_of=now.date())
        education = analyze_education_match(candidate, job)
        keywords = analyze_keyword_match(candidate, job)

        overall = calculate_overall_score(skills, experience, education, keywords)
        gaps = identify_gaps_and_strengths(skills, experience, keywords)
        missing_keywords = dedupe_preserving_order(
            [*keywords.missing_high_priority, *keywords.missing_medium_priority, *keywords.missing_other],
            key=str.lower,
        )
        recommendations = generate_recommendations(candidate, skills.missing, missing_keywords, gaps.weak_areas)

        result = MatchResult(
            id=f"match_{uuid.uuid4().hex}",
            job_id=job.id,
            overall_score=overall,
            skills_match=skills,
            experience_match=experience,
            education_match=education,
            keyword_match=keywords,
            missing_skills=list(skills.missing),
            missing_keywords=missing_keywords,
            weak_areas=gaps.weak_areas,
            strength_areas=gaps.strength_areas,
            recommendations=recommendations,
            created_at=now,
        )
        logger.info(
            "match_completed match_id=%s job_id=%s overall=%s skills=%s experience=%s education=%s keywords=%s",
            result.id,
            job.id,
            overall,
            skills.score,
            experience.score,
            education.score,
            keywords.score,
        )
        return result

    def check_compliance(
        self, candidate: CandidateProfile | dict[str, Any], job: JobPostingProfile | dict[str, Any]
    ) -> ComplianceCheck:
        candidate = _coerce(CandidateProfile, candidate, "candidate")
        job = _coerce(JobPostingProfile, job, "job")
        return check_ats_compliance(candidate, job)

    def _rescore(self, optimized: CandidateProfile, job: JobPostingProfile) -> int:
        try:
            return self.match(optimized, job).overall_score
        except Exception as exc:
            raise ReevaluationFailure(f"could not re-score optimized profile: {exc}") from exc

    async def optimize(
        self,
        candidate: CandidateProfile | dict[str, Any],
        job: JobPostingProfile | dict[str, Any],
        match: MatchResult | dict[str, Any],
        level: str,
        target_sections: list[Any] | None = None,
    ) -> OptimizationResult:
        candidate = _coerce(CandidateProfile, candidate, "candidate")
        job = _coerce(JobPostingProfile, job, "job")
        match = _coerce(MatchResult, match, "match")
        if level not in OPTIMIZATION_LEVELS:
            raise InputError(
                f"unknown optimization level '{level}', expected one of {', '.join(OPTIMIZATION_LEVELS)}",
                code="invalid_level",
            )
        if match.job_id != job.id:
            raise InputError(
                f"match result belongs to job '{match.job_id}', not '{job.id}'",
                code="match_job_mismatch",
            )
        sections = _coerce_sections(target_sections)

        original = candidate.model_copy(deep=True)
        session = EnhancementSession(enhancer=self._enhancer, timeout_s=self._timeout_s)
        ctx = OptimizationContext(
            match=match,
            job=job,
            session=session,
            taxonomy=self._taxonomy,
            target_sections=sections,
        )
        optimized = await run_optimization(candidate, level, ctx)

        tracked_keywords = dedupe_preserving_order([*job_keyword_terms(job), *job.required_skills], key=str.lower)
        changes = track_changes(original, optimized, tracked_keywords)

        before = match.overall_score
        estimated = False
        try:
            after = self._rescore(optimized, job)
        except ReevaluationFailure as exc:
            after = estimate_after_score(before, len(changes))
            estimated = True
            logger.warning("optimization_rescore_failed match_id=%s estimate=%s: %s", match.id, after, exc)

        result = OptimizationResult(
            id=f"opt_{uuid.uuid4().hex}",
            match_id=match.id,
            level=level,
            original_cv=original,
            optimized_cv=optimized,
            changes=changes,
            added_keywords=extract_added_keywords(original, optimized),
            enhanced_sections=identify_enhanced_sections(original, optimized, changes),
            before_score=before,
            after_score=after,
            improvement_percentage=improvement_percentage(before, after),
            score_estimated=estimated,
            enhancement_failures=session.failures,
            ats_compliance=check_ats_compliance(optimized, job),
            created_at=self._clock(),
        )
        logger.info(
            "optimization_completed optimization_id=%s match_id=%s level=%s changes=%s before=%s after=%s estimated=%s",
            result.id,
            match.id,
            level,
            len(changes),
            before,
            after,
            estimated,
        )
        return result
