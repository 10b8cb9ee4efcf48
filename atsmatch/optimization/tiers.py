from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass, field
from typing import Awaitable, Callable

from atsmatch.core.config.scoring import get_scoring_value
from atsmatch.normalize.utils import contains_ci, normalize_skill
from atsmatch.schemas import (
    CandidateProfile,
    JobPostingProfile,
    MatchResult,
    OptimizationLevel,
    OptimizationSection,
    Project,
    TechnicalSkills,
)
from atsmatch.taxonomy import TaxonomyProvider

from .enhancement import EnhancementSession, enhance_experience_description, enhance_objective_with_keywords

logger = logging.getLogger(__name__)

_PHONE_DISALLOWED_RE = re.compile(r"[^\d+\-\s()]")
_URL_FIELDS = ("linkedin", "github", "website")

TECH_ROLE_MARKERS = ("developer", "engineer", "programmer", "technical", "software", "system")

COMMUNICATION_ACHIEVEMENTS = (
    "Successfully delivered projects on time and within budget",
    "Improved team efficiency through implementation of best practices",
    "Mentored junior team members and contributed to knowledge sharing",
)

LEADERSHIP_ACHIEVEMENTS = (
    "Led cross-functional teams of 5+ members to deliver projects 20% ahead of schedule",
    "Implemented process improvements resulting in 30% efficiency gains",
    "Managed stakeholder relationships across multiple departments",
)

INDUSTRY_TERMS: dict[str, tuple[str, ...]] = {
    "technology": ("digital transformation", "scalable solutions", "agile methodology"),
    "finance": ("risk management", "regulatory compliance", "financial analysis"),
    "healthcare": ("patient care", "regulatory standards", "quality assurance"),
    "marketing": ("brand management", "customer engagement", "market research"),
}

PLACEHOLDER_PROJECT_NAME = "Professional Development Project"


@dataclass(slots=True)
class OptimizationContext:
    match: MatchResult
    job: JobPostingProfile
    session: EnhancementSession
    taxonomy: TaxonomyProvider
    target_sections: list[OptimizationSection] = field(default_factory=list)


def _narrative(sentences: tuple[str, ...]) -> str:
    return ". ".join(sentences) + "."


def add_missing_skills(cv: CandidateProfile, missing_skills: list[str], limit: int) -> list[str]:
    existing = {normalize_skill(skill) for skill in cv.skills}
    added: list[str] = []
    for skill in missing_skills[:limit]:
        key = normalize_skill(skill)
        if not key or key in existing:
            continue
        cv.skills.append(skill)
        existing.add(key)
        added.append(skill)
    return added


def ensure_ats_friendly_format(cv: CandidateProfile) -> None:
    info = cv.personal_info
    if info.phone:
        info.phone = _PHONE_DISALLOWED_RE.sub("", info.phone)
    for name in _URL_FIELDS:
        value = (getattr(info, name) or "").strip()
        if value and not value.startswith("http"):
            setattr(info, name, f"https://{value}")


def categorize_into_buckets(
    cv: CandidateProfile, skills: list[str], taxonomy: TaxonomyProvider
) -> TechnicalSkills:
    technical = cv.technical_skills or TechnicalSkills()
    for skill in skills:
        key = normalize_skill(skill)
        if not key:
            continue
        bucket: list[str] = getattr(technical, taxonomy.categorize_skill(skill))
        if key not in {normalize_skill(item) for item in bucket}:
            bucket.append(skill)
    cv.technical_skills = technical
    return technical


def backfill_communication(cv: CandidateProfile) -> None:
    if not (cv.communication or "").strip():
        cv.communication = _narrative(COMMUNICATION_ACHIEVEMENTS)


def backfill_leadership(cv: CandidateProfile) -> None:
    if not (cv.leadership or "").strip():
        cv.leadership = _narrative(LEADERSHIP_ACHIEVEMENTS)


def is_tech_role(job: JobPostingProfile) -> bool:
    title = job.position_title.lower()
    return any(marker in title for marker in TECH_ROLE_MARKERS)


def promote_skills_section(cv: CandidateProfile) -> None:
    order = [section for section in cv.section_order if section != "skills"]
    anchor = order.index("objective") + 1 if "objective" in order else 0
    order.insert(anchor, "skills")
    cv.section_order = order


def optimize_section_order(cv: CandidateProfile, job: JobPostingProfile, taxonomy: TaxonomyProvider) -> None:
    if not is_tech_role(job):
        return
    if cv.technical_skills is None or not cv.technical_skills.all_skills():
        categorize_into_buckets(cv, cv.skills, taxonomy)
    promote_skills_section(cv)


def add_relevant_projects(cv: CandidateProfile, job: JobPostingProfile) -> None:
    if cv.projects:
        return
    skills = job.required_skills[:3]
    if not skills:
        return
    joined = ", ".join(skills)
    cv.projects = [
        Project(
            name=PLACEHOLDER_PROJECT_NAME,
            description=f"Developed skills in {joined} through hands-on practice and continuous learning",
            technologies=joined,
        )
    ]


def add_industry_terminology(cv: CandidateProfile, industry_type: str | None, limit: int) -> None:
    terms = INDUSTRY_TERMS.get((industry_type or "").strip().lower(), ())
    if not terms or not cv.objective.strip():
        return
    missing = [term for term in terms if not contains_ci(cv.objective, term)][:limit]
    if missing:
        cv.objective = f"{cv.objective.rstrip()} Experienced in {' and '.join(missing)}."


async def _rewrite_experiences(cv: CandidateProfile, indices: list[int], ctx: OptimizationContext) -> None:
    if not indices:
        return
    keyword_limit = int(get_scoring_value("optimization.max_role_keywords", 3))
    rewritten = await asyncio.gather(
        *(
            enhance_experience_description(
                ctx.session,
                cv.experience[index],
                ctx.job,
                ctx.match.missing_keywords,
                keyword_limit=keyword_limit,
            )
            for index in indices
        )
    )
    for index, description in zip(indices, rewritten):
        cv.experience[index].description = description


async def _rewrite_objective(cv: CandidateProfile, keywords: list[str], ctx: OptimizationContext) -> None:
    if not cv.objective.strip():
        return
    to_add = [keyword for keyword in keywords if not contains_ci(cv.objective, keyword)]
    if to_add:
        cv.objective = await enhance_objective_with_keywords(ctx.session, cv.objective, to_add)


async def enhance_specific_section(cv: CandidateProfile, target: OptimizationSection, ctx: OptimizationContext) -> None:
    if target.section == "OBJECTIVE":
        limit = int(get_scoring_value("optimization.max_objective_keywords", 3))
        await _rewrite_objective(cv, ctx.match.missing_keywords[:limit], ctx)
    elif target.section == "SKILLS":
        categorize_into_buckets(cv, ctx.job.required_skills, ctx.taxonomy)
    elif target.section == "EXPERIENCE":
        limit = int(get_scoring_value("optimization.max_targeted_experiences", 3))
        await _rewrite_experiences(cv, list(range(min(len(cv.experience), limit))), ctx)
    elif target.section == "ACHIEVEMENTS":
        backfill_communication(cv)
    else:
        logger.debug("optimization_section_skipped section=%s", target.section)


async def perform_basic_optimization(cv: CandidateProfile, ctx: OptimizationContext) -> None:
    add_missing_skills(
        cv,
        ctx.match.missing_skills,
        int(get_scoring_value("optimization.max_missing_skills", 5)),
    )
    limit = int(get_scoring_value("optimization.max_objective_keywords", 3))
    await _rewrite_objective(cv, ctx.match.keyword_match.missing_high_priority[:limit], ctx)
    ensure_ats_friendly_format(cv)


async def perform_advanced_optimization(cv: CandidateProfile, ctx: OptimizationContext) -> None:
    await perform_basic_optimization(cv, ctx)

    short_chars = int(get_scoring_value("optimization.short_description_chars", 100))
    short = [index for index, exp in enumerate(cv.experience) if len(exp.description or "") < short_chars]
    await _rewrite_experiences(cv, short, ctx)

    categorize_into_buckets(cv, ctx.job.required_skills, ctx.taxonomy)
    backfill_communication(cv)


async def perform_comprehensive_optimization(cv: CandidateProfile, ctx: OptimizationContext) -> None:
    await perform_advanced_optimization(cv, ctx)

    optimize_section_order(cv, ctx.job, ctx.taxonomy)
    for target in ctx.target_sections:
        await enhance_specific_section(cv, target, ctx)
    add_relevant_projects(cv, ctx.job)

    ensure_ats_friendly_format(cv)
    add_industry_terminology(cv, ctx.job.industry_type, int(get_scoring_value("optimization.max_industry_terms", 2)))
    backfill_leadership(cv)


LevelRunner = Callable[[CandidateProfile, OptimizationContext], Awaitable[None]]

LEVEL_RUNNERS: dict[OptimizationLevel, LevelRunner] = {
    "BASIC": perform_basic_optimization,
    "ADVANCED": perform_advanced_optimization,
    "COMPREHENSIVE": perform_comprehensive_optimization,
}


async def run_optimization(
    candidate: CandidateProfile, level: OptimizationLevel, ctx: OptimizationContext
) -> CandidateProfile:
    optimized = candidate.model_copy(deep=True)
    await LEVEL_RUNNERS[level](optimized, ctx)
    logger.info(
        "optimization_level_applied level=%s job_id=%s enhancement_failures=%s",
        level,
        ctx.job.id,
        ctx.session.failures,
    )
    return optimized
