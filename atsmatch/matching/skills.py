from __future__ import annotations

from atsmatch.core.config.scoring import get_scoring_value
from atsmatch.normalize.utils import (
    clamp_score,
    dedupe_preserving_order,
    jaccard_similarity,
    normalize_skill,
)
from atsmatch.schemas import CandidateProfile, JobPostingProfile, PartialSkillMatch, SkillsMatchAnalysis

_PARTIAL_CONTEXT = "Similar technology or framework"


def find_partial_skill_matches(
    job_skills: list[str],
    user_skills: list[str],
    *,
    threshold: float | None = None,
) -> list[PartialSkillMatch]:
    cutoff = float(threshold if threshold is not None else get_scoring_value("matching.similarity.partial_match", 0.6))
    partial: list[PartialSkillMatch] = []
    for job_skill in job_skills:
        for user_skill in user_skills:
            similarity = jaccard_similarity(job_skill, user_skill)
            if cutoff < similarity < 1.0:
                partial.append(
                    PartialSkillMatch(
                        job_skill=job_skill,
                        user_skill=user_skill,
                        similarity=round(similarity, 4),
                        context=_PARTIAL_CONTEXT,
                    )
                )
    return partial


def analyze_skills_match(candidate: CandidateProfile, job: JobPostingProfile) -> SkillsMatchAnalysis:
    required = dedupe_preserving_order(job.required_skills)
    required_keys = {normalize_skill(skill) for skill in required}
    job_skills = dedupe_preserving_order([*required, *job.preferred_skills])
    user_skills = [skill for skill in candidate.all_skills() if normalize_skill(skill)]
    user_keys = {normalize_skill(skill) for skill in user_skills}

    exact = [skill for skill in job_skills if normalize_skill(skill) in user_keys]
    exact_keys = {normalize_skill(skill) for skill in exact}

    partial = find_partial_skill_matches(
        [skill for skill in job_skills if normalize_skill(skill) not in exact_keys],
        user_skills,
    )
    partial_keys = {normalize_skill(match.job_skill) for match in partial}

    missing = [
        skill
        for skill in job_skills
        if normalize_skill(skill) not in exact_keys and normalize_skill(skill) not in partial_keys
    ]

    job_keys = {normalize_skill(skill) for skill in job_skills}
    extra = dedupe_preserving_order([skill for skill in user_skills if normalize_skill(skill) not in job_keys])

    matched = len(required_keys & (exact_keys | partial_keys))
    total_required = len(required_keys)
    score = clamp_score(matched / total_required * 100) if total_required else 100

    return SkillsMatchAnalysis(
        score=score,
        total_required=total_required,
        matched=matched,
        exact=exact,
        missing=missing,
        partial=partial,
        extra=extra,
    )
