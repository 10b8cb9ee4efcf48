from __future__ import annotations

from datetime import date

from atsmatch.core.config.scoring import get_scoring_value
from atsmatch.normalize.utils import clamp_score, contains_ci, parse_date, round_half_up, years_between
from atsmatch.schemas import (
    CandidateProfile,
    ExperienceAreaMatch,
    ExperienceMatchAnalysis,
    JobPostingProfile,
    RelevantExperience,
    WorkExperience,
)


def _experience_text(experience: WorkExperience) -> str:
    return f"{experience.job_title} {experience.description}"


def experience_years(experience: WorkExperience, as_of: date) -> float:
    start = parse_date(experience.start_date)
    end = as_of if experience.is_current else parse_date(experience.end_date)
    return years_between(start, end)


def total_experience_years(experiences: list[WorkExperience], as_of: date) -> float:
    return sum(experience_years(experience, as_of) for experience in experiences)


def is_experience_relevant(experience: WorkExperience, skill_area: str) -> bool:
    return contains_ci(_experience_text(experience), skill_area.strip())


def matching_required_skills(experience: WorkExperience, job: JobPostingProfile) -> list[str]:
    text = _experience_text(experience)
    return [skill for skill in job.required_skills if contains_ci(text, skill)]


def experience_relevance(experience: WorkExperience, job: JobPostingProfile) -> float:
    if not job.required_skills:
        return 0.0
    return len(matching_required_skills(experience, job)) / len(job.required_skills)


def analyze_experience_match(
    candidate: CandidateProfile,
    job: JobPostingProfile,
    *,
    as_of: date | None = None,
) -> ExperienceMatchAnalysis:
    today = as_of or date.today()
    experiences = candidate.experience
    relevance_cutoff = float(get_scoring_value("matching.experience.relevance_cutoff", 0.3))

    total_years_user = total_experience_years(experiences, today)
    total_years_required = sum(req.minimum_years for req in job.required_experience)

    by_area: list[ExperienceAreaMatch] = []
    for requirement in job.required_experience:
        relevant = [exp for exp in experiences if is_experience_relevant(exp, requirement.skill_area)]
        user_years = total_experience_years(relevant, today)
        if requirement.minimum_years <= 0:
            area_score = 100
        else:
            area_score = clamp_score(user_years / requirement.minimum_years * 100)
        by_area.append(
            ExperienceAreaMatch(
                area=requirement.skill_area,
                required=requirement.minimum_years,
                user_has=round(user_years, 2),
                score=area_score,
                is_matched=user_years >= requirement.minimum_years,
            )
        )

    if by_area:
        score = round_half_up(sum(area.score for area in by_area) / len(by_area))
    else:
        score = clamp_score(total_years_user / max(1.0, total_years_required) * 100)

    relevant_experiences: list[RelevantExperience] = []
    for experience in experiences:
        relevance = experience_relevance(experience, job)
        if relevance <= relevance_cutoff:
            continue
        relevant_experiences.append(
            RelevantExperience(
                company=experience.company,
                position=experience.job_title,
                relevance_score=round(relevance, 4),
                matching_skills=matching_required_skills(experience, job),
                start_date=experience.start_date,
                end_date=experience.end_date,
            )
        )

    return ExperienceMatchAnalysis(
        score=score,
        total_years_required=total_years_required,
        total_years_user=round(total_years_user, 2),
        by_area=by_area,
        relevant_experiences=relevant_experiences,
    )
