from __future__ import annotations

from dataclasses import dataclass, field

from atsmatch.core.config.scoring import get_scoring_value
from atsmatch.normalize.utils import clamp_score
from atsmatch.schemas import (
    EducationMatchAnalysis,
    ExperienceMatchAnalysis,
    KeywordMatchAnalysis,
    SkillsMatchAnalysis,
    StrengthArea,
    WeakArea,
)

_DEFAULT_WEIGHTS = {"skills": 0.35, "experience": 0.25, "education": 0.15, "keywords": 0.25}

SKILLS_AREA = "Technical Skills"
KEYWORDS_AREA = "ATS Keywords"
EXPERIENCE_AREA = "Relevant Experience"

_SKILL_SUGGESTIONS = [
    "Add missing technical skills to your CV",
    "Include relevant projects that demonstrate these skills",
    "Consider taking courses to acquire missing skills",
]
_KEYWORD_SUGGESTIONS = [
    "Naturally incorporate missing keywords into your experience descriptions",
    "Update your professional summary to include relevant terms",
    "Review job posting for industry-specific terminology",
]
_EXPERIENCE_SUGGESTIONS = [
    "Emphasize transferable skills from your experience",
    "Quantify achievements with specific metrics",
    "Highlight projects that demonstrate relevant skills",
]
_SKILL_ADVANTAGES = [
    "Excellent match with required technical skills",
    "Additional skills that add value to the role",
    "Strong foundation for immediate contribution",
]
_EXPERIENCE_ADVANTAGES = [
    "Extensive experience in relevant areas",
    "Strong track record of achievements",
    "Leadership and project management experience",
]
_KEYWORD_ADVANTAGES = [
    "High likelihood of passing ATS screening",
    "Strong alignment with job posting language",
    "Comprehensive coverage of industry terminology",
]


@dataclass(slots=True)
class GapAnalysis:
    missing_skills: list[str] = field(default_factory=list)
    missing_keywords: list[str] = field(default_factory=list)
    weak_areas: list[WeakArea] = field(default_factory=list)
    strength_areas: list[StrengthArea] = field(default_factory=list)


def _weights() -> dict[str, float]:
    configured = get_scoring_value("matching.weights", {}) or {}
    return {name: float(configured.get(name, default)) for name, default in _DEFAULT_WEIGHTS.items()}


def calculate_overall_score(
    skills: SkillsMatchAnalysis,
    experience: ExperienceMatchAnalysis,
    education: EducationMatchAnalysis,
    keywords: KeywordMatchAnalysis,
) -> int:
    weights = _weights()
    weighted = (
        skills.score * weights["skills"]
        + experience.score * weights["experience"]
        + education.score * weights["education"]
        + keywords.score * weights["keywords"]
    )
    return clamp_score(weighted)


def _skills_impact(missing_count: int) -> str:
    if missing_count > 5:
        return "HIGH"
    if missing_count > 2:
        return "MEDIUM"
    return "LOW"


def identify_gaps_and_strengths(
    skills: SkillsMatchAnalysis,
    experience: ExperienceMatchAnalysis,
    keywords: KeywordMatchAnalysis,
) -> GapAnalysis:
    missing_skills = list(skills.missing)
    missing_keywords = [*keywords.missing_high_priority, *keywords.missing_medium_priority]

    weak_skills = int(get_scoring_value("classification.weak_thresholds.skills", 70))
    weak_keywords = int(get_scoring_value("classification.weak_thresholds.keywords", 60))
    weak_experience = int(get_scoring_value("classification.weak_thresholds.experience", 60))
    strength = int(get_scoring_value("classification.strength_threshold", 80))

    weak_areas: list[WeakArea] = []
    if skills.score < weak_skills:
        weak_areas.append(
            WeakArea(
                area=SKILLS_AREA,
                score=skills.score,
                description=f"Missing {len(missing_skills)} required skills",
                impact=_skills_impact(len(missing_skills)),
                suggestions=list(_SKILL_SUGGESTIONS),
            )
        )
    if keywords.score < weak_keywords:
        weak_areas.append(
            WeakArea(
                area=KEYWORDS_AREA,
                score=keywords.score,
                description=f"Missing {len(missing_keywords)} important keywords",
                impact="HIGH" if len(keywords.missing_high_priority) > 3 else "MEDIUM",
                suggestions=list(_KEYWORD_SUGGESTIONS),
            )
        )
    if experience.score < weak_experience:
        weak_areas.append(
            WeakArea(
                area=EXPERIENCE_AREA,
                score=experience.score,
                description="Experience may not fully align with job requirements",
                impact="MEDIUM",
                suggestions=list(_EXPERIENCE_SUGGESTIONS),
            )
        )

    strength_areas: list[StrengthArea] = []
    if skills.score >= strength:
        strength_areas.append(
            StrengthArea(
                area=SKILLS_AREA,
                score=skills.score,
                description="Strong technical skill alignment",
                advantages=list(_SKILL_ADVANTAGES),
            )
        )
    if experience.score >= strength:
        strength_areas.append(
            StrengthArea(
                area="Professional Experience",
                score=experience.score,
                description="Highly relevant professional background",
                advantages=list(_EXPERIENCE_ADVANTAGES),
            )
        )
    if keywords.score >= strength:
        strength_areas.append(
            StrengthArea(
                area="ATS Optimization",
                score=keywords.score,
                description="Excellent keyword optimization",
                advantages=list(_KEYWORD_ADVANTAGES),
            )
        )

    return GapAnalysis(
        missing_skills=missing_skills,
        missing_keywords=missing_keywords,
        weak_areas=weak_areas,
        strength_areas=strength_areas,
    )
