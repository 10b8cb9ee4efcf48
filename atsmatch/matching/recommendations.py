from __future__ import annotations

import uuid

from atsmatch.core.config.scoring import get_scoring_value
from atsmatch.schemas import CandidateProfile, OptimizationRecommendation, WeakArea

from .aggregate import EXPERIENCE_AREA


def _recommendation_id() -> str:
    return f"rec_{uuid.uuid4().hex}"


def _short_descriptions(candidate: CandidateProfile, min_chars: int) -> int:
    return sum(1 for exp in candidate.experience if len((exp.description or "").strip()) < min_chars)


def generate_recommendations(
    candidate: CandidateProfile,
    missing_skills: list[str],
    missing_keywords: list[str],
    weak_areas: list[WeakArea],
) -> list[OptimizationRecommendation]:
    top_skills = int(get_scoring_value("recommendations.top_missing_skills", 5))
    top_keywords = int(get_scoring_value("recommendations.top_missing_keywords", 3))
    short_description = int(get_scoring_value("recommendations.short_description_chars", 50))
    short_objective = int(get_scoring_value("recommendations.short_objective_chars", 100))

    recommendations: list[OptimizationRecommendation] = []

    if missing_skills:
        recommendations.append(
            OptimizationRecommendation(
                id=_recommendation_id(),
                type="SKILL_GAP",
                priority="HIGH",
                title="Add Missing Technical Skills",
                description=f"Include {', '.join(missing_skills[:top_skills])} in your skills section",
                action_items=[
                    "Review your past projects for use of these technologies",
                    "Add skills to the technical skills section",
                    "Include specific examples in experience descriptions",
                    "Consider online courses to strengthen weak areas",
                ],
                estimated_impact=15,
                difficulty="EASY",
                time_to_implement="30 minutes",
            )
        )

    if missing_keywords:
        recommendations.append(
            OptimizationRecommendation(
                id=_recommendation_id(),
                type="KEYWORD_MISSING",
                priority="HIGH",
                title="Improve ATS Keyword Optimization",
                description=(
                    f"Naturally incorporate {', '.join(missing_keywords[:top_keywords])} and other key terms"
                ),
                action_items=[
                    "Add keywords to professional summary",
                    "Include terms in experience descriptions",
                    "Use exact phrases from job posting",
                    "Maintain natural language flow",
                ],
                estimated_impact=20,
                difficulty="MEDIUM",
                time_to_implement="1-2 hours",
            )
        )

    thin_experiences = _short_descriptions(candidate, short_description)
    if thin_experiences:
        recommendations.append(
            OptimizationRecommendation(
                id=_recommendation_id(),
                type="CONTENT_ENHANCEMENT",
                priority="MEDIUM",
                title="Enhance Experience Descriptions",
                description=f"Add detailed descriptions for {thin_experiences} work experiences",
                action_items=[
                    "Include specific achievements and metrics",
                    "Use action verbs to start bullet points",
                    "Quantify results where possible (%, $, numbers)",
                    "Align descriptions with job requirements",
                ],
                estimated_impact=25,
                difficulty="MEDIUM",
                time_to_implement="2-3 hours",
            )
        )

    if len((candidate.objective or "").strip()) < short_objective:
        recommendations.append(
            OptimizationRecommendation(
                id=_recommendation_id(),
                type="CONTENT_ENHANCEMENT",
                priority="MEDIUM",
                title="Optimize Professional Summary",
                description="Create a compelling professional summary that matches the job requirements",
                action_items=[
                    "Include years of experience in relevant field",
                    "Mention key skills and technologies",
                    "Highlight major achievements",
                    "Tailor to specific job posting",
                ],
                estimated_impact=15,
                difficulty="MEDIUM",
                time_to_implement="45 minutes",
            )
        )

    if any(area.area == EXPERIENCE_AREA for area in weak_areas):
        recommendations.append(
            OptimizationRecommendation(
                id=_recommendation_id(),
                type="EXPERIENCE_WEAK",
                priority="MEDIUM",
                title="Strengthen Relevant Experience",
                description="Make the experience that matches the job requirements easier to find",
                action_items=[
                    "Lead each role with the responsibilities closest to the target job",
                    "Name the required skill areas explicitly in role descriptions",
                    "Add projects or volunteer work that cover missing experience areas",
                ],
                estimated_impact=10,
                difficulty="MEDIUM",
                time_to_implement="1 hour",
            )
        )

    return recommendations
