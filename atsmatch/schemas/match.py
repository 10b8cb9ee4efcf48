from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .job import Importance

Score = int
RecommendationType = Literal[
    "SKILL_GAP",
    "KEYWORD_MISSING",
    "EXPERIENCE_WEAK",
    "FORMAT_ISSUE",
    "CONTENT_ENHANCEMENT",
]
Difficulty = Literal["EASY", "MEDIUM", "HARD"]


class PartialSkillMatch(BaseModel):
    job_skill: str
    user_skill: str
    similarity: float = Field(ge=0.0, le=1.0)
    context: str | None = None


class SkillsMatchAnalysis(BaseModel):
    score: Score = Field(ge=0, le=100)
    total_required: int = Field(ge=0)
    matched: int = Field(ge=0)
    exact: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    partial: list[PartialSkillMatch] = Field(default_factory=list)
    extra: list[str] = Field(default_factory=list)


class ExperienceAreaMatch(BaseModel):
    area: str
    required: float
    user_has: float
    score: Score = Field(ge=0, le=100)
    is_matched: bool


class RelevantExperience(BaseModel):
    company: str
    position: str
    relevance_score: float = Field(ge=0.0, le=1.0)
    matching_skills: list[str] = Field(default_factory=list)
    start_date: str | None = None
    end_date: str | None = None


class ExperienceMatchAnalysis(BaseModel):
    score: Score = Field(ge=0, le=100)
    total_years_required: float
    total_years_user: float
    by_area: list[ExperienceAreaMatch] = Field(default_factory=list)
    relevant_experiences: list[RelevantExperience] = Field(default_factory=list)


class UserEducationSummary(BaseModel):
    level: str
    field: str
    institution: str
    relevance_score: float = Field(ge=0.0, le=1.0)


class EducationMatchAnalysis(BaseModel):
    score: Score = Field(ge=0, le=100)
    has_required_level: bool
    has_required_field: bool
    user_education: list[UserEducationSummary] = Field(default_factory=list)
    additional_certifications: list[str] = Field(default_factory=list)


class PresentKeyword(BaseModel):
    keyword: str
    frequency: int = Field(ge=1)
    locations: list[str] = Field(default_factory=list)


class KeywordMatchAnalysis(BaseModel):
    score: Score = Field(ge=0, le=100)
    total_keywords: int = Field(ge=0)
    matched_keywords: int = Field(ge=0)
    missing_high_priority: list[str] = Field(default_factory=list)
    missing_medium_priority: list[str] = Field(default_factory=list)
    missing_other: list[str] = Field(default_factory=list)
    present_keywords: list[PresentKeyword] = Field(default_factory=list)


class WeakArea(BaseModel):
    area: str
    score: Score
    description: str
    impact: Importance
    suggestions: list[str] = Field(default_factory=list)


class StrengthArea(BaseModel):
    area: str
    score: Score
    description: str
    advantages: list[str] = Field(default_factory=list)


class OptimizationRecommendation(BaseModel):
    id: str
    type: RecommendationType
    priority: Importance
    title: str
    description: str
    action_items: list[str] = Field(default_factory=list)
    estimated_impact: int = Field(ge=0)
    difficulty: Difficulty
    time_to_implement: str | None = None


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    job_id: str
    overall_score: Score = Field(ge=0, le=100)
    skills_match: SkillsMatchAnalysis
    experience_match: ExperienceMatchAnalysis
    education_match: EducationMatchAnalysis
    keyword_match: KeywordMatchAnalysis
    missing_skills: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    weak_areas: list[WeakArea] = Field(default_factory=list)
    strength_areas: list[StrengthArea] = Field(default_factory=list)
    recommendations: list[OptimizationRecommendation] = Field(default_factory=list)
    created_at: datetime
