from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

EducationLevel = Literal["HIGH_SCHOOL", "ASSOCIATE", "BACHELOR", "MASTER", "PHD"]
KeywordCategory = Literal["TECHNICAL", "SOFT_SKILL", "INDUSTRY", "TOOL", "FRAMEWORK", "CERTIFICATION", "OTHER"]
Importance = Literal["HIGH", "MEDIUM", "LOW"]
SeniorityLevel = Literal["ENTRY", "JUNIOR", "MID", "SENIOR", "LEAD", "EXECUTIVE"]
WorkMode = Literal["ONSITE", "REMOTE", "HYBRID"]
EmploymentType = Literal["FULL_TIME", "PART_TIME", "CONTRACT", "FREELANCE", "INTERNSHIP"]


class ExperienceRequirement(BaseModel):
    skill_area: str = Field(min_length=1)
    minimum_years: float = Field(default=0.0, ge=0.0)
    maximum_years: float | None = Field(default=None, ge=0.0)
    is_required: bool = True
    description: str | None = None


class EducationRequirement(BaseModel):
    level: EducationLevel
    field: str | None = None
    is_required: bool = True
    alternatives: list[str] = Field(default_factory=list)


class JobKeyword(BaseModel):
    keyword: str = Field(min_length=1)
    category: KeywordCategory = "OTHER"
    importance: Importance = "MEDIUM"
    frequency: int = Field(default=1, ge=0)
    context: str | None = None


class JobPostingProfile(BaseModel):
    id: str = Field(min_length=1)
    position_title: str = ""
    company_name: str = ""
    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    required_experience: list[ExperienceRequirement] = Field(default_factory=list)
    education_requirements: list[EducationRequirement] = Field(default_factory=list)
    keywords: list[JobKeyword] = Field(default_factory=list)
    ats_keywords: list[str] = Field(default_factory=list)
    industry_type: str | None = None
    seniority_level: SeniorityLevel | None = None
    location: str | None = None
    work_mode: WorkMode | None = None
    employment_type: EmploymentType | None = None

    @field_validator("id")
    @classmethod
    def _validate_id(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("job id must not be blank")
        return stripped

    @field_validator("required_skills", "preferred_skills", "ats_keywords")
    @classmethod
    def _drop_blank_terms(cls, values: list[str]) -> list[str]:
        return [value.strip() for value in values if value and value.strip()]
