from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from .candidate import CandidateProfile
from .compliance import ComplianceCheck
from .job import Importance

OptimizationLevel = Literal["BASIC", "ADVANCED", "COMPREHENSIVE"]
ChangeType = Literal["ADDED", "MODIFIED", "ENHANCED", "REORDERED"]
SectionName = Literal["OBJECTIVE", "EXPERIENCE", "SKILLS", "EDUCATION", "ACHIEVEMENTS"]

OPTIMIZATION_LEVELS: tuple[OptimizationLevel, ...] = ("BASIC", "ADVANCED", "COMPREHENSIVE")


class OptimizationSection(BaseModel):
    section: SectionName
    priority: Importance = "MEDIUM"


class OptimizationChange(BaseModel):
    section: str
    field: str
    change_type: ChangeType
    original_value: str | None = None
    new_value: str
    reason: str
    keywords: list[str] = Field(default_factory=list)


class EnhancedSection(BaseModel):
    section: str
    original_length: int = Field(ge=0)
    new_length: int = Field(ge=0)
    added_keywords: list[str] = Field(default_factory=list)
    improvement_description: str


class OptimizationResult(BaseModel):
    id: str
    match_id: str
    level: OptimizationLevel
    original_cv: CandidateProfile
    optimized_cv: CandidateProfile
    changes: list[OptimizationChange] = Field(default_factory=list)
    added_keywords: list[str] = Field(default_factory=list)
    enhanced_sections: list[EnhancedSection] = Field(default_factory=list)
    before_score: int = Field(ge=0, le=100)
    after_score: int = Field(ge=0, le=100)
    improvement_percentage: int
    score_estimated: bool = False
    enhancement_failures: int = Field(default=0, ge=0)
    ats_compliance: ComplianceCheck
    created_at: datetime
