from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .job import Importance

IssueType = Literal["FORMAT", "KEYWORD", "STRUCTURE", "LENGTH", "CONTENT"]
Effort = Literal["LOW", "MEDIUM", "HIGH"]


class ComplianceIssue(BaseModel):
    type: IssueType
    severity: Importance
    description: str
    solution: str | None = None


class ComplianceRecommendation(BaseModel):
    category: str
    recommendation: str
    impact: Importance
    effort: Effort


class ComplianceCheck(BaseModel):
    score: int = Field(ge=0, le=100)
    issues: list[ComplianceIssue] = Field(default_factory=list)
    recommendations: list[ComplianceRecommendation] = Field(default_factory=list)
    passed_checks: list[str] = Field(default_factory=list)
    failed_checks: list[str] = Field(default_factory=list)
