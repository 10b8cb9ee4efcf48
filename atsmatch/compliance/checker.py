from __future__ import annotations

from atsmatch.core.config.scoring import get_scoring_value
from atsmatch.normalize.utils import clamp_score, contains_ci
from atsmatch.schemas import (
    CandidateProfile,
    ComplianceCheck,
    ComplianceIssue,
    ComplianceRecommendation,
    JobPostingProfile,
)

CONTACT_CHECK = "Contact Information"
SUMMARY_CHECK = "Professional Summary"
KEYWORD_CHECK = "Keyword Optimization"
EXPERIENCE_CHECK = "Experience Details"


def resume_text(candidate: CandidateProfile) -> str:
    parts: list[str | None] = [candidate.objective]
    parts.extend(f"{exp.job_title} {exp.description}" for exp in candidate.experience)
    parts.extend(candidate.skills)
    parts.append(candidate.communication)
    parts.append(candidate.leadership)
    return " ".join(part for part in parts if part)


def check_ats_compliance(candidate: CandidateProfile, job: JobPostingProfile) -> ComplianceCheck:
    min_objective = int(get_scoring_value("compliance.min_objective_chars", 50))
    min_description = int(get_scoring_value("compliance.min_description_chars", 30))
    coverage = float(get_scoring_value("compliance.keyword_coverage", 0.6))

    issues: list[ComplianceIssue] = []
    passed: list[str] = []
    failed: list[str] = []

    info = candidate.personal_info
    if not info.phone.strip() or not info.email.strip():
        issues.append(
            ComplianceIssue(
                type="CONTENT",
                severity="HIGH",
                description="Missing essential contact information",
                solution="Add phone number and email address",
            )
        )
        failed.append(CONTACT_CHECK)
    else:
        passed.append(CONTACT_CHECK)

    if len(candidate.objective or "") < min_objective:
        issues.append(
            ComplianceIssue(
                type="CONTENT",
                severity="MEDIUM",
                description="Professional summary is missing or too short",
                solution=f"Add a compelling professional summary of at least {min_objective} characters",
            )
        )
        failed.append(SUMMARY_CHECK)
    else:
        passed.append(SUMMARY_CHECK)

    required = job.required_skills
    text = resume_text(candidate)
    mentioned = [skill for skill in required if contains_ci(text, skill)]
    if len(mentioned) < len(required) * coverage:
        issues.append(
            ComplianceIssue(
                type="KEYWORD",
                severity="HIGH",
                description="Low keyword density for job requirements",
                solution="Include more relevant keywords from the job posting",
            )
        )
        failed.append(KEYWORD_CHECK)
    else:
        passed.append(KEYWORD_CHECK)

    thin = [exp for exp in candidate.experience if len(exp.description or "") < min_description]
    if thin:
        issues.append(
            ComplianceIssue(
                type="CONTENT",
                severity="MEDIUM",
                description=f"{len(thin)} work experiences lack detailed descriptions",
                solution="Add detailed descriptions with achievements and responsibilities",
            )
        )
        failed.append(EXPERIENCE_CHECK)
    else:
        passed.append(EXPERIENCE_CHECK)

    total = len(passed) + len(failed)
    score = clamp_score(len(passed) / total * 100) if total else 0

    recommendations: list[ComplianceRecommendation] = []
    if issues:
        recommendations.append(
            ComplianceRecommendation(
                category="Content Enhancement",
                recommendation="Address missing content and improve keyword optimization",
                impact="HIGH",
                effort="MEDIUM",
            )
        )

    return ComplianceCheck(
        score=score,
        issues=issues,
        recommendations=recommendations,
        passed_checks=passed,
        failed_checks=failed,
    )
