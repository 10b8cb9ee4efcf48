from __future__ import annotations

from atsmatch.normalize.utils import clamp_score, contains_ci, count_occurrences, dedupe_preserving_order
from atsmatch.schemas import CandidateProfile, JobPostingProfile, KeywordMatchAnalysis, PresentKeyword

SUMMARY_LOCATION = "Professional Summary"
SKILLS_LOCATION = "Skills"


def candidate_corpus(candidate: CandidateProfile) -> str:
    parts: list[str] = [candidate.objective]
    parts.extend(f"{exp.job_title} {exp.description}" for exp in candidate.experience)
    parts.extend(f"{edu.degree} {edu.field}" for edu in candidate.education)
    parts.extend(candidate.all_skills())
    return " ".join(part for part in parts if part and part.strip())


def find_keyword_locations(candidate: CandidateProfile, keyword: str) -> list[str]:
    locations: list[str] = []
    if contains_ci(candidate.objective, keyword):
        locations.append(SUMMARY_LOCATION)
    for index, experience in enumerate(candidate.experience):
        if contains_ci(experience.description, keyword) or contains_ci(experience.job_title, keyword):
            locations.append(f"Experience {index + 1}")
    if any(contains_ci(skill, keyword) for skill in candidate.all_skills()):
        locations.append(SKILLS_LOCATION)
    return locations


def job_keyword_terms(job: JobPostingProfile) -> list[str]:
    terms = [kw.keyword.strip() for kw in job.keywords] + list(job.ats_keywords)
    return dedupe_preserving_order(terms, key=lambda value: value.strip().lower())


def analyze_keyword_match(candidate: CandidateProfile, job: JobPostingProfile) -> KeywordMatchAnalysis:
    all_keywords = job_keyword_terms(job)
    corpus = candidate_corpus(candidate)

    present: list[PresentKeyword] = []
    for keyword in all_keywords:
        frequency = count_occurrences(corpus, keyword)
        if frequency > 0:
            present.append(
                PresentKeyword(
                    keyword=keyword,
                    frequency=frequency,
                    locations=find_keyword_locations(candidate, keyword),
                )
            )

    present_keys = {item.keyword.lower() for item in present}
    importance: dict[str, str] = {}
    for job_keyword in job.keywords:
        importance.setdefault(job_keyword.keyword.strip().lower(), job_keyword.importance)

    missing_high: list[str] = []
    missing_medium: list[str] = []
    missing_other: list[str] = []
    for term in all_keywords:
        key = term.lower()
        if key in present_keys:
            continue
        level = importance.get(key)
        if level == "HIGH":
            missing_high.append(term)
        elif level == "MEDIUM":
            missing_medium.append(term)
        else:
            # LOW keywords and bare ATS hints
            missing_other.append(term)

    total = len(all_keywords)
    score = clamp_score(len(present) / total * 100) if total else 100

    return KeywordMatchAnalysis(
        score=score,
        total_keywords=total,
        matched_keywords=len(present),
        missing_high_priority=missing_high,
        missing_medium_priority=missing_medium,
        missing_other=missing_other,
        present_keywords=present,
    )
