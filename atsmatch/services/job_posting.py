from __future__ import annotations

import json
import logging
import re
from typing import Any, get_args

from pydantic import ValidationError

from atsmatch.ai import TextEnhancer
from atsmatch.core.config import settings
from atsmatch.core.errors import InputError
from atsmatch.optimization import EnhancementSession
from atsmatch.schemas import EducationRequirement, ExperienceRequirement, JobKeyword, JobPostingProfile
from atsmatch.schemas.job import EmploymentType, Importance, KeywordCategory, SeniorityLevel, WorkMode

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)
_CAMEL_RE = re.compile(r"_([a-z])")

KNOWN_SKILLS = (
    "JavaScript",
    "TypeScript",
    "React",
    "Node.js",
    "Python",
    "Java",
    "SQL",
    "AWS",
    "Docker",
    "Kubernetes",
    "Git",
    "HTML",
    "CSS",
    "MongoDB",
    "PostgreSQL",
    "Express",
    "Angular",
    "Vue.js",
    "REST API",
    "GraphQL",
    "Microservices",
)

_PROMPT_SCHEMA = """{
  "company_name": "string",
  "position_title": "string",
  "required_skills": ["skill"],
  "preferred_skills": ["skill"],
  "required_experience": [
    {"skill_area": "string", "minimum_years": 0, "maximum_years": 0, "is_required": true, "description": "string"}
  ],
  "education_requirements": [
    {"level": "HIGH_SCHOOL|ASSOCIATE|BACHELOR|MASTER|PHD", "field": "string", "is_required": true, "alternatives": ["string"]}
  ],
  "keywords": [
    {
      "keyword": "string",
      "category": "TECHNICAL|SOFT_SKILL|INDUSTRY|TOOL|FRAMEWORK|CERTIFICATION|OTHER",
      "importance": "HIGH|MEDIUM|LOW",
      "frequency": 1,
      "context": "string"
    }
  ],
  "location": "string",
  "work_mode": "ONSITE|REMOTE|HYBRID",
  "employment_type": "FULL_TIME|PART_TIME|CONTRACT|FREELANCE|INTERNSHIP",
  "ats_keywords": ["keyword"],
  "industry_type": "string",
  "seniority_level": "ENTRY|JUNIOR|MID|SENIOR|LEAD|EXECUTIVE"
}"""


def build_job_posting_prompt(text: str) -> str:
    return (
        "Analyze the following job posting and extract key information for ATS optimization.\n"
        "Return a JSON object with exactly this structure:\n"
        f"{_PROMPT_SCHEMA}\n\n"
        f'Job posting:\n"""\n{text.strip()}\n"""\n\n'
        "Guidelines:\n"
        "1. Extract all technical skills, soft skills and tools mentioned\n"
        "2. Identify keywords that are likely important for ATS systems\n"
        "3. Determine experience requirements by skill area\n"
        "4. Classify keywords by importance based on frequency and context\n"
        "5. Identify the seniority level from the job title and requirements\n"
        "6. Omit fields or use null when the information is not available\n\n"
        "Return only the JSON object, no additional text or explanation."
    )


def _camel(name: str) -> str:
    return _CAMEL_RE.sub(lambda match: match.group(1).upper(), name)


def _field(payload: dict[str, Any], name: str) -> Any:
    if name in payload:
        return payload[name]
    return payload.get(_camel(name))


def _safe_str(value: Any, max_len: int = 300) -> str | None:
    if not isinstance(value, str):
        return None
    text = re.sub(r"\s+", " ", value).strip()
    return text[:max_len].rstrip() or None


def _safe_str_list(value: Any, max_items: int = 60) -> list[str]:
    if not isinstance(value, list):
        return []
    output: list[str] = []
    for item in value:
        text = _safe_str(item, max_len=120)
        if text:
            output.append(text)
        if len(output) >= max_items:
            break
    return output


def _safe_choice(value: Any, literal: Any) -> str | None:
    if not isinstance(value, str):
        return None
    candidate = value.strip().upper()
    return candidate if candidate in get_args(literal) else None


def _snake_keys(item: dict[str, Any], names: tuple[str, ...]) -> dict[str, Any]:
    return {name: _field(item, name) for name in names if _field(item, name) is not None}


def _safe_experience(value: Any) -> list[ExperienceRequirement]:
    names = ("skill_area", "minimum_years", "maximum_years", "is_required", "description")
    output: list[ExperienceRequirement] = []
    for item in value if isinstance(value, list) else []:
        if not isinstance(item, dict):
            continue
        try:
            output.append(ExperienceRequirement.model_validate(_snake_keys(item, names)))
        except ValidationError:
            logger.debug("job_posting_experience_dropped item=%s", item)
    return output


def _safe_education(value: Any) -> list[EducationRequirement]:
    names = ("level", "field", "is_required", "alternatives")
    output: list[EducationRequirement] = []
    for item in value if isinstance(value, list) else []:
        if not isinstance(item, dict):
            continue
        data = _snake_keys(item, names)
        data["alternatives"] = _safe_str_list(data.get("alternatives"))
        try:
            output.append(EducationRequirement.model_validate(data))
        except ValidationError:
            logger.debug("job_posting_education_dropped item=%s", item)
    return output


def _safe_keywords(value: Any) -> list[JobKeyword]:
    output: list[JobKeyword] = []
    for item in value if isinstance(value, list) else []:
        if not isinstance(item, dict):
            continue
        keyword = _safe_str(item.get("keyword"), max_len=120)
        if not keyword:
            continue
        frequency = item.get("frequency")
        output.append(
            JobKeyword(
                keyword=keyword,
                category=_safe_choice(item.get("category"), KeywordCategory) or "OTHER",
                importance=_safe_choice(item.get("importance"), Importance) or "MEDIUM",
                frequency=frequency if isinstance(frequency, int) and not isinstance(frequency, bool) and frequency >= 0 else 1,
                context=_safe_str(item.get("context")),
            )
        )
    return output


def extract_known_skills(text: str) -> list[str]:
    found: list[str] = []
    for skill in KNOWN_SKILLS:
        pattern = rf"(?<![A-Za-z0-9]){re.escape(skill)}(?![A-Za-z0-9])"
        if re.search(pattern, text, flags=re.IGNORECASE):
            found.append(skill)
    return found


def heuristic_job_posting(text: str, job_id: str) -> JobPostingProfile:
    return JobPostingProfile(id=job_id, required_skills=extract_known_skills(text))


def _strip_fences(raw: str) -> str:
    return _FENCE_RE.sub("", raw.strip()).strip()


def parse_job_posting_payload(raw: str, job_id: str, *, fallback_text: str | None = None) -> JobPostingProfile:
    try:
        payload = json.loads(_strip_fences(raw))
    except (TypeError, ValueError) as exc:
        logger.warning("job_posting_payload_unparsable job_id=%s: %s", job_id, exc)
        return heuristic_job_posting(fallback_text or raw or "", job_id)
    if not isinstance(payload, dict):
        logger.warning("job_posting_payload_not_object job_id=%s type=%s", job_id, type(payload).__name__)
        return heuristic_job_posting(fallback_text or raw, job_id)

    return JobPostingProfile(
        id=job_id,
        company_name=_safe_str(_field(payload, "company_name")) or "",
        position_title=_safe_str(_field(payload, "position_title")) or "",
        required_skills=_safe_str_list(_field(payload, "required_skills")),
        preferred_skills=_safe_str_list(_field(payload, "preferred_skills")),
        required_experience=_safe_experience(_field(payload, "required_experience")),
        education_requirements=_safe_education(_field(payload, "education_requirements")),
        keywords=_safe_keywords(_field(payload, "keywords")),
        ats_keywords=_safe_str_list(_field(payload, "ats_keywords")),
        industry_type=_safe_str(_field(payload, "industry_type")),
        seniority_level=_safe_choice(_field(payload, "seniority_level"), SeniorityLevel),
        location=_safe_str(_field(payload, "location")),
        work_mode=_safe_choice(_field(payload, "work_mode"), WorkMode),
        employment_type=_safe_choice(_field(payload, "employment_type"), EmploymentType),
    )


async def extract_job_posting(
    text: str,
    enhancer: TextEnhancer,
    job_id: str,
    *,
    timeout_s: float | None = None,
) -> JobPostingProfile:
    if not text or not text.strip():
        raise InputError("job posting text must not be empty", code="empty_job_posting")
    if not job_id or not job_id.strip():
        raise InputError("job id must not be blank", code="invalid_job")

    session = EnhancementSession(enhancer=enhancer, timeout_s=timeout_s or settings.enhancement_timeout_s)
    raw = await session.request(build_job_posting_prompt(text), call_site="job_posting")
    if raw is None:
        logger.info("job_posting_heuristic_extraction job_id=%s", job_id)
        return heuristic_job_posting(text, job_id.strip())
    return parse_job_posting_payload(raw, job_id.strip(), fallback_text=text)
