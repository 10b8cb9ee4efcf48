from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from atsmatch.ai.types import TextEnhancer
from atsmatch.core.config import settings
from atsmatch.normalize.utils import contains_ci
from atsmatch.schemas import JobPostingProfile, WorkExperience

logger = logging.getLogger(__name__)

_CODE_FENCE = "```"


@dataclass(slots=True)
class EnhancementSession:
    """Wraps one optimization run's enhancer calls and counts the ones that fell back."""

    enhancer: TextEnhancer
    timeout_s: float = settings.enhancement_timeout_s
    failures: int = 0

    async def request(self, prompt: str, *, call_site: str) -> str | None:
        try:
            raw = await asyncio.wait_for(self.enhancer.enhance(prompt), timeout=self.timeout_s)
        except asyncio.TimeoutError:
            self.failures += 1
            logger.warning("text_enhancement_timeout call_site=%s timeout_s=%s", call_site, self.timeout_s)
            return None
        except Exception as exc:  # noqa: BLE001 - deterministic fallback is expected
            self.failures += 1
            logger.warning("text_enhancement_failed call_site=%s: %s", call_site, exc)
            return None

        text = _clean_completion(raw)
        if not text:
            self.failures += 1
            logger.warning("text_enhancement_empty call_site=%s", call_site)
            return None
        return text


def _clean_completion(raw: object) -> str:
    if not isinstance(raw, str):
        return ""
    text = raw.strip()
    if text.startswith(_CODE_FENCE):
        text = text.split("\n", 1)[1] if "\n" in text else ""
    if text.endswith(_CODE_FENCE):
        text = text[: -len(_CODE_FENCE)]
    return text.strip().strip('"').strip()


def build_objective_prompt(objective: str, keywords: list[str]) -> str:
    return (
        "Enhance the following professional objective by naturally incorporating these keywords: "
        f"{', '.join(keywords)}\n\n"
        f'Current objective:\n"{objective}"\n\n'
        "Requirements:\n"
        "1. Maintain natural language flow\n"
        "2. Keep the same tone and style\n"
        "3. Incorporate keywords seamlessly\n"
        "4. Don't make it sound artificial or keyword-stuffed\n"
        "5. Keep it concise and impactful\n\n"
        "Return only the enhanced objective, no additional text or explanation."
    )


def fallback_enhance_objective(objective: str, keywords: list[str]) -> str:
    keyword_phrase = ", ".join(keywords)
    return f"{objective.rstrip()} Experienced with {keyword_phrase} and committed to delivering high-quality results."


async def enhance_objective_with_keywords(session: EnhancementSession, objective: str, keywords: list[str]) -> str:
    if not keywords:
        return objective
    enhanced = await session.request(build_objective_prompt(objective, keywords), call_site="objective")
    if enhanced is None:
        return fallback_enhance_objective(objective, keywords)
    return enhanced


def relevant_role_keywords(experience: WorkExperience, keywords: list[str], limit: int) -> list[str]:
    return [
        keyword
        for keyword in keywords
        if contains_ci(experience.job_title, keyword) or contains_ci(experience.company, keyword)
    ][:limit]


def build_experience_prompt(experience: WorkExperience, job: JobPostingProfile, keywords: list[str]) -> str:
    return (
        "Create a compelling job description for this work experience that incorporates relevant "
        "keywords and follows ATS best practices:\n\n"
        f"Position: {experience.job_title}\n"
        f"Company: {experience.company}\n"
        f"Current description: {experience.description or 'No description provided'}\n\n"
        f"Target job requirements: {', '.join(job.required_skills[:5])}\n"
        f"Keywords to incorporate: {', '.join(keywords)}\n\n"
        "Requirements:\n"
        "1. Use action verbs to start each bullet point\n"
        "2. Include quantifiable achievements where possible\n"
        "3. Naturally incorporate the keywords\n"
        "4. Keep it relevant to the target job\n"
        "5. Use 3-4 bullet points\n"
        "6. Make it ATS-friendly\n\n"
        "Return only the enhanced description as bullet points, no additional text."
    )


def fallback_enhance_experience(experience: WorkExperience, keywords: list[str], job: JobPostingProfile) -> str:
    focus = keywords[:2] or job.required_skills[:2]
    if focus:
        lead = f"• Led initiatives involving {' and '.join(focus)} to improve operational efficiency"
    else:
        lead = "• Led initiatives to improve operational efficiency"
    bullets = [
        lead,
        "• Collaborated with cross-functional teams to deliver high-quality solutions",
        "• Implemented best practices and contributed to team success",
    ]
    if experience.description and experience.description.strip():
        bullets.insert(0, f"• {experience.description.strip()}")
    return "\n".join(bullets)


async def enhance_experience_description(
    session: EnhancementSession,
    experience: WorkExperience,
    job: JobPostingProfile,
    missing_keywords: list[str],
    *,
    keyword_limit: int = 3,
) -> str:
    keywords = relevant_role_keywords(experience, missing_keywords, keyword_limit)
    enhanced = await session.request(
        build_experience_prompt(experience, job, keywords),
        call_site=f"experience:{experience.job_title or experience.company}",
    )
    if enhanced is None:
        return fallback_enhance_experience(experience, keywords, job)
    return enhanced
