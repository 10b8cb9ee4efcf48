from .checker import (
    CONTACT_CHECK,
    EXPERIENCE_CHECK,
    KEYWORD_CHECK,
    SUMMARY_CHECK,
    check_ats_compliance,
    resume_text,
)

__all__ = [
    "CONTACT_CHECK",
    "SUMMARY_CHECK",
    "KEYWORD_CHECK",
    "EXPERIENCE_CHECK",
    "check_ats_compliance",
    "resume_text",
]
