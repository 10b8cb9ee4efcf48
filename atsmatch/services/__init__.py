from .engine import MatchEngine, estimate_after_score, improvement_percentage
from .job_posting import build_job_posting_prompt, extract_job_posting, parse_job_posting_payload

__all__ = [
    "MatchEngine",
    "estimate_after_score",
    "improvement_percentage",
    "build_job_posting_prompt",
    "parse_job_posting_payload",
    "extract_job_posting",
]
