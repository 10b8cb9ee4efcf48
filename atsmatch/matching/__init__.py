from .aggregate import GapAnalysis, calculate_overall_score, identify_gaps_and_strengths
from .education import analyze_education_match, map_education_level
from .experience import analyze_experience_match
from .keywords import analyze_keyword_match, candidate_corpus
from .recommendations import generate_recommendations
from .skills import analyze_skills_match

__all__ = [
    "analyze_skills_match",
    "analyze_experience_match",
    "analyze_education_match",
    "map_education_level",
    "analyze_keyword_match",
    "candidate_corpus",
    "calculate_overall_score",
    "identify_gaps_and_strengths",
    "GapAnalysis",
    "generate_recommendations",
]
