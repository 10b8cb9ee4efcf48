from .changes import extract_added_keywords, identify_enhanced_sections, track_changes
from .enhancement import EnhancementSession, fallback_enhance_experience, fallback_enhance_objective
from .tiers import LEVEL_RUNNERS, OptimizationContext, is_tech_role, run_optimization

__all__ = [
    "EnhancementSession",
    "OptimizationContext",
    "LEVEL_RUNNERS",
    "run_optimization",
    "is_tech_role",
    "fallback_enhance_objective",
    "fallback_enhance_experience",
    "track_changes",
    "identify_enhanced_sections",
    "extract_added_keywords",
]
