from .candidate import (
    DEFAULT_SECTION_ORDER,
    CandidateProfile,
    Certificate,
    Education,
    PersonalInfo,
    Project,
    TechnicalSkills,
    WorkExperience,
)
from .compliance import ComplianceCheck, ComplianceIssue, ComplianceRecommendation
from .job import (
    EducationRequirement,
    ExperienceRequirement,
    JobKeyword,
    JobPostingProfile,
)
from .match import (
    EducationMatchAnalysis,
    ExperienceAreaMatch,
    ExperienceMatchAnalysis,
    KeywordMatchAnalysis,
    MatchResult,
    OptimizationRecommendation,
    PartialSkillMatch,
    PresentKeyword,
    RelevantExperience,
    SkillsMatchAnalysis,
    StrengthArea,
    UserEducationSummary,
    WeakArea,
)
from .optimization import (
    OPTIMIZATION_LEVELS,
    OptimizationLevel,
    EnhancedSection,
    OptimizationChange,
    OptimizationResult,
    OptimizationSection,
)

__all__ = [
    "DEFAULT_SECTION_ORDER",
    "CandidateProfile",
    "Certificate",
    "Education",
    "PersonalInfo",
    "Project",
    "TechnicalSkills",
    "WorkExperience",
    "EducationRequirement",
    "ExperienceRequirement",
    "JobKeyword",
    "JobPostingProfile",
    "PartialSkillMatch",
    "SkillsMatchAnalysis",
    "ExperienceAreaMatch",
    "RelevantExperience",
    "ExperienceMatchAnalysis",
    "UserEducationSummary",
    "EducationMatchAnalysis",
    "PresentKeyword",
    "KeywordMatchAnalysis",
    "WeakArea",
    "StrengthArea",
    "OptimizationRecommendation",
    "MatchResult",
    "ComplianceIssue",
    "ComplianceRecommendation",
    "ComplianceCheck",
    "OPTIMIZATION_LEVELS",
    "OptimizationLevel",
    "OptimizationSection",
    "OptimizationChange",
    "EnhancedSection",
    "OptimizationResult",
]
