import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch.matching import (  # noqa: E402
    calculate_overall_score,
    generate_recommendations,
    identify_gaps_and_strengths,
)
from atsmatch.schemas import (  # noqa: E402
    CandidateProfile,
    EducationMatchAnalysis,
    ExperienceMatchAnalysis,
    KeywordMatchAnalysis,
    SkillsMatchAnalysis,
    WeakArea,
    WorkExperience,
)


def _skills(score, missing=()):
    return SkillsMatchAnalysis(score=score, total_required=4, matched=2, missing=list(missing))


def _experience(score):
    return ExperienceMatchAnalysis(score=score, total_years_required=3, total_years_user=4)


def _education(score):
    return EducationMatchAnalysis(score=score, has_required_level=True, has_required_field=True)


def _keywords(score, high=(), medium=()):
    return KeywordMatchAnalysis(
        score=score,
        total_keywords=6,
        matched_keywords=2,
        missing_high_priority=list(high),
        missing_medium_priority=list(medium),
    )


class OverallScoreTests(unittest.TestCase):
    def test_weighted_score_rounds_half_up(self):
        self.assertEqual(calculate_overall_score(_skills(50), _experience(100), _education(100), _keywords(0)), 58)

    def test_all_perfect(self):
        self.assertEqual(calculate_overall_score(_skills(100), _experience(100), _education(100), _keywords(100)), 100)


class GapClassificationTests(unittest.TestCase):
    def test_weak_and_strong_areas(self):
        gaps = identify_gaps_and_strengths(
            _skills(50, missing=["Django", "Docker", "Kubernetes"]),
            _experience(100),
            _keywords(0, high=["Agile", "Scrum", "Kanban", "Jira"], medium=["Mentoring"]),
        )
        weak = {area.area: area for area in gaps.weak_areas}
        self.assertEqual(list(weak), ["Technical Skills", "ATS Keywords"])
        self.assertEqual(weak["Technical Skills"].impact, "MEDIUM")
        self.assertEqual(weak["ATS Keywords"].impact, "HIGH")
        self.assertEqual([area.area for area in gaps.strength_areas], ["Professional Experience"])
        self.assertEqual(gaps.missing_keywords, ["Agile", "Scrum", "Kanban", "Jira", "Mentoring"])

    def test_skills_impact_levels(self):
        low = identify_gaps_and_strengths(_skills(60, missing=["A"]), _experience(70), _keywords(70))
        high = identify_gaps_and_strengths(_skills(10, missing=list("ABCDEF")), _experience(70), _keywords(70))
        self.assertEqual(low.weak_areas[0].impact, "LOW")
        self.assertEqual(high.weak_areas[0].impact, "HIGH")

    def test_thresholds_are_boundaries(self):
        gaps = identify_gaps_and_strengths(_skills(70), _experience(60), _keywords(80))
        self.assertEqual(gaps.weak_areas, [])
        self.assertEqual([area.area for area in gaps.strength_areas], ["ATS Optimization"])

    def test_weak_experience(self):
        gaps = identify_gaps_and_strengths(_skills(90), _experience(40), _keywords(90))
        self.assertEqual([area.area for area in gaps.weak_areas], ["Relevant Experience"])


class RecommendationTests(unittest.TestCase):
    def test_rules_fire_in_order(self):
        candidate = CandidateProfile(
            objective="Engineer",
            experience=[WorkExperience(job_title="Developer", description="")],
        )
        weak = [WeakArea(area="Relevant Experience", score=30, description="", impact="MEDIUM")]
        recommendations = generate_recommendations(
            candidate,
            ["Django", "Docker", "Kubernetes", "Terraform", "Go", "Rust"],
            ["Agile", "Scrum", "Kanban", "Jira"],
            weak,
        )
        self.assertEqual(
            [rec.type for rec in recommendations],
            ["SKILL_GAP", "KEYWORD_MISSING", "CONTENT_ENHANCEMENT", "CONTENT_ENHANCEMENT", "EXPERIENCE_WEAK"],
        )
        self.assertIn("Django, Docker, Kubernetes, Terraform, Go in", recommendations[0].description)
        self.assertNotIn("Rust", recommendations[0].description)
        self.assertIn("Agile, Scrum, Kanban and", recommendations[1].description)
        self.assertEqual(recommendations[2].estimated_impact, 25)
        self.assertEqual(recommendations[3].title, "Optimize Professional Summary")
        self.assertEqual(len({rec.id for rec in recommendations}), 5)
        self.assertTrue(all(rec.id.startswith("rec_") for rec in recommendations))

    def test_complete_profile_gets_no_recommendations(self):
        candidate = CandidateProfile(
            objective=(
                "Senior backend engineer with a decade of experience designing "
                "distributed payment systems and internal platform tooling."
            ),
            experience=[
                WorkExperience(
                    job_title="Engineer",
                    description="Designed and operated event-driven services processing millions of payments.",
                )
            ],
        )
        self.assertEqual(generate_recommendations(candidate, [], [], []), [])


if __name__ == "__main__":
    unittest.main()
