import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch.optimization import extract_added_keywords, identify_enhanced_sections, track_changes  # noqa: E402
from atsmatch.schemas import (  # noqa: E402
    CandidateProfile,
    PersonalInfo,
    Project,
    TechnicalSkills,
    WorkExperience,
)


def _original():
    return CandidateProfile(
        personal_info=PersonalInfo(email="ada@example.com", github="github.com/ada"),
        objective="Python developer",
        experience=[WorkExperience(job_title="Engineer", description="Built APIs")],
        skills=["Python"],
    )


class ChangeTrackerTests(unittest.TestCase):
    def test_unchanged_profile_has_no_changes(self):
        self.assertEqual(track_changes(_original(), _original(), ["Python"]), [])

    def test_changes_are_reported_in_stable_order(self):
        original = _original()
        optimized = original.model_copy(deep=True)
        optimized.objective = "Python developer practicing Agile"
        optimized.skills.append("Django")
        optimized.experience[0].description = "Built Django APIs with Agile rituals"
        optimized.technical_skills = TechnicalSkills(backend=["Django"])
        optimized.leadership = "Led a team of four."
        optimized.projects = [Project(name="Portfolio", technologies="Django, Postgres")]
        optimized.personal_info.github = "https://github.com/ada"
        optimized.section_order = ["personal_info", "objective", "skills", "experience"]

        changes = track_changes(original, optimized, ["Agile", "Python", "Django"])
        self.assertEqual(
            [(change.section, change.field, change.change_type) for change in changes],
            [
                ("objective", "objective", "MODIFIED"),
                ("skills", "skills", "ADDED"),
                ("experience", "experience[0].description", "ENHANCED"),
                ("technical_skills", "technical_skills.backend", "ADDED"),
                ("leadership", "leadership", "ADDED"),
                ("projects", "projects", "ADDED"),
                ("personal_info", "personal_info.github", "MODIFIED"),
                ("section_order", "section_order", "REORDERED"),
            ],
        )
        self.assertEqual(changes[0].keywords, ["Agile"])
        self.assertEqual(changes[1].keywords, ["Django"])
        self.assertEqual(changes[2].keywords, ["Agile", "Django"])
        self.assertEqual(changes[5].keywords, ["Django", "Postgres"])

    def test_enhanced_sections_group_by_section(self):
        original = _original()
        optimized = original.model_copy(deep=True)
        optimized.objective = "Python developer practicing Agile"
        optimized.skills.extend(["Django", "Docker"])
        changes = track_changes(original, optimized, ["Agile"])

        sections = identify_enhanced_sections(original, optimized, changes)
        self.assertEqual([section.section for section in sections], ["objective", "skills"])
        self.assertEqual(sections[0].original_length, len("Python developer"))
        self.assertEqual(sections[0].new_length, len("Python developer practicing Agile"))
        self.assertEqual(sections[1].original_length, 1)
        self.assertEqual(sections[1].new_length, 3)
        self.assertEqual(sections[1].added_keywords, ["Django", "Docker"])
        self.assertIn("1 improvements including 2 new keywords", sections[1].improvement_description)

    def test_extract_added_keywords(self):
        original = _original()
        optimized = original.model_copy(deep=True)
        optimized.objective = "Python developer practicing Agile delivery and Agile coaching"
        self.assertEqual(extract_added_keywords(original, optimized), ["practicing", "agile", "delivery", "coaching"])


if __name__ == "__main__":
    unittest.main()
