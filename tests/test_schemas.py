import sys
import unittest
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch.schemas import (  # noqa: E402
    DEFAULT_SECTION_ORDER,
    CandidateProfile,
    ExperienceRequirement,
    JobKeyword,
    JobPostingProfile,
    TechnicalSkills,
    WorkExperience,
)


class SchemaValidationTests(unittest.TestCase):
    def test_job_id_is_required_and_trimmed(self):
        self.assertEqual(JobPostingProfile(id="  job-1 ").id, "job-1")
        with self.assertRaises(ValidationError):
            JobPostingProfile(id="   ")
        with self.assertRaises(ValidationError):
            JobPostingProfile.model_validate({"position_title": "Engineer"})

    def test_blank_skill_entries_are_dropped(self):
        job = JobPostingProfile(id="job-1", required_skills=[" React ", "", "  "], ats_keywords=["", "Agile"])
        self.assertEqual(job.required_skills, ["React"])
        self.assertEqual(job.ats_keywords, ["Agile"])

    def test_requirement_constraints(self):
        with self.assertRaises(ValidationError):
            ExperienceRequirement(skill_area="Python", minimum_years=-1)
        with self.assertRaises(ValidationError):
            JobKeyword(keyword="Agile", importance="URGENT")
        self.assertEqual(JobKeyword(keyword="Agile").importance, "MEDIUM")

    def test_work_experience_dates(self):
        experience = WorkExperience(start_date=" 2021-03 ", end_date="")
        self.assertEqual(experience.start_date, "2021-03")
        self.assertIsNone(experience.end_date)
        with self.assertRaises(ValidationError):
            WorkExperience(start_date="March")

    def test_candidate_defaults(self):
        candidate = CandidateProfile()
        self.assertEqual(candidate.section_order, list(DEFAULT_SECTION_ORDER))
        self.assertIsNone(candidate.technical_skills)
        self.assertEqual(candidate.all_skills(), [])

    def test_all_skills_merges_technical_buckets(self):
        candidate = CandidateProfile(
            skills=["Git"],
            technical_skills=TechnicalSkills(frontend=["React"], database=["Redis"]),
        )
        self.assertEqual(candidate.all_skills(), ["Git", "React", "Redis"])


if __name__ == "__main__":
    unittest.main()
