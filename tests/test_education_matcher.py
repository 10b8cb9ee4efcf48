import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch.matching import analyze_education_match, map_education_level  # noqa: E402
from atsmatch.schemas import (  # noqa: E402
    CandidateProfile,
    Certificate,
    Education,
    EducationRequirement,
    JobPostingProfile,
)


def _job(*requirements):
    return JobPostingProfile(id="job-edu", education_requirements=list(requirements))


class EducationMatcherTests(unittest.TestCase):
    def test_degree_level_mapping(self):
        self.assertEqual(map_education_level("MSc"), "MASTER")
        self.assertEqual(map_education_level("Master of Engineering"), "MASTER")
        self.assertEqual(map_education_level("MBA"), "MASTER")
        self.assertEqual(map_education_level("Ph.D."), "PHD")
        self.assertEqual(map_education_level("Bachelor of Science"), "BACHELOR")
        self.assertEqual(map_education_level("Associate of Arts"), "ASSOCIATE")
        self.assertEqual(map_education_level(""), "UNKNOWN")

    def test_level_and_field_points(self):
        candidate = CandidateProfile(
            education=[Education(degree="MSc", field="Computer Science", university="State University")]
        )
        result = analyze_education_match(
            candidate, _job(EducationRequirement(level="BACHELOR", field="Computer Science"))
        )
        self.assertTrue(result.has_required_level)
        self.assertTrue(result.has_required_field)
        self.assertEqual(result.score, 90)
        self.assertEqual(result.user_education[0].level, "MASTER")

    def test_certificate_points_capped_at_hundred(self):
        candidate = CandidateProfile(
            education=[Education(degree="PhD", field="Computer Science")],
            certificates=[Certificate(name="AWS Solutions Architect")],
        )
        result = analyze_education_match(
            candidate, _job(EducationRequirement(level="MASTER", field="Computer Science"))
        )
        self.assertEqual(result.score, 100)
        self.assertEqual(result.additional_certifications, ["AWS Solutions Architect"])

    def test_insufficient_level(self):
        candidate = CandidateProfile(education=[Education(degree="Associate of Science", field="Biology")])
        result = analyze_education_match(candidate, _job(EducationRequirement(level="MASTER", field="Physics")))
        self.assertFalse(result.has_required_level)
        self.assertFalse(result.has_required_field)
        self.assertEqual(result.score, 0)

    def test_empty_degree_never_satisfies_level(self):
        candidate = CandidateProfile(education=[Education(degree="", field="Computer Science")])
        result = analyze_education_match(candidate, _job(EducationRequirement(level="HIGH_SCHOOL")))
        self.assertFalse(result.has_required_level)

    def test_no_requirements(self):
        with_education = analyze_education_match(
            CandidateProfile(education=[Education(degree="BSc", field="Math")]), _job()
        )
        without_education = analyze_education_match(CandidateProfile(), _job())
        self.assertEqual(with_education.score, 100)
        self.assertEqual(without_education.score, 70)


if __name__ == "__main__":
    unittest.main()
