import sys
import unittest
from datetime import date
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch.normalize import (  # noqa: E402
    clamp_score,
    count_occurrences,
    dedupe_preserving_order,
    jaccard_similarity,
    normalize_skill,
    parse_date,
    round_half_up,
    words,
    years_between,
)


class NormalizationTests(unittest.TestCase):
    def test_normalize_skill_strips_punctuation_and_case(self):
        self.assertEqual(normalize_skill("  Node.js "), "nodejs")
        self.assertEqual(normalize_skill("C#"), "c")
        self.assertEqual(normalize_skill("REST   API"), "rest api")
        self.assertEqual(normalize_skill(None), "")

    def test_jaccard_similarity(self):
        self.assertEqual(jaccard_similarity("Google Cloud Platform", "google cloud platform gcp"), 0.75)
        self.assertEqual(jaccard_similarity("React", "react"), 1.0)
        self.assertEqual(jaccard_similarity("", ""), 0.0)

    def test_round_half_up_and_clamp(self):
        self.assertEqual(round_half_up(57.5), 58)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(2.49), 2)
        self.assertEqual(clamp_score(150), 100)
        self.assertEqual(clamp_score(-3), 0)

    def test_count_occurrences_is_case_insensitive_literal(self):
        self.assertEqual(count_occurrences("Agile teams, agile rituals", "AGILE"), 2)
        self.assertEqual(count_occurrences("C++ and c++", "c++"), 2)
        self.assertEqual(count_occurrences("", "agile"), 0)

    def test_dedupe_preserving_order(self):
        self.assertEqual(dedupe_preserving_order(["React", "react", "Node.js", "NodeJS", ""]), ["React", "Node.js"])

    def test_words_lowercases_tokens(self):
        self.assertEqual(words("Built high-quality APIs."), ["built", "high-quality", "apis"])

    def test_parse_date_formats(self):
        self.assertEqual(parse_date("2021"), date(2021, 1, 1))
        self.assertEqual(parse_date("2021-06"), date(2021, 6, 1))
        self.assertEqual(parse_date("2021-06-15"), date(2021, 6, 15))
        self.assertEqual(parse_date("2021-06-15T10:00:00Z"), date(2021, 6, 15))
        self.assertIsNone(parse_date("last summer"))
        self.assertIsNone(parse_date(""))

    def test_years_between_never_negative(self):
        self.assertAlmostEqual(years_between(date(2022, 1, 1), date(2024, 1, 1)), 730 / 365)
        self.assertEqual(years_between(date(2024, 1, 1), date(2022, 1, 1)), 0.0)
        self.assertEqual(years_between(None, date(2022, 1, 1)), 0.0)


if __name__ == "__main__":
    unittest.main()
