import json
import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atsmatch.taxonomy import LocalTaxonomy, get_default_taxonomy_provider  # noqa: E402


class TaxonomyTests(unittest.TestCase):
    def test_buckets_for_common_skills(self):
        taxonomy = LocalTaxonomy()
        self.assertEqual(taxonomy.categorize_skill("React"), "frontend")
        self.assertEqual(taxonomy.categorize_skill("Node.js"), "backend")
        self.assertEqual(taxonomy.categorize_skill("PostgreSQL"), "database")
        self.assertEqual(taxonomy.categorize_skill("Docker"), "tools")

    def test_database_checked_before_other_buckets(self):
        taxonomy = LocalTaxonomy()
        self.assertEqual(taxonomy.categorize_skill("MongoDB"), "database")

    def test_short_markers_require_whole_tokens(self):
        taxonomy = LocalTaxonomy()
        self.assertEqual(taxonomy.categorize_skill("Go"), "backend")
        self.assertEqual(taxonomy.categorize_skill("Google Analytics"), "tools")

    def test_word_fragment_markers_require_whole_tokens(self):
        taxonomy = LocalTaxonomy()
        self.assertEqual(taxonomy.categorize_skill("Less"), "frontend")
        self.assertEqual(taxonomy.categorize_skill("Serverless"), "tools")
        self.assertEqual(taxonomy.categorize_skill("Rails"), "backend")
        self.assertEqual(taxonomy.categorize_skill("Guardrails"), "tools")

    def test_custom_categories_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "categories.json"
            path.write_text(json.dumps({"frontend": ["elm"], "backend": [], "database": []}), encoding="utf-8")
            taxonomy = LocalTaxonomy(path)
        self.assertEqual(taxonomy.categorize_skill("Elm"), "frontend")
        self.assertEqual(taxonomy.categorize_skill("React"), "tools")

    def test_default_provider_is_cached(self):
        self.assertIs(get_default_taxonomy_provider(), get_default_taxonomy_provider())


if __name__ == "__main__":
    unittest.main()
