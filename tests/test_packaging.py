"""
Tests for the project metadata.
"""

import os
import unittest

PYPROJECT = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "pyproject.toml")


class TestProjectMetadata(unittest.TestCase):
    """Test pyproject.toml declarations."""

    def setUp(self):
        with open(PYPROJECT, encoding="utf-8") as handle:
            self.content = handle.read()

    def test_declares_rapidfuzz(self):
        self.assertIn('"rapidfuzz', self.content)

    def test_readme_not_pointing_at_requirements_documents(self):
        self.assertNotIn("SPEC_FULL.md", self.content)
        self.assertNotIn("spec.md", self.content)


if __name__ == "__main__":
    unittest.main()
