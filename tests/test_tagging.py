"""
Unit tests for smart tag generation.
"""

import pytest

from file_insights.config.rules import RuleTarget, TagRule
from file_insights.engine.tagging import TagGenerator, generate_tags
from tests.samples import GOOGLE_DOC, PDF, PNG, XLSX


class TestGenerateTags:
    """Tests for the default tag rules."""

    def test_union_of_matching_rules(self):
        """Test every matching rule contributes its tag."""
        tags = generate_tags("Budget meeting agenda", GOOGLE_DOC)

        assert set(tags) == {"document", "financial", "meeting"}

    def test_name_rules_are_case_insensitive(self):
        """Test name keywords match regardless of case."""
        tags = generate_tags("PROJECT Proposal REPORT", "text/plain")

        assert tags == ["project", "proposal", "report"]

    def test_mime_rules_are_case_insensitive(self):
        """Test MIME keywords match regardless of case."""
        assert generate_tags("scan", "application/PDF") == ["pdf"]

    def test_image_type(self):
        """Test image MIME types get the image tag."""
        assert generate_tags("holiday", PNG) == ["image"]

    def test_office_spreadsheet_matches_document_and_spreadsheet(self):
        """Test substring rules fire independently on one MIME type."""
        assert set(generate_tags("numbers", XLSX)) == {"document", "spreadsheet"}

    def test_financial_added_once(self):
        """Test a tag shared by several keywords appears once."""
        tags = generate_tags("invoice for budget", PDF)

        assert tags.count("financial") == 1
        assert set(tags) == {"pdf", "financial"}

    def test_meeting_notes(self):
        """Test meeting and notes are separate tags."""
        assert generate_tags("Weekly meeting notes", "text/plain") == ["meeting", "notes"]

    @pytest.mark.parametrize("name,mime_type", [
        (None, None),
        ("", ""),
        ("holiday", None),
        (None, "unknown/unknown"),
    ])
    def test_empty_inputs(self, name, mime_type):
        """Test absent inputs produce no tags."""
        assert generate_tags(name, mime_type) == []

    def test_deterministic(self):
        """Test repeated calls give identical output."""
        first = generate_tags("Project budget meeting notes", GOOGLE_DOC)
        second = generate_tags("Project budget meeting notes", GOOGLE_DOC)

        assert first == second


class TestTagGenerator:
    """Tests for custom rule tables."""

    def test_custom_rules(self):
        """Test a generator only applies the rules it was given."""
        generator = TagGenerator([
            TagRule(RuleTarget.NAME, ("tax", "w2"), tag="tax"),
            TagRule(RuleTarget.MIME_TYPE, ("figma",), tag="design"),
        ])

        assert generator.generate("2025 W2 form", "application/figma") == ["tax", "design"]
        assert generator.generate("Project report", PDF) == []
