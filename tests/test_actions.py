"""
Unit tests for naming, tag editing and list views.
"""

from datetime import date

import pytest

from file_insights.actions.naming import (
    apply_convention,
    convention_example,
    split_words,
    suggest_name,
    suggest_name_for,
)
from file_insights.actions.tag_editor import add_tag, merge_generated_tags, remove_tag
from file_insights.actions.views import ViewFilter, filter_view, format_file_size, recent_files
from file_insights.config.preferences import NamingConvention, UserPreferences
from file_insights.engine.file_record import FileRecord
from tests.samples import GOOGLE_DOC, GOOGLE_FOLDER, PDF, PNG

DAY = date(2026, 10, 17)


class TestNaming:
    """Tests for naming conventions."""

    @pytest.mark.parametrize("convention,expected", [
        (NamingConvention.CAMEL_CASE, "2026-10-17_marketingPresentation_q1Launch"),
        (NamingConvention.KEBAB_CASE, "2026-10-17_marketing-presentation_q1-launch"),
        (NamingConvention.SNAKE_CASE, "2026-10-17_marketing_presentation_q1_launch"),
        (NamingConvention.PASCAL_CASE, "2026-10-17_MarketingPresentation_Q1Launch"),
    ])
    def test_convention_examples(self, convention, expected):
        """Test the example shown for each convention."""
        assert convention_example(convention, DAY) == expected

    def test_split_words(self):
        """Test separators and camel humps both split words."""
        assert split_words("marketing-presentation Q1Launch") == [
            "marketing", "presentation", "Q1", "Launch",
        ]

    def test_reformat_existing_name(self):
        """Test an already-styled name converts between conventions."""
        assert apply_convention("quarterlyBudget_review", NamingConvention.KEBAB_CASE) == (
            "quarterly-budget-review"
        )

    def test_empty_text(self):
        """Test text without words formats to an empty string."""
        assert apply_convention(" -_ ", NamingConvention.PASCAL_CASE) == ""

    def test_empty_project_dropped(self):
        """Test an empty project leaves no trailing separator."""
        assert suggest_name("Annual Report", "", NamingConvention.SNAKE_CASE, DAY, ".pdf") == (
            "2026-10-17_annual_report.pdf"
        )

    def test_suggest_from_preferences(self):
        """Test the saved convention is used."""
        prefs = UserPreferences(NamingConvention.PASCAL_CASE)

        assert suggest_name_for("team sync", "apollo", prefs, DAY) == "2026-10-17_TeamSync_Apollo"


class TestTagEditor:
    """Tests for tag edits."""

    def test_add_trims_and_appends(self):
        """Test new tags are trimmed and appended."""
        assert add_tag(["a"], "  b ") == ["a", "b"]

    @pytest.mark.parametrize("new_tag", ["", "   ", None])
    def test_add_blank_is_noop(self, new_tag):
        """Test blank tags are ignored."""
        assert add_tag(["a"], new_tag) == ["a"]

    def test_add_existing_is_noop(self):
        """Test duplicate tags are not added."""
        assert add_tag(["a", "b"], "a") == ["a", "b"]

    def test_add_to_none(self):
        """Test adding to a record without tags."""
        assert add_tag(None, "new") == ["new"]

    def test_add_does_not_mutate(self):
        """Test the input list is left untouched."""
        tags = ["a"]
        add_tag(tags, "b")

        assert tags == ["a"]

    def test_remove(self):
        """Test removal drops every equal entry."""
        assert remove_tag(["a", "b", "a"], "a") == ["b"]
        assert remove_tag(["a"], "missing") == ["a"]
        assert remove_tag(None, "a") == []

    def test_merge_generated_tags(self):
        """Test generated tags follow existing ones without repeats."""
        record = FileRecord(id="x", name="Project report", mime_type=PDF, tags=["client", "pdf"])

        assert merge_generated_tags(record) == ["client", "pdf", "project", "report"]


class TestViews:
    """Tests for file list views."""

    @pytest.fixture
    def files(self):
        """One file per kind."""
        return [
            FileRecord(id="folder", mime_type=GOOGLE_FOLDER),
            FileRecord(id="image", mime_type=PNG),
            FileRecord(id="doc", mime_type=GOOGLE_DOC),
            FileRecord(id="pdf", mime_type=PDF),
            FileRecord(id="figma", mime_type="application/figma"),
            FileRecord(id="none", mime_type=None),
        ]

    @pytest.mark.parametrize("view,expected", [
        (ViewFilter.ALL, ["folder", "image", "doc", "pdf", "figma", "none"]),
        (ViewFilter.FILES, ["image", "doc", "pdf", "figma", "none"]),
        (ViewFilter.FOLDERS, ["folder"]),
        (ViewFilter.IMAGES, ["image"]),
        (ViewFilter.DOCUMENTS, ["doc", "pdf"]),
        (ViewFilter.OTHERS, ["figma", "none"]),
    ])
    def test_filters(self, files, view, expected):
        """Test each view selects the right files."""
        assert [f.id for f in filter_view(files, view)] == expected

    def test_mime_case_ignored(self):
        """Test an upper-case MIME type lands in the same view as its tag."""
        files = [
            FileRecord(id="pdf", mime_type="application/PDF"),
            FileRecord(id="jpg", mime_type="IMAGE/JPEG"),
        ]

        assert [f.id for f in filter_view(files, ViewFilter.DOCUMENTS)] == ["pdf"]
        assert [f.id for f in filter_view(files, ViewFilter.IMAGES)] == ["jpg"]

    def test_recent_files_limit(self):
        """Test only the newest files are kept."""
        files = [
            FileRecord(id=str(day), modified_time=f"2026-10-{day:02d}T00:00:00Z")
            for day in range(1, 15)
        ]

        assert [f.id for f in recent_files(files, 3)] == ["14", "13", "12"]

    @pytest.mark.parametrize("size,expected", [
        (0, "0.0 B"),
        (1023, "1023.0 B"),
        (1536, "1.5 KB"),
        (1048576, "1.0 MB"),
        (3 * 1024 ** 3, "3.0 GB"),
        (5 * 1024 ** 4, "5120.0 GB"),
    ])
    def test_format_file_size(self, size, expected):
        """Test sizes use 1024 steps capped at GB."""
        assert format_file_size(size) == expected
