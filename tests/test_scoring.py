"""
Unit tests for importance scoring.
"""

from datetime import timedelta

import pytest

from file_insights.config.settings import ScoringConfig
from file_insights.engine.scoring import ImportanceScorer, score
from tests.samples import GOOGLE_DOC, NOW, PDF, XLSX


class TestRecency:
    """Tests for the recency bands."""

    @pytest.mark.parametrize("days_ago,expected", [
        (0.5, 3),
        (6.9, 3),
        (7, 2),
        (29.9, 2),
        (30, 0),
        (365, 0),
    ])
    def test_bands(self, make_file, now, days_ago, expected):
        """Test recency points per band for a neutral PDF."""
        file = make_file("scan.pdf", PDF, days_ago=days_ago)

        assert score(file, now) == expected

    def test_future_timestamp_counts_as_recent(self, make_file, now):
        """Test files modified after now land in the newest band."""
        file = make_file("scan.pdf", PDF, days_ago=-2)

        assert score(file, now) == 3


class TestSignals:
    """Tests for type and name signals."""

    def test_document_type(self, make_file, now):
        """Test native documents earn type points."""
        assert score(make_file("plain", GOOGLE_DOC), now) == 2

    def test_draft_penalty(self, make_file, now):
        """Test the draft penalty is applied."""
        assert score(make_file("draft plan", GOOGLE_DOC), now) == 1

    def test_negative_sum_clamps_to_zero(self, make_file, now):
        """Test a draft-only old file floors at 0."""
        assert score(make_file("draft.pdf", PDF), now) == 0

    def test_urgent_and_important_clamp(self, make_file, now):
        """Test the sum is capped at the maximum."""
        assert score(make_file("URGENT important.pdf", PDF), now) == 5

    def test_final_budget_report_scenario(self, make_file, now):
        """Test a recent final spreadsheet scores the maximum."""
        file = make_file("Final Budget Report.xlsx", XLSX, days_ago=2)

        assert score(file, now) == 5

    def test_missing_mime_type(self, make_file, now):
        """Test absent MIME types earn no type points."""
        assert score(make_file("final", None, days_ago=10), now) == 4


class TestDegradedInput:
    """Tests for malformed timestamps."""

    @pytest.mark.parametrize("modified_time", [None, "", "not-a-date", "2026-13-45"])
    def test_unusable_timestamp_scores_zero(self, make_file, now, modified_time):
        """Test unusable timestamps give the minimum score."""
        file = make_file("urgent important", GOOGLE_DOC, modified_time=modified_time)

        assert score(file, now) == 0

    @pytest.mark.parametrize("modified_time", [
        "0001-01-01T00:00:00+01:00",
        "9999-12-31T23:59:59-01:00",
    ])
    def test_out_of_range_timestamp_scores_zero(self, make_file, now, modified_time):
        """Test offsets that push a timestamp past the calendar edge score zero."""
        file = make_file("urgent final.pdf", PDF, modified_time=modified_time)

        assert score(file, now) == 0

    def test_naive_now_is_utc(self, make_file):
        """Test a naive current instant is treated as UTC."""
        file = make_file("scan.pdf", PDF, days_ago=3)

        assert score(file, NOW.replace(tzinfo=None)) == 3

    def test_offset_timestamps(self, make_file, now):
        """Test timestamps with a UTC offset are compared correctly."""
        local = (NOW - timedelta(days=6, hours=23)).astimezone()
        file = make_file("scan.pdf", PDF, modified_time=local.isoformat())

        assert score(file, now) == 3


class TestImportanceScorer:
    """Tests for scorer configuration."""

    def test_custom_max_score(self, make_file, now):
        """Test the clamp follows the configured maximum."""
        scorer = ImportanceScorer(ScoringConfig(max_score=10, important_threshold=4))
        file = make_file("urgent important final", PDF, days_ago=1)

        assert scorer.raw_score(file, now) == 11
        assert scorer.score(file, now) == 10

    def test_raw_score_for_bad_timestamp(self, make_file, now):
        """Test raw score reports unusable timestamps as None."""
        scorer = ImportanceScorer()

        assert scorer.raw_score(make_file("x", modified_time="garbage"), now) is None

    def test_bounds(self, make_file, now):
        """Test every score stays within bounds."""
        names = ["", "draft", "final draft", "urgent", "important urgent final"]
        mimes = [None, PDF, GOOGLE_DOC, XLSX, "application/vnd.google-apps.presentation"]
        for name in names:
            for mime_type in mimes:
                for days_ago in (1, 10, 100):
                    value = score(make_file(name, mime_type, days_ago=days_ago), now)
                    assert 0 <= value <= 5

    def test_idempotent(self, make_file, now):
        """Test scoring twice gives the same result."""
        file = make_file("final report", GOOGLE_DOC, days_ago=12)

        assert score(file, now) == score(file, now)
