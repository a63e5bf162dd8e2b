"""
Shared fixtures for the insight engine tests.
"""

from datetime import timedelta

import pytest

from file_insights.engine.file_record import FileRecord, Owner
from tests.samples import NOW, PDF, iso


@pytest.fixture
def now():
    """The fixed current instant used across tests."""
    return NOW


@pytest.fixture
def make_file():
    """Factory for file records modified a number of days before NOW."""
    counter = {"next": 0}

    def _make(name, mime_type=PDF, days_ago=60.0, owner="Alice", **kwargs):
        counter["next"] += 1
        owners = [Owner(display_name=owner)] if owner else []
        file_id = kwargs.pop("id", f"file-{counter['next']}")
        modified_time = kwargs.pop("modified_time", iso(NOW - timedelta(days=days_ago)))
        return FileRecord(
            id=file_id,
            name=name,
            mime_type=mime_type,
            modified_time=modified_time,
            owners=owners,
            **kwargs
        )

    return _make
