"""
Shared pytest fixtures and path setup for unit tests.
"""

import os
import sys
from pathlib import Path

# Set environment defaults BEFORE any officeconnect imports so Settings
# validation is deterministic. These are test-only values.
os.environ.setdefault("OFFICECONNECT_ENVIRONMENT", "test")
os.environ.setdefault("OFFICECONNECT_SECRET_KEY", "test-secret-key-for-unit-tests")

# Add src to sys.path so officeconnect.* imports work without an install.
PROJECT_SRC = Path(__file__).resolve().parents[2] / "src"
if str(PROJECT_SRC) not in sys.path:
    sys.path.insert(0, str(PROJECT_SRC))

import pytest

from officeconnect.core.config import Settings
from officeconnect.notifications.models import NotificationRecord
from officeconnect.testing import FakeHostBuilder

APP = "officeconnect"


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the process environment."""
    return Settings(
        OFFICECONNECT_APP_NAME=APP,
        OFFICECONNECT_ENVIRONMENT="test",
        OFFICECONNECT_SECRET_KEY="unit-test-secret",
        OFFICECONNECT_BASE_URL="https://cloud.example.com",
        OFFICECONNECT_DOCUMENT_SERVER_URL="https://docs.example.com",
    )


@pytest.fixture
def host_builder() -> FakeHostBuilder:
    """Host with alice's report.docx (42) shared with bob."""
    return (
        FakeHostBuilder(app_name=APP)
        .with_user("alice", "Alice Liddell")
        .with_user("bob", "Bob Builder")
        .with_file("alice", 42, "report.docx", shared_with=["bob"])
    )


def _make_record(
    *,
    app: str = APP,
    user: str = "bob",
    notifier_id: str = "alice",
    file_id: int = 42,
    action_type: str = "view",
    action_data: object = "x",
    comment: str = "Please review",
) -> NotificationRecord:
    return NotificationRecord(
        app=app,
        user=user,
        subject_parameters={
            "notifierId": notifier_id,
            "fileId": file_id,
            "actionLink": {"action": {"type": action_type, "data": action_data}},
        },
        object_id=comment,
    )


@pytest.fixture
def record() -> NotificationRecord:
    return _make_record()


@pytest.fixture
def make_record():
    """Factory for mention records; keyword arguments override the defaults."""
    return _make_record
