"""
teamops test suite - Shared fixtures.

Run:  pytest tests/ -v
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from teamops.delegation.models import Member
from teamops.priority.models import Task

# Fixed reference: January 15, 2024 at noon UTC
NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def days_from_now(days: float) -> datetime:
    """A timestamp `days` away from NOW (negative for the past)."""
    return NOW + timedelta(days=days)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_task():
    """Build a Task with sensible defaults, overriding any field."""
    def _make(**overrides) -> Task:
        data = {
            "id": "t1",
            "title": "Task",
            "urgency_level": 3,
            "importance_level": 3,
            "complexity_level": 3,
            "estimated_duration": "M",
            "durability_category": "SHORT",
        }
        data.update(overrides)
        return Task(**data)
    return _make


@pytest.fixture
def make_member():
    """Build a Member with sensible defaults, overriding any field."""
    def _make(**overrides) -> Member:
        data = {
            "id": "m1",
            "name": "Member",
            "seniority_level": 3,
            "max_concurrent_tasks": 5,
            "current_task_count": 0,
            "is_active": True,
        }
        data.update(overrides)
        return Member(**data)
    return _make
