"""
Pytest configuration and shared fixtures.

Provides a fixed "today" and small raw record sets shaped like the rows the
dashboard fetches (snake_case keys).
"""

from datetime import date

import pytest

from gantt.bounds import Bounds
from gantt.geometry import TimelineGeometry
from gantt.zoom import get_zoom


@pytest.fixture
def today():
    return date(2025, 1, 15)


@pytest.fixture
def project():
    return {
        "target_online_date": "2025-03-01",
        "target_offline_date": "2025-05-20",
        "delivery_date": "2025-04-10",
    }


@pytest.fixture
def tasks():
    return [
        {"id": 1, "title": "Framing", "status": "In Progress", "start_date": "2025-02-01", "due_date": "2025-02-10"},
        {"id": 2, "title": "Inspection", "status": "Completed", "due_date": "2025-01-20"},
        {"id": 3, "title": "No due date", "status": "Blocked", "start_date": "2025-01-01"},
    ]


@pytest.fixture
def milestones():
    return [
        {"id": 10, "name": "Permit", "due_date": "2025-01-20", "status": "Completed"},
        {"id": 11, "name": "Broken date", "due_date": "not a date", "status": "Pending"},
    ]


@pytest.fixture
def rfis():
    return [{"id": 5, "number": 7, "subject": "Anchor bolts", "due_date": "2025-01-25", "status": "Open"}]


@pytest.fixture
def submittals():
    return [{"id": 9, "spec_section": "05 12 00", "title": "Steel", "due_date": "2025-02-05", "status": "Rejected"}]


@pytest.fixture
def payload(project, tasks, milestones, rfis, submittals):
    return {
        "project": project,
        "tasks": tasks,
        "milestones": milestones,
        "rfis": rfis,
        "submittals": submittals,
    }


@pytest.fixture
def month_geometry():
    bounds = Bounds(start=date(2025, 1, 1), end=date(2025, 3, 1), today=date(2025, 1, 15))
    return TimelineGeometry(bounds, get_zoom("month"))
