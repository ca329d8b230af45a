from __future__ import annotations

from datetime import datetime

import pytest

from src.pinya_planner.pinya_planner.container import wire_container
from src.pinya_planner.pinya_planner.members.model import Member

from tests.fakes import InMemoryAttendance, InMemoryEvents, InMemoryLayouts, InMemoryMembers, InMemoryVotes

ADMIN_PASSWORD = "test-admin"


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 1, 19, 30, 0)


@pytest.fixture
def clock(fixed_now):
    return lambda: fixed_now


@pytest.fixture
def members() -> list[Member]:
    return [
        Member(nickname="ana", name="Ana", position="Baix"),
        Member(nickname="bru", name="Bru", position="Vent", position2="Mans"),
        Member(nickname="carla", name="Carla", position="Mans"),
        Member(nickname="dani", name="Dani", position="Contrafort", position2="Baix"),
        Member(nickname="edu", name="Edu", position="Agulla"),
        Member(nickname="gil", name="Gil"),
    ]


@pytest.fixture
def members_repo(members) -> InMemoryMembers:
    return InMemoryMembers(list(members))


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def events_repo() -> InMemoryEvents:
    return InMemoryEvents()


@pytest.fixture
def votes_repo() -> InMemoryVotes:
    return InMemoryVotes()


@pytest.fixture
def layouts_repo() -> InMemoryLayouts:
    return InMemoryLayouts()


@pytest.fixture
def container(members_repo, attendance_repo, events_repo, votes_repo, layouts_repo):
    return wire_container(
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        events_repo=events_repo,
        votes_repo=votes_repo,
        layouts_repo=layouts_repo,
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.pinya_planner.pinya_planner.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers() -> dict:
    return {"X-Admin-Password": ADMIN_PASSWORD}
