from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .assignment.engine import AssignmentEngine
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .core.constants import DEFAULT_CASTELL_TYPE, DEFAULT_ROTATION_STEP
from .database.connection import DBConfig, DatabaseConnection
from .events.mysql_event_repository import MySQLEventRepository, MySQLVoteRepository
from .events.repository import EventRepository, VoteRepository
from .layouts.mysql_layout_repository import MySQLLayoutRepository
from .layouts.repository import LayoutRepository
from .layouts.service import LayoutService
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService
from .pool.factory import PoolStrategyFactory
from .pool.selector import PoolSelector
from .publication.service import PublicationService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    members_repo: MemberRepository
    attendance_repo: AttendanceRepository
    events_repo: EventRepository
    votes_repo: VoteRepository
    layouts_repo: LayoutRepository

    member_service: MemberService
    pool_selector: PoolSelector
    assignment_engine: AssignmentEngine
    layout_service: LayoutService
    publication_service: PublicationService

    rotation_step: int = DEFAULT_ROTATION_STEP
    default_castell_type: str = DEFAULT_CASTELL_TYPE


def wire_container(
    *,
    members_repo: MemberRepository,
    attendance_repo: AttendanceRepository,
    events_repo: EventRepository,
    votes_repo: VoteRepository,
    layouts_repo: LayoutRepository,
    conn: Optional[DatabaseConnection] = None,
    rotation_step: int = DEFAULT_ROTATION_STEP,
    default_castell_type: str = DEFAULT_CASTELL_TYPE,
) -> Container:
    """Build the services on top of any set of repositories."""
    factory = PoolStrategyFactory(attendance=attendance_repo, events=events_repo, votes=votes_repo)

    return Container(
        conn=conn,
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        events_repo=events_repo,
        votes_repo=votes_repo,
        layouts_repo=layouts_repo,
        member_service=MemberService(members_repo),
        pool_selector=PoolSelector(members_repo, factory),
        assignment_engine=AssignmentEngine(),
        layout_service=LayoutService(layouts_repo, default_castell_type=default_castell_type),
        publication_service=PublicationService(layouts_repo),
        rotation_step=int(rotation_step),
        default_castell_type=default_castell_type,
    )


def build_container(
    *,
    db_config: dict,
    rotation_step: int = DEFAULT_ROTATION_STEP,
    default_castell_type: str = DEFAULT_CASTELL_TYPE,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_container(
        members_repo=MySQLMemberRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        events_repo=MySQLEventRepository(conn),
        votes_repo=MySQLVoteRepository(conn),
        layouts_repo=MySQLLayoutRepository(conn),
        conn=conn,
        rotation_step=rotation_step,
        default_castell_type=default_castell_type,
    )
