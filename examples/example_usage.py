"""Example: drive a planning session through the service layer (no Flask).

Loads today's checked-in members, lays out a small base, auto-assigns,
saves it and publishes it for today.
"""

import importlib

from config import get_settings_module

from src.pinya_planner.pinya_planner.common.datetime_utils import today_iso
from src.pinya_planner.pinya_planner.container import build_container
from src.pinya_planner.pinya_planner.core.enums import PoolMode
from src.pinya_planner.pinya_planner.logging_config import setup_logging
from src.pinya_planner.pinya_planner.planner.canvas import Point, Rect
from src.pinya_planner.pinya_planner.planner.session import PlanningSession
from src.pinya_planner.pinya_planner.publication.model import PublishMode


def main():
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(db_config=settings.DB_CONFIG)

    session = PlanningSession(
        pool_selector=container.pool_selector,
        layouts=container.layout_service,
        engine=container.assignment_engine,
        trash_bounds=Rect(left=0, top=700, right=120, bottom=800),
        rotation_step=container.rotation_step,
    )
    session.new_layout(name="Pinya demo", folder="Assajos")

    for label in ("Baix", "Baix", "Vent", "Mans", "Contrafort", "Agulla"):
        session.add_role(label)

    session.refresh_pool(PoolMode.CHECKED_IN, today_iso())
    print("Pool:", [m.nickname for m in session.pool])

    result = session.auto_assign()
    print("Assigned:", [(role_id, m.nickname) for role_id, m in result.assignments])
    print("Unfilled:", result.unfilled)

    # Drop one of the empty slots in the trash before saving.
    if result.unfilled:
        session.on_drag_role_to_trash(result.unfilled[0], Point(x=60, y=750))

    saved = session.save()
    print(saved.outcome.value, saved.layout.layout_id)

    published = container.publication_service.publish([saved.layout.layout_id], PublishMode.dated(today_iso()))
    print("Published:", {k: sorted(v) for k, v in published.items()})


if __name__ == "__main__":
    main()
