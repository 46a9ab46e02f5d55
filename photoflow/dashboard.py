from datetime import datetime
from typing import Iterable, List
from . import config
from .enums import ProjectStatus, TaskSection, TaskStatus
from .schemas import DashboardOut, SectionProgressOut

SECTION_ORDER = [section.value for section in TaskSection]


def active_projects(projects: Iterable) -> list:
    return [p for p in projects if p.status != ProjectStatus.DELIVERED.value]


def upcoming_deadlines(tasks: Iterable, limit: int = config.UPCOMING_DEADLINES_LIMIT) -> list:
    pending = [t for t in tasks if t.due_date and t.status != TaskStatus.COMPLETED.value]
    return sorted(pending, key=lambda t: t.due_date)[:limit]


def upcoming_events(events: Iterable, now: datetime, limit: int = config.UPCOMING_EVENTS_LIMIT) -> list:
    future = [e for e in events if e.start_date > now]
    return sorted(future, key=lambda e: e.start_date)[:limit]


def recent_projects(projects: Iterable, limit: int = config.RECENT_PROJECTS_LIMIT) -> list:
    return sorted(projects, key=lambda p: p.created_at, reverse=True)[:limit]


def pending_tasks(tasks: Iterable) -> int:
    return sum(1 for t in tasks if t.status != TaskStatus.COMPLETED.value)


def in_progress_tasks(tasks: Iterable) -> int:
    return sum(1 for t in tasks if t.status == TaskStatus.IN_PROGRESS.value)


def projects_this_month(projects: Iterable, now: datetime) -> int:
    return sum(1 for p in projects if (p.created_at.year, p.created_at.month) == (now.year, now.month))


def section_progress(tasks: Iterable) -> List[SectionProgressOut]:
    """Task counts per section, in the fixed display order.

    Tasks whose section is not one of the known four are left out.
    """
    totals = {section: [0, 0] for section in SECTION_ORDER}
    for task in tasks:
        counts = totals.get(task.section)
        if counts is None:
            continue
        counts[0] += 1
        if task.status == TaskStatus.COMPLETED.value:
            counts[1] += 1
    return [
        SectionProgressOut(section=section, total=total, completed=completed)
        for section, (total, completed) in totals.items()
    ]


def build_dashboard(storage, now: datetime = None) -> DashboardOut:
    now = now or datetime.now()
    with storage.locked():
        projects = storage.projects.list()
        tasks = storage.tasks.list()
        events = storage.calendar_events.list()
    return DashboardOut(
        total_projects=len(projects),
        pending_tasks=pending_tasks(tasks),
        in_progress_tasks=in_progress_tasks(tasks),
        projects_this_month=projects_this_month(projects, now),
        active_projects=active_projects(projects),
        upcoming_deadlines=upcoming_deadlines(tasks),
        upcoming_events=upcoming_events(events, now),
        recent_projects=recent_projects(projects),
    )
