import calendar
import logging
from collections import defaultdict
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Dict, List, Tuple
from .schemas import CalendarOut, DayWindow, TimelineItem

logger = logging.getLogger(__name__)


class View(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class Direction(str, Enum):
    PREV = "prev"
    NEXT = "next"
    TODAY = "today"


def start_of_week(day: date) -> date:
    # Weeks run Sunday..Saturday; date.weekday() counts from Monday == 0.
    return day - timedelta(days=(day.weekday() + 1) % 7)


def end_of_week(day: date) -> date:
    return start_of_week(day) + timedelta(days=6)


def month_grid_bounds(day: date) -> Tuple[date, date]:
    first = day.replace(day=1)
    last = day.replace(day=calendar.monthrange(day.year, day.month)[1])
    return start_of_week(first), end_of_week(last)


def window_bounds(view: View, reference: date) -> Tuple[date, date]:
    view = View(view)
    if view is View.MONTH:
        return month_grid_bounds(reference)
    if view is View.WEEK:
        return start_of_week(reference), end_of_week(reference)
    return reference, reference


def add_months(day: date, months: int) -> date:
    index = day.month - 1 + months
    year = day.year + index // 12
    month = index % 12 + 1
    if not date.min.year <= year <= date.max.year:
        raise OverflowError("date value out of range")
    last = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last))


def navigate(reference: date, view: View, direction: Direction, today: date = None) -> date:
    """Step the reference date one view unit back or forward, or reset it to today."""
    view = View(view)
    direction = Direction(direction)
    if direction is Direction.TODAY:
        return today or date.today()
    step = 1 if direction is Direction.NEXT else -1
    if view is View.MONTH:
        return add_months(reference, step)
    if view is View.WEEK:
        return reference + timedelta(weeks=step)
    return reference + timedelta(days=step)


def iter_days(start: date, end: date):
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def event_item(event) -> TimelineItem:
    return TimelineItem(
        id=event.id,
        type=event.type,
        title=event.title,
        start_date=event.start_date,
        project_id=event.project_id,
        source="event",
        end_date=event.end_date,
        description=event.description,
        location=event.location,
    )


def task_item(task) -> TimelineItem:
    return TimelineItem(
        id=task.id,
        type="Deadline",
        title=task.title,
        start_date=task.due_date,
        project_id=task.project_id,
        source="task",
    )


def project_item(project) -> TimelineItem:
    return TimelineItem(
        id=project.id,
        type="Photoshoot",
        title=project.name,
        start_date=project.shoot_date,
        project_id=project.id,
        source="project",
    )


class Timeline:
    """Merges calendar events, task due dates and project shoot dates per day.

    Completed tasks still show up; a shoot date and an explicit Photoshoot
    event for the same project are both kept.
    """

    def __init__(self, storage):
        self.storage = storage

    def collect(self, start: date, end: date) -> Dict[date, List[TimelineItem]]:
        lower = datetime.combine(start, time.min)
        upper = datetime.combine(end + timedelta(days=1), time.min)
        buckets = defaultdict(list)
        with self.storage.locked():
            events = self.storage.calendar_events.list_in_range("start_date", lower, upper)
            tasks = self.storage.tasks.list_in_range("due_date", lower, upper)
            projects = self.storage.projects.list_in_range("shoot_date", lower, upper)
        # Source order (events, deadlines, shoots) is the tie-break for equal start times.
        for event in events:
            buckets[event.start_date.date()].append(event_item(event))
        for task in tasks:
            buckets[task.due_date.date()].append(task_item(task))
        for project in projects:
            buckets[project.shoot_date.date()].append(project_item(project))
        for day, items in buckets.items():
            items.sort(key=lambda item: item.start_date)
        return buckets

    def items_for_day(self, day: date) -> List[TimelineItem]:
        return self.collect(day, day).get(day, [])

    def days(self, start: date, end: date, month: int = None) -> List[DayWindow]:
        buckets = self.collect(start, end)
        return [
            DayWindow(day=day, in_month=month is None or day.month == month, items=buckets.get(day, []))
            for day in iter_days(start, end)
        ]

    def day_window(self, reference: date) -> DayWindow:
        return DayWindow(day=reference, in_month=True, items=self.items_for_day(reference))

    def week_window(self, reference: date) -> List[DayWindow]:
        return self.days(start_of_week(reference), end_of_week(reference))

    def month_window(self, reference: date) -> List[DayWindow]:
        start, end = month_grid_bounds(reference)
        return self.days(start, end, month=reference.month)

    def window(self, view: View, reference: date) -> CalendarOut:
        view = View(view)
        start, end = window_bounds(view, reference)
        if view is View.MONTH:
            days = self.month_window(reference)
        elif view is View.WEEK:
            days = self.week_window(reference)
        else:
            days = [self.day_window(reference)]
        logger.debug("Built %s window %s..%s (%d days)", view.value, start, end, len(days))
        return CalendarOut(view=view.value, reference_date=reference, start=start, end=end, days=days)
