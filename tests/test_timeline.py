"""Tests for the calendar timeline: merging, windows and navigation."""

from datetime import date, datetime

import pytest

from photoflow.timeline import (
    Timeline,
    add_months,
    end_of_week,
    month_grid_bounds,
    navigate,
    start_of_week,
)


def test_merge_orders_sources_by_start_time(storage, make_project):
    project = make_project(type="Blank", shoot_date=datetime(2025, 6, 1, 10, 0))
    storage.tasks.insert({"project_id": project.id, "title": "Send invoice", "due_date": datetime(2025, 6, 1, 23, 0)})
    storage.calendar_events.insert({
        "project_id": project.id,
        "title": "Hair and makeup",
        "type": "Meeting",
        "start_date": datetime(2025, 6, 1, 8, 0),
    })

    items = Timeline(storage).items_for_day(date(2025, 6, 1))

    assert [(i.start_date.hour, i.type, i.source) for i in items] == [
        (8, "Meeting", "event"),
        (10, "Photoshoot", "project"),
        (23, "Deadline", "task"),
    ]
    assert all(i.project_id == project.id for i in items)
    assert items[1].title == "Smith Wedding"
    assert items[2].title == "Send invoice"


def test_equal_start_times_keep_source_order(storage, make_project):
    at = datetime(2025, 6, 2, 12, 0)
    project = make_project(shoot_date=at)
    storage.tasks.insert({"project_id": project.id, "title": "Due", "due_date": at})
    storage.calendar_events.insert({"project_id": project.id, "title": "Shoot", "type": "Photoshoot", "start_date": at})

    items = Timeline(storage).items_for_day(date(2025, 6, 2))

    assert [i.source for i in items] == ["event", "task", "project"]


def test_shoot_date_and_photoshoot_event_are_both_kept(storage, make_project):
    at = datetime(2025, 6, 3, 9, 0)
    project = make_project(shoot_date=at)
    storage.calendar_events.insert({"project_id": project.id, "title": "Shoot", "type": "Photoshoot", "start_date": at})

    items = Timeline(storage).items_for_day(date(2025, 6, 3))

    assert [i.type for i in items] == ["Photoshoot", "Photoshoot"]


def test_completed_tasks_still_appear(storage):
    storage.tasks.insert({
        "project_id": "p",
        "title": "Done already",
        "status": "Completed",
        "due_date": datetime(2025, 6, 4, 17, 0),
    })
    items = Timeline(storage).items_for_day(date(2025, 6, 4))
    assert [i.title for i in items] == ["Done already"]


def test_items_outside_the_day_are_excluded(storage):
    storage.tasks.insert({"project_id": "p", "title": "Before", "due_date": datetime(2025, 6, 4, 23, 59, 59)})
    storage.tasks.insert({"project_id": "p", "title": "After", "due_date": datetime(2025, 6, 6, 0, 0)})
    storage.tasks.insert({"project_id": "p", "title": "Midnight", "due_date": datetime(2025, 6, 5, 0, 0)})
    storage.tasks.insert({"project_id": "p", "title": "No date"})

    items = Timeline(storage).items_for_day(date(2025, 6, 5))

    assert [i.title for i in items] == ["Midnight"]


def test_event_items_carry_optional_fields(storage):
    storage.calendar_events.insert({
        "project_id": "p",
        "title": "Venue walkthrough",
        "type": "Meeting",
        "start_date": datetime(2025, 6, 7, 14, 0),
        "end_date": datetime(2025, 6, 7, 15, 0),
        "location": "Old Mill",
        "description": "Check light",
    })
    item = Timeline(storage).items_for_day(date(2025, 6, 7))[0]
    assert item.end_date == datetime(2025, 6, 7, 15, 0)
    assert item.location == "Old Mill"
    assert item.description == "Check light"


def test_week_window_runs_sunday_to_saturday(storage):
    storage.tasks.insert({"project_id": "p", "title": "Wed", "due_date": datetime(2025, 6, 4, 9, 0)})
    days = Timeline(storage).week_window(date(2025, 6, 4))
    assert [d.day for d in days] == [date(2025, 6, d) for d in range(1, 8)]
    assert days[0].day.weekday() == 6
    assert [i.title for i in days[3].items] == ["Wed"]
    assert all(not d.items for i, d in enumerate(days) if i != 3)


def test_month_window_matches_day_windows(storage):
    storage.tasks.insert({"project_id": "p", "title": "Edge", "due_date": datetime(2025, 6, 30, 10, 0)})
    storage.tasks.insert({"project_id": "p", "title": "Mid", "due_date": datetime(2025, 7, 15, 10, 0)})
    timeline = Timeline(storage)

    days = timeline.month_window(date(2025, 7, 15))

    for window in days:
        assert [i.id for i in window.items] == [i.id for i in timeline.items_for_day(window.day)]
    edge = next(d for d in days if d.day == date(2025, 6, 30))
    assert edge.in_month is False
    assert [i.title for i in edge.items] == ["Edge"]


@pytest.mark.parametrize("reference", [
    date(2025, 2, 1),
    date(2026, 2, 14),
    date(2025, 6, 30),
    date(2024, 12, 31),
    date(2015, 2, 1),
    date(2025, 8, 1),
])
def test_month_grid_is_whole_weeks_covering_the_month(storage, reference):
    days = Timeline(storage).month_window(reference)
    assert len(days) % 7 == 0
    dates = [d.day for d in days]
    assert reference.replace(day=1) in dates
    start, end = month_grid_bounds(reference)
    assert dates[0] == start and dates[-1] == end
    assert start.weekday() == 6
    assert end.weekday() == 5
    assert all(d.in_month == (d.day.month == reference.month) for d in days)


def test_february_2015_grid_is_exactly_four_weeks():
    start, end = month_grid_bounds(date(2015, 2, 10))
    assert start == date(2015, 2, 1)
    assert end == date(2015, 2, 28)


def test_week_helpers():
    assert start_of_week(date(2025, 6, 1)) == date(2025, 6, 1)
    assert start_of_week(date(2025, 6, 7)) == date(2025, 6, 1)
    assert end_of_week(date(2025, 6, 1)) == date(2025, 6, 7)


def test_navigate_steps_by_view():
    ref = date(2025, 6, 15)
    assert navigate(ref, "day", "next") == date(2025, 6, 16)
    assert navigate(ref, "day", "prev") == date(2025, 6, 14)
    assert navigate(ref, "week", "next") == date(2025, 6, 22)
    assert navigate(ref, "week", "prev") == date(2025, 6, 8)
    assert navigate(ref, "month", "next") == date(2025, 7, 15)
    assert navigate(ref, "month", "prev") == date(2025, 5, 15)


def test_navigate_today_resets():
    assert navigate(date(2020, 1, 1), "month", "today", today=date(2025, 6, 15)) == date(2025, 6, 15)


def test_month_steps_clamp_to_month_end():
    assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2025, 1, 15), -1) == date(2024, 12, 15)
    assert add_months(date(2025, 12, 31), 1) == date(2026, 1, 31)
