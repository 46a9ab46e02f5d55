from types import SimpleNamespace

from photoflow.budget import summarize


def _item(planned, actual):
    return SimpleNamespace(planned_cost=planned, actual_cost=actual)


def test_profit_loss_uses_actual_spend():
    summary = summarize(5000, [_item(1000, 1200), _item(500, 300)])
    assert summary.total_planned == 1500
    assert summary.total_actual == 1500
    assert summary.profit_loss == 3500
    assert summary.margin_percent == 70.0
    assert summary.margin_label == "70.0% margin"


def test_loss_gives_negative_margin():
    summary = summarize(1000, [_item(800, 1500)])
    assert summary.profit_loss == -500
    assert summary.margin_percent == -50.0


def test_zero_budget_has_no_margin():
    summary = summarize(0, [_item(100, 250)])
    assert summary.profit_loss == -250
    assert summary.margin_percent is None
    assert summary.margin_label == "No budget set"


def test_missing_budget_treated_as_zero():
    summary = summarize(None, [])
    assert summary.budget == 0
    assert summary.margin_percent is None


def test_no_items():
    summary = summarize(2000, [])
    assert summary.total_planned == 0
    assert summary.total_actual == 0
    assert summary.profit_loss == 2000
    assert summary.margin_percent == 100.0


def test_works_on_stored_items(storage, make_project):
    project = make_project(budget=5000)
    storage.budget_items.insert({"project_id": project.id, "description": "Studio", "planned_cost": 1000, "actual_cost": 1200})
    storage.budget_items.insert({"project_id": project.id, "description": "Assistant", "planned_cost": 500, "actual_cost": 300})
    summary = summarize(project.budget, storage.budget_items.list_by_project(project.id))
    assert (summary.total_planned, summary.total_actual, summary.profit_loss) == (1500, 1500, 3500)
