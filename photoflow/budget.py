from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class BudgetSummary:
    budget: int
    total_planned: int
    total_actual: int
    profit_loss: int
    margin_percent: Optional[float]

    @property
    def margin_label(self) -> str:
        if self.margin_percent is None:
            return "No budget set"
        return f"{self.margin_percent:.1f}% margin"


def summarize(project_budget: Optional[int], items: Iterable) -> BudgetSummary:
    """Totals for a project's budget items.

    Profit/loss is measured against the project's budget ceiling and the money
    actually spent, not the planned costs. The margin is left as None when no
    budget is set.
    """
    budget = project_budget or 0
    total_planned = 0
    total_actual = 0
    for item in items:
        total_planned += item.planned_cost or 0
        total_actual += item.actual_cost or 0
    profit_loss = budget - total_actual
    margin = profit_loss * 100 / budget if budget else None
    return BudgetSummary(
        budget=budget,
        total_planned=total_planned,
        total_actual=total_actual,
        profit_loss=profit_loss,
        margin_percent=margin,
    )
