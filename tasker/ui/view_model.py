"""
view_model.py - Pure projection of tasks into what the list view shows
Single responsibility: derive visible rows, remaining count and selected filter.
"""
from dataclasses import dataclass, field

from tasker.domain.filters import DEFAULT_FILTER
from tasker.domain.models import Task
from tasker.services.filter_service import apply_filter


@dataclass
class ListViewModel:
    rows: list[Task] = field(default_factory=list)
    remaining: int = 0
    active_filter: str = DEFAULT_FILTER


def remaining_count(tasks: list[Task]) -> int:
    return sum(1 for t in tasks if not t.completed)


def build_view_model(tasks: list[Task], filter_value: str) -> ListViewModel:
    # remaining counts the full collection, not the filtered rows
    return ListViewModel(
        rows=apply_filter(tasks, filter_value),
        remaining=remaining_count(tasks),
        active_filter=filter_value,
    )
