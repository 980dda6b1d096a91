"""UI-agnostic viewmodels for dashboard screens."""

from ad_app.viewmodels.list_state import ListStateMachine, ListStatus
from ad_app.viewmodels.list_view import ListViewController, ListViewSnapshot
from ad_app.viewmodels.task_overview import TaskOverviewSnapshot, TaskOverviewViewModel

__all__ = [
    "ListStateMachine",
    "ListStatus",
    "ListViewController",
    "ListViewSnapshot",
    "TaskOverviewSnapshot",
    "TaskOverviewViewModel",
]
