"""
Board projection: store contents → three columns with counts.

render() has no side effects; templates and text output consume its result.
"""
from dataclasses import dataclass, field
from typing import Iterable, List, Dict, Any

from .schema import Task, TaskStatus, STATUS_ORDER


@dataclass
class Column:
    status: TaskStatus
    tasks: List[Task] = field(default_factory=list)

    @property
    def label(self) -> str:
        return self.status.label

    @property
    def count(self) -> int:
        return len(self.tasks)

    @property
    def header(self) -> str:
        return f"{self.label} ({self.count})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "label": self.label,
            "count": self.count,
            "tasks": [t.to_dict() for t in self.tasks],
        }


@dataclass
class BoardView:
    columns: List[Column]

    @property
    def total(self) -> int:
        return sum(c.count for c in self.columns)

    def column(self, status: TaskStatus) -> Column:
        for col in self.columns:
            if col.status == status:
                return col
        raise KeyError(status)

    def counts(self) -> Dict[str, int]:
        return {c.status.value: c.count for c in self.columns}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "columns": [c.to_dict() for c in self.columns],
            "total": self.total,
        }


def render(tasks: Iterable[Task]) -> BoardView:
    """Split tasks into the todo/doing/done columns, keeping store order."""
    columns = {status: Column(status) for status in STATUS_ORDER}
    for task in tasks:
        columns[task.status].tasks.append(task)
    return BoardView(columns=[columns[s] for s in STATUS_ORDER])


def format_board(view: BoardView) -> str:
    """Plain-text board: one header per column, then its tasks."""
    lines = []
    for col in view.columns:
        lines.append(col.header)
        if not col.tasks:
            lines.append("  (empty)")
        for task in col.tasks:
            lines.append(f"  #{task.id} {task.title or '<untitled>'}")
    return "\n".join(lines)
