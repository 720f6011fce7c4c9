"""
Task schema for the board.

Three statuses, one column each:
  todo → doing → done

Any status may move to any other; the board does not enforce an order.
"""
from enum import Enum
from dataclasses import dataclass
from typing import Dict, Any


class TaskStatus(Enum):
    """Board columns, in display order."""
    TODO = "todo"
    DOING = "doing"
    DONE = "done"

    @property
    def label(self) -> str:
        return self.value.upper()

    @classmethod
    def from_str(cls, value: str) -> "TaskStatus":
        """Parse a status name. Case and surrounding whitespace are ignored."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValueError(f"Invalid status: {value!r}. Allowed: {allowed}") from None


STATUS_ORDER = (TaskStatus.TODO, TaskStatus.DOING, TaskStatus.DONE)


@dataclass
class Task:
    """A single card on the board."""

    id: int
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """Deserialize from dict. Raises ValueError on a bad id or status."""
        try:
            task_id = int(data["id"])
        except (KeyError, TypeError, ValueError):
            raise ValueError(f"Task id missing or not an integer: {data.get('id')!r}") from None
        status = data.get("status")
        if status is None:
            raise ValueError(f"Task {task_id} has no status")
        return cls(
            id=task_id,
            title=str(data.get("title", "")),
            description=str(data.get("description", "")),
            status=status if isinstance(status, TaskStatus) else TaskStatus.from_str(status),
        )
