"""
Task form: the add/edit modal.

A blank form creates a task; a form opened on an existing task edits or
deletes it. The same parser handles HTML form posts and JSON bodies.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .schema import Task, TaskStatus
from .store import TaskStore

TITLE_PLACEHOLDER = "e.g. Take chilled break"
DESCRIPTION_PLACEHOLDER = "e.g. Pet a dog, have a coffee, dance to a song"


class FormError(ValueError):
    """Raised when submitted form fields fail validation."""
    pass


@dataclass
class TaskForm:
    title: str = ""
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    task_id: Optional[int] = None
    error: str = ""

    @classmethod
    def blank(cls) -> "TaskForm":
        return cls()

    @classmethod
    def for_task(cls, task: Task) -> "TaskForm":
        return cls(
            title=task.title,
            description=task.description,
            status=task.status,
            task_id=task.id,
        )

    @classmethod
    def from_data(cls, data: Mapping[str, Any], task_id: Optional[int] = None) -> "TaskForm":
        """
        Parse submitted fields.

        Missing title/description become empty strings; a missing status
        means todo. Raises FormError for an unknown status.
        """
        if not isinstance(data, Mapping):
            raise FormError(f"Task fields must be an object, got {type(data).__name__}")
        raw_status = data.get("status")
        if raw_status is None or raw_status == "":
            status = TaskStatus.TODO
        else:
            try:
                status = TaskStatus.from_str(raw_status)
            except ValueError as e:
                raise FormError(str(e)) from None
        title = data.get("title")
        description = data.get("description")
        return cls(
            title="" if title is None else str(title).strip(),
            description="" if description is None else str(description),
            status=status,
            task_id=task_id,
        )

    @property
    def is_edit(self) -> bool:
        return self.task_id is not None

    @property
    def heading(self) -> str:
        return "Edit Task" if self.is_edit else "Add New Task"

    @property
    def submit_label(self) -> str:
        return "Save Changes" if self.is_edit else "Create Task"

    @property
    def action(self) -> str:
        return f"/tasks/{self.task_id}" if self.is_edit else "/tasks"

    def submit(self, store: TaskStore) -> Task:
        """Create (add mode) or update (edit mode) the task in ``store``."""
        if self.is_edit:
            return store.update(self.task_id, self.title, self.description, self.status)
        return store.create(self.title, self.description, self.status)

    def delete(self, store: TaskStore) -> None:
        if not self.is_edit:
            raise FormError("Only an existing task can be deleted")
        store.delete(self.task_id)
