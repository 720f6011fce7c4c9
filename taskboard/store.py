"""
In-memory task store.

Holds the board's tasks in insertion order and provides CRUD operations.
State lives only as long as the owning process.
"""
import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from .schema import Task, TaskStatus, STATUS_ORDER

logger = logging.getLogger(__name__)


class TaskNotFound(LookupError):
    """Raised when an operation references an id the store does not hold."""

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


# Demo board shown on first start
SEED_TASKS = (
    (1, "Launch Epic Career 🚀", "Create a killer Resume", TaskStatus.TODO),
    (2, "Conquer React ⚛️", "Become proficient in React.js and its ecosystem.", TaskStatus.TODO),
    (3, "Understand Databases ⚙️",
     "Learn about relational and non-relational databases, and how to query them.", TaskStatus.TODO),
    (4, "Crush Frameworks 🖼️",
     "Master popular web frameworks like Next.js, Angular, or Vue.", TaskStatus.TODO),
    (5, "Master JavaScript 💛",
     "Get comfortable with the fundamentals of JavaScript, including ES6+ features.", TaskStatus.DOING),
    (6, "Never Give Up 🏆",
     "Stay persistent and motivated throughout your coding journey.", TaskStatus.DOING),
    (7, "Explore ES6 Features 🚀",
     "Dive deep into modern JavaScript features like arrow functions, destructuring, and async/await.",
     TaskStatus.DONE),
    (8, "Have fun 🥳",
     "Remember to enjoy the process of learning and building amazing things!", TaskStatus.DONE),
)


def seed_tasks() -> List[Task]:
    """Fresh copies of the demo tasks."""
    return [Task(id=i, title=t, description=d, status=s) for i, t, d, s in SEED_TASKS]


def _coerce_status(status) -> TaskStatus:
    """Accept a TaskStatus or its name; raise ValueError for anything else."""
    if isinstance(status, TaskStatus):
        return status
    if isinstance(status, str):
        return TaskStatus.from_str(status)
    raise ValueError(f"Invalid status: {status!r}")


class TaskStore:
    """Authoritative, ordered collection of tasks."""

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        """Initialize with copies of ``tasks``; the caller's records are never mutated."""
        self._tasks: List[Task] = []
        for task in tasks or ():
            if any(t.id == task.id for t in self._tasks):
                raise ValueError(f"Duplicate task id: {task.id}")
            self._tasks.append(replace(task, status=_coerce_status(task.status)))

    def __len__(self) -> int:
        return len(self._tasks)

    def list(self) -> List[Task]:
        """Current tasks in insertion order."""
        return list(self._tasks)

    def get(self, task_id: int) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise TaskNotFound(task_id)

    def next_task_id(self) -> int:
        """Max existing id + 1, or 1 for an empty store."""
        if not self._tasks:
            return 1
        return max(t.id for t in self._tasks) + 1

    def create(
        self,
        title: str,
        description: str = "",
        status: TaskStatus = TaskStatus.TODO,
    ) -> Task:
        """Append a new task with the next id and return it."""
        status = _coerce_status(status)
        task = Task(id=self.next_task_id(), title=title, description=description, status=status)
        self._tasks.append(task)
        logger.info(f"Created task {task.id} in {task.status.value}: {task.title!r}")
        return task

    def update(
        self,
        task_id: int,
        title: str,
        description: str,
        status: TaskStatus,
    ) -> Task:
        """Replace title, description and status of an existing task."""
        status = _coerce_status(status)
        task = self.get(task_id)
        task.title = title
        task.description = description
        task.status = status
        logger.info(f"Updated task {task_id} ({status.value}): {title!r}")
        return task

    def delete(self, task_id: int) -> None:
        task = self.get(task_id)
        self._tasks.remove(task)
        logger.info(f"Deleted task {task_id}")

    def counts(self) -> Dict[TaskStatus, int]:
        """Number of tasks per status, every status present."""
        counts = {status: 0 for status in STATUS_ORDER}
        for task in self._tasks:
            counts[task.status] += 1
        return counts
