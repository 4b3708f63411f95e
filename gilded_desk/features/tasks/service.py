"""Business logic for Tasks"""
import logging
from typing import List, Optional

from gilded_desk.exceptions import NotFoundError, ValidationError
from gilded_desk.features.tasks.domain import Task, TaskUpdate
from gilded_desk.features.tasks.repository import TaskRepository
from gilded_desk.utils.datetime_helper import now_iso

logger = logging.getLogger(__name__)


class TaskService:
    """Service layer for the to-do list"""

    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def list_tasks(self) -> List[Task]:
        return self.repository.find_newest_first()

    def create_task(
        self,
        text: Optional[str],
        id: Optional[int] = None,
        completed: Optional[bool] = None,
        created_at: Optional[str] = None,
    ) -> Task:
        """
        Create a task, honouring client-supplied id/completed/createdAt.

        Client values are trusted as given so tasks created offline keep
        their identity when replayed. Falsy values fall back to defaults.

        Raises:
            ValidationError: If text is blank after trimming
        """
        if not text or not text.strip():
            raise ValidationError("Task text is required")

        task = Task(
            id=id or self.repository.next_id(),
            text=text.strip(),
            completed=completed or False,
            created_at=created_at or now_iso(),
        )
        self.repository.upsert(task)

        logger.info(f"Created task {task.id}")
        return task

    def update_task(self, id: int, text: Optional[str], completed: Optional[bool]) -> Task:
        """
        Replace a task's text and completion flag.

        Fields left as None keep their stored value.

        Raises:
            NotFoundError: If no task has this id
            ValidationError: If text is given but blank
        """
        if self.repository.find_by_id(id) is None:
            raise NotFoundError("Task not found")

        patch = {}
        if text is not None:
            if not text.strip():
                raise ValidationError("Task text is required")
            patch["text"] = text.strip()
        if completed is not None:
            patch["completed"] = completed

        task = self.repository.update(id, TaskUpdate(**patch))
        if task is None:
            raise NotFoundError("Task not found")
        return task

    def remove_task(self, id: Optional[int]) -> None:
        """Delete a task. Unknown ids are a no-op."""
        removed = self.repository.delete(id)
        if not removed:
            logger.info(f"Task {id} not found on delete, nothing removed")
