"""Tasks feature module"""

from gilded_desk.features.tasks.domain import Task, TaskUpdate
from gilded_desk.features.tasks.repository import TaskRepository
from gilded_desk.features.tasks.service import TaskService

__all__ = [
    "Task",
    "TaskUpdate",
    "TaskRepository",
    "TaskService",
]
