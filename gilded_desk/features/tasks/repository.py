"""Tasks repository"""
import logging
from typing import List, Optional

from gilded_desk.features.tasks.domain import Task, TaskUpdate
from gilded_desk.infra.repository import BaseRepository
from gilded_desk.infra.store import FlatRecordStore
from gilded_desk.utils.datetime_helper import newest_first

logger = logging.getLogger(__name__)


class TaskRepository(BaseRepository[Task]):
    """Repository for task operations"""

    def __init__(self, store: FlatRecordStore):
        super().__init__(store, "tasks", Task)

    def find_newest_first(self) -> List[Task]:
        """All tasks sorted by createdAt descending, ties in insertion order"""
        return self._to_models(newest_first(self.load_records()))

    def upsert(self, task: Task) -> Task:
        """
        Store a task, replacing any stored task with the same id.

        Last write wins: a client re-sending a task it created offline
        overwrites the earlier copy instead of duplicating the id.
        """
        records = self.load_records()
        record = self._to_record(task)

        for index, existing in enumerate(records):
            if existing.get("id") == task.id:
                logger.info(f"Task {task.id} already stored, replacing (last write wins)")
                records[index] = record
                break
        else:
            records.append(record)

        self.save_records(records)
        return task

    def update(self, id: int, data: TaskUpdate) -> Optional[Task]:
        """
        Merge explicitly set fields into a stored task.

        Returns:
            The updated task, or None (collection left untouched) if no task matches
        """
        records = self.load_records()

        for index, existing in enumerate(records):
            if existing.get("id") == id:
                updated = {**existing, **data.model_dump(exclude_unset=True)}
                records[index] = updated
                self.save_records(records)
                return self._to_model(updated)

        return None
