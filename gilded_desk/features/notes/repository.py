"""Notes repository"""
from typing import List

from gilded_desk.features.notes.domain import Note
from gilded_desk.infra.repository import BaseRepository
from gilded_desk.infra.store import FlatRecordStore
from gilded_desk.utils.datetime_helper import newest_first


class NoteRepository(BaseRepository[Note]):
    """Repository for notes operations"""

    def __init__(self, store: FlatRecordStore):
        super().__init__(store, "notes", Note)

    def find_newest_first(self) -> List[Note]:
        """All notes sorted by createdAt descending, ties in insertion order"""
        return self._to_models(newest_first(self.load_records()))
