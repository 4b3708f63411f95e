"""Business logic for Notes"""
import logging
from typing import List, Optional

from gilded_desk.exceptions import ValidationError
from gilded_desk.features.notes.domain import Note
from gilded_desk.features.notes.repository import NoteRepository
from gilded_desk.utils.datetime_helper import now_iso

logger = logging.getLogger(__name__)


class NoteService:
    """Service layer for notes. Notes are immutable once created."""

    def __init__(self, repository: NoteRepository):
        self.repository = repository

    def list_notes(self) -> List[Note]:
        return self.repository.find_newest_first()

    def create_note(self, title: Optional[str], content: Optional[str]) -> Note:
        """
        Create and persist a note.

        Raises:
            ValidationError: If title or content is blank after trimming
        """
        if not title or not title.strip():
            raise ValidationError("Title is required")
        if not content or not content.strip():
            raise ValidationError("Content is required")

        records = self.repository.load_records()
        note = Note(
            id=self.repository.next_id(records),
            title=title.strip(),
            content=content.strip(),
            created_at=now_iso(),
        )
        self.repository.append(note)

        logger.info(f"Created note {note.id}")
        return note
