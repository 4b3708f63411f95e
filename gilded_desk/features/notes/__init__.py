"""Notes feature module"""

from gilded_desk.features.notes.domain import Note
from gilded_desk.features.notes.repository import NoteRepository
from gilded_desk.features.notes.service import NoteService

__all__ = [
    "Note",
    "NoteRepository",
    "NoteService",
]
