"""Notes API endpoints"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from gilded_desk.dependencies import get_note_service
from gilded_desk.exceptions import AppError
from gilded_desk.features.notes.domain import Note
from gilded_desk.features.notes.schemas import CreateNoteRequest
from gilded_desk.features.notes.service import NoteService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notes", tags=["notes"])


@router.get("", response_model=List[Note])
async def list_notes(service: NoteService = Depends(get_note_service)):
    """List all notes, newest first"""
    try:
        return service.list_notes()
    except Exception as e:
        logger.error(f"Failed to fetch notes: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch notes")


@router.post("", response_model=Note, status_code=201)
async def create_note(
    request: CreateNoteRequest,
    service: NoteService = Depends(get_note_service)
):
    """Create a note. Title and content are required."""
    try:
        return service.create_note(request.title, request.content)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Failed to create note: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create note")
