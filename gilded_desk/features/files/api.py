"""File cabinet API endpoints"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException

from gilded_desk.dependencies import get_file_repository
from gilded_desk.features.files.repository import FileRecordRepository
from gilded_desk.utils.id_helper import parse_record_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/files", tags=["files"])


@router.get("", response_model=List[Dict[str, Any]])
async def list_files(repo: FileRecordRepository = Depends(get_file_repository)):
    """List file records in the order they were added"""
    try:
        return repo.find_all()
    except Exception as e:
        logger.error(f"Failed to fetch files: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch files")


@router.post("", response_model=Dict[str, Any], status_code=201)
async def create_file(
    record: Dict[str, Any] = Body(...),
    repo: FileRecordRepository = Depends(get_file_repository)
):
    """Store file metadata as-is"""
    try:
        return repo.append(record)
    except Exception as e:
        logger.error(f"Failed to save file info: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to save file info")


@router.delete("/{file_id}")
async def delete_file(file_id: str, repo: FileRecordRepository = Depends(get_file_repository)):
    """Delete a file record. Succeeds whether or not the record existed."""
    try:
        repo.delete(parse_record_id(file_id))
        return {"success": True}
    except Exception as e:
        logger.error(f"Failed to delete file {file_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete file")
