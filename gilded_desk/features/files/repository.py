"""File metadata repository

A passive ledger: records are stored exactly as the client sent them.
File bytes never reach the server.
"""
from typing import Any, Dict

from gilded_desk.infra.repository import BaseRepository
from gilded_desk.infra.store import FlatRecordStore, Record


class FileRecordRepository(BaseRepository[Dict[str, Any]]):
    """Repository for uploaded-file metadata"""

    def __init__(self, store: FlatRecordStore):
        super().__init__(store, "files", None)

    def _to_model(self, data: Record) -> Dict[str, Any]:
        return data

    def _to_record(self, model: Dict[str, Any]) -> Record:
        return model
