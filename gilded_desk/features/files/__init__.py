"""File cabinet feature module"""

from gilded_desk.features.files.repository import FileRecordRepository

__all__ = ["FileRecordRepository"]
