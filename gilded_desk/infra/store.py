"""Flat JSON record store

Each slot is one JSON file holding the full collection as an ordered list.
Reads and writes always cover the whole file; there is no locking, so the
store assumes a single writer (requests are serialised by the event loop).
"""
import json
import logging
import os
from typing import Any, Dict, List

from gilded_desk.exceptions import StorageReadError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class FlatRecordStore:
    """Load/save ordered lists of JSON records from named slots"""

    def __init__(self, data_dir: str):
        self._data_dir = data_dir

    @property
    def data_dir(self) -> str:
        return self._data_dir

    def slot_path(self, slot: str) -> str:
        """Absolute path of the file backing a slot"""
        return os.path.join(self._data_dir, f"{slot}.json")

    def load(self, slot: str) -> List[Record]:
        """
        Load the full collection stored in a slot

        A missing slot is initialised with an empty list on first read.
        Corrupt or unreadable content is logged and treated as empty.

        Args:
            slot: Slot name (e.g. "notes")

        Returns:
            The stored records in insertion order
        """
        path = self.slot_path(slot)

        if not os.path.exists(path):
            logger.info(f"Slot '{slot}' not found, initialising empty collection at {path}")
            self.save(slot, [])
            return []

        try:
            return self._read(slot, path)
        except StorageReadError as e:
            logger.error(f"{e} - substituting empty collection")
            return []

    def save(self, slot: str, records: List[Record]) -> None:
        """Overwrite a slot with the given records"""
        os.makedirs(self._data_dir, exist_ok=True)
        with open(self.slot_path(slot), "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2, ensure_ascii=False)

    def _read(self, slot: str, path: str) -> List[Record]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageReadError(slot, str(e)) from e

        if not isinstance(data, list):
            raise StorageReadError(slot, f"expected a JSON array, got {type(data).__name__}")

        return data
