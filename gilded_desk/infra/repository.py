"""Base repository with common collection operations"""
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from gilded_desk.infra.store import FlatRecordStore, Record
from gilded_desk.utils.datetime_helper import now_ms

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Base repository providing common collection operations.
    Hides the flat-file store from the rest of the application: every
    mutation loads the whole slot, changes it in memory and writes it back.
    """

    def __init__(self, store: FlatRecordStore, slot: str, model_class: Optional[Type[BaseModel]]):
        self._store = store
        self._slot = slot
        self._model_class = model_class

    def _to_model(self, data: Record) -> T:
        """Convert a stored record to a domain model"""
        return self._model_class.model_validate(data)

    def _to_models(self, data: List[Record]) -> List[T]:
        """Convert a list of stored records to domain models"""
        return [self._to_model(item) for item in data]

    def _to_record(self, model: T) -> Record:
        """Convert a domain model to its stored JSON form"""
        return model.model_dump(by_alias=True, mode='json')

    def load_records(self) -> List[Record]:
        return self._store.load(self._slot)

    def save_records(self, records: List[Record]) -> None:
        self._store.save(self._slot, records)

    def find_all(self) -> List[T]:
        """All records in insertion order"""
        return self._to_models(self.load_records())

    def find_by_filters(self, filters: Dict[str, Any]) -> List[T]:
        """Records whose stored fields equal every filter value"""
        return self._to_models([
            record for record in self.load_records()
            if all(record.get(key) == value for key, value in filters.items())
        ])

    def find_by_id(self, id: Any) -> Optional[T]:
        """Find a single record by ID"""
        for record in self.load_records():
            if record.get("id") == id:
                return self._to_model(record)
        return None

    def append(self, model: T) -> T:
        """Append a record and persist the collection"""
        records = self.load_records()
        records.append(self._to_record(model))
        self.save_records(records)
        return model

    def delete(self, id: Any) -> bool:
        """
        Remove every record with the given ID

        The collection is written back even when nothing matched. A None id
        matches no record.

        Returns:
            True if at least one record was removed
        """
        records = self.load_records()
        if id is None:
            remaining = records
        else:
            remaining = [record for record in records if record.get("id") != id]
        self.save_records(remaining)
        return len(remaining) != len(records)

    def next_id(self, records: Optional[List[Record]] = None) -> int:
        """
        Time-derived id that is unique within the collection

        Uses the current epoch milliseconds, bumped past the largest numeric
        id already stored so two creations in the same millisecond differ.
        """
        if records is None:
            records = self.load_records()

        ids = [
            record.get("id") for record in records
            if isinstance(record.get("id"), int) and not isinstance(record.get("id"), bool)
        ]
        candidate = now_ms()
        if ids and max(ids) >= candidate:
            candidate = max(ids) + 1
        return candidate
