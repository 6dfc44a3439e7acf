import logging
import threading
from typing import Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=BaseModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)

class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    In-memory keyed store with create, read, update and delete.

    Records are kept in a dict keyed by an integer primary key taken from a
    monotonic counter that starts at 1 and is never rewound, so keys of
    deleted records are not handed out again. A single re-entrant lock guards
    both the dict and the counter; every operation holds it for its whole
    duration.

    Args:
        model: Pydantic model class of a stored record
        key_field: Name of the primary key attribute on ``model``
    """

    def __init__(self, model: Type[ModelType], *, key_field: str = "id"):
        self.model = model
        self.key_field = key_field
        self._records: Dict[int, ModelType] = {}
        self._next_key = 1
        self._lock = threading.RLock()

    def get(self, key: int) -> Optional[ModelType]:
        with self._lock:
            return self._records.get(key)

    def get_multi(self) -> List[ModelType]:
        """Return every record, highest key first."""
        with self._lock:
            return sorted(
                self._records.values(),
                key=lambda obj: getattr(obj, self.key_field),
                reverse=True,
            )

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def create(self, *, obj_in: CreateSchemaType) -> ModelType:
        with self._lock:
            key = self._next_key
            self._next_key += 1
            obj_data = obj_in.model_dump()
            obj_data[self.key_field] = key
            db_obj = self.model(**obj_data)
            self._records[key] = db_obj
        logger.info("Created %s %s=%s", self.model.__name__, self.key_field, key)
        return db_obj

    def update(self, key: int, *, obj_in: UpdateSchemaType) -> Optional[ModelType]:
        """
        Merge the fields present in ``obj_in`` onto the stored record.

        Returns None when no record has ``key``. The primary key is never
        overwritten.
        """
        update_data = obj_in.model_dump(exclude_unset=True)
        update_data.pop(self.key_field, None)
        with self._lock:
            db_obj = self._records.get(key)
            if db_obj is None:
                return None
            db_obj = db_obj.model_copy(update=update_data)
            self._records[key] = db_obj
        logger.info(
            "Updated %s %s=%s fields=%s",
            self.model.__name__, self.key_field, key, sorted(update_data),
        )
        return db_obj

    def remove(self, key: int) -> bool:
        with self._lock:
            removed = self._records.pop(key, None) is not None
        if removed:
            logger.info("Removed %s %s=%s", self.model.__name__, self.key_field, key)
        return removed
