import threading
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar, Union
from pydantic import BaseModel

from tiyende.core.exceptions import DuplicateKeyError
from tiyende.schemas.base import utc_now

ModelType = TypeVar("ModelType", bound=BaseModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class InMemoryCRUD(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Base class for CRUD operations over a process-local map keyed by integer id.

    Ids start at 1 and are never reused, even after a delete. Records are
    copied on the way in and out so callers never hold a reference to stored
    state. Every operation holds the container lock.
    """
    # Fields that must be unique among live records
    unique_fields: Tuple[str, ...] = ()
    # Fields stamped with the current time at creation
    timestamp_fields: Tuple[str, ...] = ()

    def __init__(self, model: Type[ModelType]):
        """
        Initialize with the stored model class
        """
        self.model = model
        self._records: Dict[int, ModelType] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def _check_unique(self, data: Dict[str, Any], exclude_id: Optional[int] = None) -> None:
        for field in self.unique_fields:
            value = data.get(field)
            if value is None:
                continue
            for record_id, record in self._records.items():
                if record_id != exclude_id and getattr(record, field) == value:
                    raise DuplicateKeyError(self.entity_name, field, value)

    def _find_first(self, field: str, value: Any) -> Optional[ModelType]:
        with self._lock:
            for record in self._records.values():
                if getattr(record, field) == value:
                    return record.model_copy(deep=True)
        return None

    def get(self, id: int) -> Optional[ModelType]:
        """
        Get an object by ID
        """
        with self._lock:
            record = self._records.get(id)
            return record.model_copy(deep=True) if record is not None else None

    def get_all(self) -> List[ModelType]:
        """
        Get every live object, in storage order
        """
        with self._lock:
            return [record.model_copy(deep=True) for record in self._records.values()]

    def get_multi(self, *, filters: Optional[Dict[str, Any]] = None) -> List[ModelType]:
        """
        Get multiple objects with optional equality filters
        """
        with self._lock:
            records = list(self._records.values())

        if filters:
            for attr, value in filters.items():
                if attr not in self.model.model_fields:
                    raise ValueError(f"{self.entity_name} has no field {attr!r} to filter on")
                records = [r for r in records if getattr(r, attr) == value]

        return [record.model_copy(deep=True) for record in records]

    def create(self, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
        """
        Create a new object
        """
        obj_in_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        with self._lock:
            self._check_unique(obj_in_data)
            now = utc_now()
            stamps = {field: now for field in self.timestamp_fields}
            db_obj = self.model(**{**obj_in_data, **stamps, "id": self._next_id})
            self._records[db_obj.id] = db_obj
            self._next_id += 1
            return db_obj.model_copy(deep=True)

    def update(self, id: int, *, obj_in: Union[UpdateSchemaType, Dict[str, Any]]) -> Optional[ModelType]:
        """
        Merge the supplied fields onto an existing object
        """
        # If obj_in is a dict, use it directly; otherwise only explicitly set fields
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        # None only clears fields that default to None; elsewhere it means "leave as is"
        fields = self.model.model_fields
        update_data = {
            field: value for field, value in update_data.items()
            if field in fields and field != "id"
            and (value is not None or (not fields[field].is_required() and fields[field].default is None))
        }

        with self._lock:
            db_obj = self._records.get(id)
            if db_obj is None:
                return None
            self._check_unique(update_data, exclude_id=id)
            merged = self.model.model_validate({**db_obj.model_dump(), **update_data})
            self._records[id] = merged
            return merged.model_copy(deep=True)

    def remove(self, id: int) -> bool:
        """
        Remove an object, reporting whether it existed
        """
        with self._lock:
            return self._records.pop(id, None) is not None

    def count(self, *, filters: Optional[Dict[str, Any]] = None) -> int:
        """
        Count objects with optional filters
        """
        if not filters:
            with self._lock:
                return len(self._records)
        return len(self.get_multi(filters=filters))
