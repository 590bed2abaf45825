"""
Exceptions raised by the in-memory store
"""
from typing import Any


class StorageError(Exception):
    """Base class for store failures"""


class DuplicateKeyError(StorageError):
    """A create or update would give two live records the same unique value"""

    def __init__(self, entity: str, field: str, value: Any):
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"{entity} with {field}={value!r} already exists")
