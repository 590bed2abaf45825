from typing import Any, Dict, Optional, Union

from tiyende.auth.utils import hash_password
from tiyende.crud.base import InMemoryCRUD
from tiyende.schemas.base import utc_now
from tiyende.schemas.user import User, UserCreate, UserUpdate


class CRUDUser(InMemoryCRUD[User, UserCreate, UserUpdate]):
    unique_fields = ("username",)

    def __init__(self):
        super().__init__(User)

    def get_by_username(self, username: str) -> Optional[User]:
        """Get user by unique username"""
        return self._find_first("username", username)

    def create(self, *, obj_in: Union[UserCreate, Dict[str, Any]]) -> User:
        """Create a user, storing only the password hash. Not recorded as an activity."""
        data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        data = {**data, "password": hash_password(data["password"]), "last_login": None, "token": None}
        return super().create(obj_in=data)

    def update(self, id: int, *, obj_in: Union[UserUpdate, Dict[str, Any]]) -> Optional[User]:
        update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        update_data = {k: v for k, v in update_data.items() if k not in ("token", "last_login")}
        if update_data.get("password") is not None:
            update_data["password"] = hash_password(update_data["password"])
        return super().update(id, obj_in=update_data)

    def set_token(self, id: int, token: Optional[str]) -> bool:
        """
        Store (or clear) the user's session token and stamp last_login
        """
        with self._lock:
            user = self._records.get(id)
            if user is None:
                return False
            self._records[id] = user.model_copy(update={"token": token, "last_login": utc_now()})
            return True
