import threading
from typing import Dict, List, Optional

from tiyende.crud.activity import ActivityLog
from tiyende.schemas.base import utc_now
from tiyende.schemas.setting import Setting


class CRUDSetting:
    """
    Key/value settings addressed by name. Ids are still assigned per
    setting, starting at 1.
    """

    def __init__(self, activities: ActivityLog):
        self.activities = activities
        self._settings: Dict[str, Setting] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def get(self, name: str) -> Optional[Setting]:
        with self._lock:
            setting = self._settings.get(name)
            return setting.model_copy(deep=True) if setting is not None else None

    def get_all(self) -> List[Setting]:
        with self._lock:
            return [setting.model_copy(deep=True) for setting in self._settings.values()]

    def upsert(self, name: str, value: str, description: Optional[str] = None) -> Setting:
        """
        Create the setting if it is missing, otherwise replace its value.
        Always recorded as an activity.
        """
        with self._lock:
            existing = self._settings.get(name)
            if existing is not None:
                changes = {"value": value, "updated_at": utc_now()}
                if description is not None:
                    changes["description"] = description
                setting = existing.model_copy(update=changes)
            else:
                setting = Setting(
                    id=self._next_id,
                    name=name,
                    value=value,
                    description=description or "",
                    updated_at=utc_now(),
                )
                self._next_id += 1
            self._settings[name] = setting

        self.activities.record("Setting updated", {"setting": name})
        return setting.model_copy(deep=True)

    def count(self) -> int:
        with self._lock:
            return len(self._settings)
