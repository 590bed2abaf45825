import threading
from typing import Any, Dict, List, Optional

from tiyende.schemas.activity import Activity, ActivityCreate
from tiyende.schemas.base import utc_now
from tiyende.core.logging_config import get_logger

logger = get_logger(__name__)


class ActivityLog:
    """
    Append-only audit trail kept in insertion order.
    """

    def __init__(self):
        self._activities: List[Activity] = []
        self._next_id = 1
        self._lock = threading.RLock()

    def record(
        self,
        action: str,
        details: Optional[Dict[str, Any]] = None,
        user_id: Optional[int] = None,
    ) -> Activity:
        """
        Append a new activity stamped with the current time
        """
        with self._lock:
            activity = Activity(
                id=self._next_id,
                user_id=user_id,
                action=action,
                details=dict(details or {}),
                timestamp=utc_now(),
            )
            self._activities.append(activity)
            self._next_id += 1
        logger.debug(f"Activity #{activity.id} recorded: {action} {activity.details}")
        return activity.model_copy(deep=True)

    def create(self, *, obj_in: ActivityCreate) -> Activity:
        return self.record(obj_in.action, obj_in.details, user_id=obj_in.user_id)

    def get(self, id: int) -> Optional[Activity]:
        with self._lock:
            for activity in self._activities:
                if activity.id == id:
                    return activity.model_copy(deep=True)
        return None

    def recent(self, limit: int = 20) -> List[Activity]:
        """
        Newest first. Equal timestamps come out in reverse insertion order.
        """
        if limit <= 0:
            return []
        with self._lock:
            snapshot = list(reversed(self._activities))
        ordered = sorted(snapshot, key=lambda a: a.timestamp, reverse=True)
        return [activity.model_copy(deep=True) for activity in ordered[:limit]]

    def count(self) -> int:
        with self._lock:
            return len(self._activities)
