from fastapi import APIRouter, Depends, Query, status

from tiyende.auth.token_validation import get_current_user
from tiyende.schemas.activity import ActivityCreate
from tiyende.schemas.user import User
from tiyende.storage import MemStorage, get_storage
from tiyende.utils.response_utils import ResponseWrapper
from tiyende.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/activities", tags=["activities"])


@router.get("/", status_code=status.HTTP_200_OK)
def list_activities(
    limit: int = Query(20, ge=1, le=1000, description="Maximum number of entries"),
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    """Newest activities first"""
    return ResponseWrapper.listed(storage.activities.recent(limit), message="Activities fetched successfully")


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_activity(
    activity_in: ActivityCreate,
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    # Attribute to the caller unless a user is named explicitly
    if activity_in.user_id is None:
        activity_in = activity_in.model_copy(update={"user_id": current_user.id})

    activity = storage.activities.create(obj_in=activity_in)
    logger.info(f"Activity recorded by user={current_user.username}: {activity.action}")
    return ResponseWrapper.created(data=activity, message="Activity recorded successfully")
