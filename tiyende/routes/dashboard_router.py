from fastapi import APIRouter, Depends, status

from tiyende.auth.token_validation import get_current_user
from tiyende.schemas.user import User
from tiyende.storage import MemStorage, get_storage
from tiyende.utils.response_utils import ResponseWrapper

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/", status_code=status.HTTP_200_OK)
def get_dashboard(
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    """Booking counts, paid revenue, active vendors/routes and recent items"""
    return ResponseWrapper.success(
        data=storage.dashboard.snapshot(),
        message="Dashboard stats fetched successfully",
    )
