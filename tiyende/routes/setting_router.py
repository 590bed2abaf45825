from fastapi import APIRouter, Depends, HTTPException, status

from tiyende.auth.permission_checker import require_admin
from tiyende.auth.token_validation import get_current_user
from tiyende.schemas.setting import SettingValue
from tiyende.schemas.user import User
from tiyende.storage import MemStorage, get_storage
from tiyende.utils.response_utils import ResponseWrapper, not_found
from tiyende.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/", status_code=status.HTTP_200_OK)
def list_settings(
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    return ResponseWrapper.listed(storage.settings.get_all(), message="Settings fetched successfully")


@router.get("/{name}", status_code=status.HTTP_200_OK)
def get_setting(
    name: str,
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    setting = storage.settings.get(name)
    if not setting:
        raise not_found("Setting", name)
    return ResponseWrapper.success(data=setting, message="Setting fetched successfully")


@router.post("/{name}", status_code=status.HTTP_200_OK)
def upsert_setting(
    name: str,
    body: SettingValue,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
):
    """
    Create or replace a setting value. Admin only.
    """
    if not body.value.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ResponseWrapper.error(
                message="Value is required",
                error_code="VALUE_REQUIRED",
            ),
        )

    setting = storage.settings.upsert(name, body.value, description=body.description)
    logger.info(f"Setting '{name}' set by admin={admin.username}")
    return ResponseWrapper.success(data=setting, message="Setting saved successfully")
