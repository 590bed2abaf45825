from fastapi import APIRouter, Depends, HTTPException, Response, status

from tiyende.auth.permission_checker import require_admin
from tiyende.core.exceptions import DuplicateKeyError
from tiyende.schemas.user import User, UserCreate, UserResponse, UserUpdate
from tiyende.storage import MemStorage, get_storage
from tiyende.utils.response_utils import (
    ResponseWrapper,
    handle_duplicate_error,
    handle_http_error,
    not_found,
)
from tiyende.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


def _public(user: User) -> UserResponse:
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("/", status_code=status.HTTP_200_OK)
def list_users(
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
):
    users = [_public(user) for user in storage.users.get_all()]
    logger.info(f"Fetched {len(users)} users for admin={admin.username}")
    return ResponseWrapper.listed(users, message="Users fetched successfully")


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: UserCreate,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
):
    """
    Create a back-office user. Admin only.

    Raises:
        HTTPException 409: the username is already taken.
    """
    try:
        logger.info(f"Create user request: username={user_in.username}, role={user_in.role.value}")
        user = storage.users.create(obj_in=user_in)
        logger.info(f"User created: {user.id}")
        return ResponseWrapper.created(data=_public(user), message="User created successfully")

    except DuplicateKeyError as e:
        logger.warning(f"Duplicate user: {e}")
        raise handle_duplicate_error(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error while creating user: {e}")
        raise handle_http_error(e)


@router.get("/{user_id}", status_code=status.HTTP_200_OK)
def get_user(
    user_id: int,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
):
    user = storage.users.get(user_id)
    if not user:
        raise not_found("User", user_id)
    return ResponseWrapper.success(data=_public(user), message="User fetched successfully")


@router.patch("/{user_id}", status_code=status.HTTP_200_OK)
def update_user(
    user_id: int,
    user_update: UserUpdate,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
):
    try:
        user = storage.users.update(user_id, obj_in=user_update)
        if not user:
            raise not_found("User", user_id)
        logger.info(f"User {user_id} updated by admin={admin.username}")
        return ResponseWrapper.updated(data=_public(user), message="User updated successfully")

    except DuplicateKeyError as e:
        raise handle_duplicate_error(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error while updating user {user_id}: {e}")
        raise handle_http_error(e)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
):
    if not storage.users.remove(user_id):
        raise not_found("User", user_id)
    logger.info(f"User {user_id} deleted by admin={admin.username}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
