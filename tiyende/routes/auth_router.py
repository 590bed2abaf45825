from fastapi import APIRouter, Depends, HTTPException, status

from tiyende.auth.token_validation import get_current_user
from tiyende.auth.utils import create_access_token, verify_password
from tiyende.schemas.auth import LoginRequest, LoginResponse
from tiyende.schemas.user import User, UserResponse
from tiyende.storage import MemStorage, get_storage
from tiyende.utils.response_utils import ResponseWrapper, handle_http_error
from tiyende.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", status_code=status.HTTP_200_OK)
def login(
    form_data: LoginRequest,
    storage: MemStorage = Depends(get_storage),
):
    """
    Authenticate a back-office user and issue a bearer token.

    The token is stored on the user so that logging out revokes it, and
    `last_login` is stamped.

    Raises:
        HTTPException 401: unknown username or wrong password.
        HTTPException 403: the account is inactive.
    """
    try:
        logger.info(f"Login attempt for username={form_data.username}")
        user = storage.users.get_by_username(form_data.username)

        if not user or not verify_password(form_data.password, user.password):
            logger.warning(f"Invalid credentials for username={form_data.username}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=ResponseWrapper.error(
                    message="Invalid username or password",
                    error_code="INVALID_CREDENTIALS",
                ),
            )

        if not user.active:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=ResponseWrapper.error(
                    message="Account is inactive",
                    error_code="ACCOUNT_INACTIVE",
                ),
            )

        token = create_access_token(
            user_id=str(user.id),
            user_type=user.role.value,
            custom_claims={"username": user.username},
        )
        storage.users.set_token(user.id, token)
        storage.activities.record("User logged in", {"username": user.username}, user_id=user.id)

        user = storage.users.get(user.id)
        logger.info(f"User {user.username} logged in")

        return ResponseWrapper.success(
            data=LoginResponse(user=UserResponse.model_validate(user, from_attributes=True), token=token),
            message="Login successful",
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error during login: {e}")
        raise handle_http_error(e)


@router.post("/logout", status_code=status.HTTP_200_OK)
def logout(
    current_user: User = Depends(get_current_user),
    storage: MemStorage = Depends(get_storage),
):
    storage.users.set_token(current_user.id, None)
    storage.activities.record("User logged out", {}, user_id=current_user.id)
    logger.info(f"User {current_user.username} logged out")
    return ResponseWrapper.success(message="Logged out successfully")


@router.get("/me", status_code=status.HTTP_200_OK)
def get_me(current_user: User = Depends(get_current_user)):
    """Profile of the caller"""
    return ResponseWrapper.success(
        data=UserResponse.model_validate(current_user, from_attributes=True),
        message="Current user fetched successfully",
    )
