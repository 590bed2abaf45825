from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from tiyende.auth.utils import verify_token
from tiyende.schemas.user import User
from tiyende.storage import MemStorage, get_storage
from tiyende.utils.response_utils import ResponseWrapper
from tiyende.core.logging_config import get_logger

logger = get_logger(__name__)
security = HTTPBearer()


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    storage: MemStorage = Depends(get_storage),
) -> User:
    """
    Resolve the bearer token to a live, active user.

    The token must decode, name an existing user, and still be the token
    stored on that user; logging out clears it.
    """
    token = credentials.credentials
    payload = verify_token(token)

    try:
        user_id = int(payload.get("user_id"))
    except (TypeError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ResponseWrapper.error(message="Invalid token payload", error_code="INVALID_TOKEN"),
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = storage.users.get(user_id)
    if user is None or user.token != token:
        logger.warning(f"Rejected token for user_id={user_id}: unknown user or revoked session")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ResponseWrapper.error(message="Session is no longer valid", error_code="SESSION_REVOKED"),
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=ResponseWrapper.error(message="Account is inactive", error_code="ACCOUNT_INACTIVE"),
        )

    return user
