from fastapi import Depends, HTTPException, status
from typing import List

from tiyende.auth.token_validation import get_current_user
from tiyende.schemas.user import User
from tiyende.utils.response_utils import ResponseWrapper
from tiyende.core.logging_config import get_logger

logger = get_logger(__name__)


class RoleChecker:
    def __init__(self, allowed_roles: List[str]):
        self.allowed_roles = allowed_roles

    def __call__(self, user: User = Depends(get_current_user)) -> User:
        if user.role.value not in self.allowed_roles:
            logger.warning(
                f"Role check failed. Allowed: {self.allowed_roles}, "
                f"user {user.username} has: {user.role.value}"
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=ResponseWrapper.error(
                    message="Admin privileges required",
                    error_code="ADMIN_REQUIRED",
                ),
            )
        return user


require_admin = RoleChecker(["admin"])
