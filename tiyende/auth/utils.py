from datetime import datetime, timedelta, timezone
import hashlib
import hmac
import uuid
from typing import Optional, Dict
import jwt
from fastapi import HTTPException, status
from tiyende.config import settings
from tiyende.utils.response_utils import ResponseWrapper

# Configuration - use centralized settings
SECRET_KEY = settings.SECRET_KEY
ALGORITHM = settings.ALGORITHM
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES


def create_access_token(
    user_id: str,
    user_type: str = "staff",   # 👈 user role, "admin" or "staff"
    custom_claims: Optional[Dict] = None,
    expires_delta: Optional[timedelta] = None
) -> str:
    to_encode = {
        "user_id": user_id,
        "token_type": "access",
        "user_type": user_type,
        "jti": str(uuid.uuid4()),
    }

    if custom_claims:
        to_encode.update(custom_claims)

    # remove all None values
    to_encode = {k: v for k, v in to_encode.items() if v is not None}

    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire, "iat": now})

    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def verify_token(token: str) -> Dict:
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])

    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ResponseWrapper.error(message="Token expired", error_code="TOKEN_EXPIRED"),
            headers={"WWW-Authenticate": "Bearer"},
        )

    except jwt.InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ResponseWrapper.error(message="Invalid or expired token", error_code="INVALID_TOKEN"),
            headers={"WWW-Authenticate": "Bearer"},
        )


def hash_password(password: str) -> str:
    return hashlib.sha256(password.encode('utf-8')).hexdigest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return hmac.compare_digest(hash_password(plain_password), hashed_password)
