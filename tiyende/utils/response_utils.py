from typing import Any, Dict, List, Optional
from fastapi import HTTPException, status
from fastapi.encoders import jsonable_encoder
from tiyende.core.exceptions import DuplicateKeyError
from tiyende.schemas.base import (
    create_success_response,
    create_error_response,
    create_list_response,
)
from tiyende.core.logging_config import get_logger

logger = get_logger(__name__)


class ResponseWrapper:
    """Utility class for wrapping responses in standard format"""

    @staticmethod
    def success(data: Any = None, message: str = "Success") -> Dict[str, Any]:
        return jsonable_encoder(create_success_response(data, message))

    @staticmethod
    def error(
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Wrap error response and make it JSON-safe"""
        raw = create_error_response(message, error_code, details)
        return jsonable_encoder(raw)

    @staticmethod
    def listed(items: List[Any], message: str = "Success") -> Dict[str, Any]:
        return jsonable_encoder(create_list_response(items, message))

    @staticmethod
    def created(data: Any = None, message: str = "Resource created successfully") -> Dict[str, Any]:
        return ResponseWrapper.success(data, message)

    @staticmethod
    def updated(data: Any = None, message: str = "Resource updated successfully") -> Dict[str, Any]:
        return ResponseWrapper.success(data, message)


def not_found(entity: str, identifier: Any) -> HTTPException:
    """404 for a lookup that came back empty"""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=ResponseWrapper.error(
            message=f"{entity} not found",
            error_code=f"{entity.upper()}_NOT_FOUND",
            details={"id": identifier},
        ),
    )


def missing_reference(entity: str, identifier: Any) -> HTTPException:
    """400 for a request body pointing at a record that does not exist"""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=ResponseWrapper.error(
            message=f"{entity} not found",
            error_code=f"{entity.upper()}_NOT_FOUND",
            details={"id": identifier},
        ),
    )


def handle_duplicate_error(error: DuplicateKeyError) -> HTTPException:
    """Convert store uniqueness violations to 409"""
    detail = ResponseWrapper.error(
        message="Resource already exists with the same values",
        error_code="DUPLICATE_RESOURCE",
        details={"conflicting_fields": {error.field: error.value}, "entity": error.entity},
    )
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=detail)


def handle_http_error(error: Exception) -> HTTPException:
    """Convert HTTP and generic exceptions into structured ResponseWrapper format"""
    if isinstance(error, HTTPException):
        detail = getattr(error, "detail", str(error))
        if isinstance(detail, dict) and detail.get("success") is not None:
            return error

        detail = ResponseWrapper.error(
            message=str(detail),
            error_code="HTTP_ERROR",
            details={"original_error": detail},
        )
        return HTTPException(status_code=error.status_code, detail=detail)

    logger.exception(f"Unexpected HTTP error: {error}")
    detail = ResponseWrapper.error(
        message="Unexpected server error",
        error_code="INTERNAL_SERVER_ERROR",
        details={"original_error": str(error)},
    )
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
