from typing import Any, Dict, List, Optional
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime"""
    return datetime.now(timezone.utc)


# Utility functions for creating consistent responses
def create_success_response(data: Any = None, message: str = "Success") -> Dict[str, Any]:
    """Create a success response with UTC timestamp"""
    return {
        "success": True,
        "message": message,
        "data": data,
        "timestamp": utc_now().strftime("%Y-%m-%d %H:%M:%S")
    }


def create_error_response(message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Create an error response with UTC timestamp"""
    return {
        "success": False,
        "message": message,
        "error_code": error_code,
        "details": details,
        "timestamp": utc_now().strftime("%Y-%m-%d %H:%M:%S")
    }


def create_list_response(items: List[Any], message: str = "Success") -> Dict[str, Any]:
    """Create a list response carrying the item count"""
    return {
        "success": True,
        "message": message,
        "data": {
            "total": len(items),
            "items": items,
        },
        "timestamp": utc_now().strftime("%Y-%m-%d %H:%M:%S")
    }
