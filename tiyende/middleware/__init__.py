"""
Middleware for the Tiyende back-office API
"""
from tiyende.middleware.request_tracking import RequestTrackingMiddleware

__all__ = [
    "RequestTrackingMiddleware",
]
