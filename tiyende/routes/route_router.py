from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from tiyende.auth.token_validation import get_current_user
from tiyende.schemas.route import RouteCreate, RouteUpdate
from tiyende.schemas.user import User
from tiyende.storage import MemStorage, get_storage
from tiyende.utils.response_utils import (
    ResponseWrapper,
    handle_http_error,
    missing_reference,
    not_found,
)
from tiyende.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/routes", tags=["routes"])


@router.get("/", status_code=status.HTTP_200_OK)
def list_routes(
    vendor_id: Optional[int] = Query(None, description="Only routes operated by this vendor"),
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    if vendor_id is not None:
        routes = storage.routes.get_by_vendor(vendor_id)
    else:
        routes = storage.routes.get_all()
    return ResponseWrapper.listed(routes, message="Routes fetched successfully")


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_route(
    route: RouteCreate,
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    """
    Create a route for an existing vendor.

    Raises:
        HTTPException 400: the vendor does not exist.
    """
    try:
        if not storage.vendors.get(route.vendor_id):
            raise missing_reference("Vendor", route.vendor_id)

        db_route = storage.routes.create(obj_in=route)
        logger.info(f"Route created: {db_route.id} ({db_route.label})")
        return ResponseWrapper.created(data=db_route, message="Route created successfully")

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error while creating route: {e}")
        raise handle_http_error(e)


@router.get("/{route_id}", status_code=status.HTTP_200_OK)
def get_route(
    route_id: int,
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    route = storage.routes.get(route_id)
    if not route:
        raise not_found("Route", route_id)
    return ResponseWrapper.success(data=route, message="Route fetched successfully")


@router.patch("/{route_id}", status_code=status.HTTP_200_OK)
def update_route(
    route_id: int,
    route_update: RouteUpdate,
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    try:
        # Re-check the vendor only when it is being changed
        if route_update.vendor_id is not None and not storage.vendors.get(route_update.vendor_id):
            raise missing_reference("Vendor", route_update.vendor_id)

        route = storage.routes.update(route_id, obj_in=route_update)
        if not route:
            raise not_found("Route", route_id)
        logger.info(f"Route {route_id} updated: {route_update.model_dump(exclude_unset=True)}")
        return ResponseWrapper.updated(data=route, message="Route updated successfully")

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error while updating route {route_id}: {e}")
        raise handle_http_error(e)


@router.delete("/{route_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_route(
    route_id: int,
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    if not storage.routes.remove(route_id):
        raise not_found("Route", route_id)
    logger.info(f"Route {route_id} deleted by user={current_user.username}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
