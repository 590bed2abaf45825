from fastapi import APIRouter, Depends, HTTPException, Response, status

from tiyende.auth.token_validation import get_current_user
from tiyende.schemas.user import User
from tiyende.schemas.vendor import VendorCreate, VendorUpdate
from tiyende.storage import MemStorage, get_storage
from tiyende.utils.response_utils import ResponseWrapper, handle_http_error, not_found
from tiyende.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/vendors", tags=["vendors"])


@router.get("/", status_code=status.HTTP_200_OK)
def list_vendors(
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    vendors = storage.vendors.get_all()
    return ResponseWrapper.listed(vendors, message="Vendors fetched successfully")


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_vendor(
    vendor: VendorCreate,
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    """
    Register a bus operator.

    `status` defaults to "active". Creation is recorded in the activity log.
    """
    try:
        logger.info(f"Create vendor request: {vendor.model_dump()}")
        db_vendor = storage.vendors.create(obj_in=vendor)
        logger.info(f"Vendor created: {db_vendor.id} by user={current_user.username}")
        return ResponseWrapper.created(data=db_vendor, message="Vendor created successfully")

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error while creating vendor: {e}")
        raise handle_http_error(e)


@router.get("/{vendor_id}", status_code=status.HTTP_200_OK)
def get_vendor(
    vendor_id: int,
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    vendor = storage.vendors.get(vendor_id)
    if not vendor:
        raise not_found("Vendor", vendor_id)
    return ResponseWrapper.success(data=vendor, message="Vendor fetched successfully")


@router.patch("/{vendor_id}", status_code=status.HTTP_200_OK)
def update_vendor(
    vendor_id: int,
    vendor_update: VendorUpdate,
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    """Partial update; omitted fields keep their values"""
    try:
        vendor = storage.vendors.update(vendor_id, obj_in=vendor_update)
        if not vendor:
            raise not_found("Vendor", vendor_id)
        logger.info(f"Vendor {vendor_id} updated: {vendor_update.model_dump(exclude_unset=True)}")
        return ResponseWrapper.updated(data=vendor, message="Vendor updated successfully")

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error while updating vendor {vendor_id}: {e}")
        raise handle_http_error(e)


@router.delete("/{vendor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_vendor(
    vendor_id: int,
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    if not storage.vendors.remove(vendor_id):
        raise not_found("Vendor", vendor_id)
    logger.info(f"Vendor {vendor_id} deleted by user={current_user.username}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
