from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from tiyende.auth.token_validation import get_current_user
from tiyende.core.exceptions import DuplicateKeyError
from tiyende.schemas.ticket import TicketCreate, TicketUpdate
from tiyende.schemas.user import User
from tiyende.storage import MemStorage, get_storage
from tiyende.utils.response_utils import (
    ResponseWrapper,
    handle_duplicate_error,
    handle_http_error,
    missing_reference,
    not_found,
)
from tiyende.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/tickets", tags=["tickets"])


def _check_references(storage: MemStorage, route_id: Optional[int], vendor_id: Optional[int]) -> None:
    if route_id is not None and not storage.routes.get(route_id):
        raise missing_reference("Route", route_id)
    if vendor_id is not None and not storage.vendors.get(vendor_id):
        raise missing_reference("Vendor", vendor_id)


@router.get("/", status_code=status.HTTP_200_OK)
def list_tickets(
    route_id: Optional[int] = Query(None, description="Only tickets on this route"),
    vendor_id: Optional[int] = Query(None, description="Only tickets sold by this vendor"),
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    """
    List tickets. When both filters are given the route filter wins.
    """
    if route_id is not None:
        tickets = storage.tickets.get_by_route(route_id)
    elif vendor_id is not None:
        tickets = storage.tickets.get_by_vendor(vendor_id)
    else:
        tickets = storage.tickets.get_all()
    return ResponseWrapper.listed(tickets, message="Tickets fetched successfully")


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_ticket(
    ticket: TicketCreate,
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    """
    Book a ticket.

    Raises:
        HTTPException 400: the route or vendor does not exist.
        HTTPException 409: the booking reference is already used.
    """
    try:
        logger.info(f"Create ticket request: reference={ticket.booking_reference}, route={ticket.route_id}")
        _check_references(storage, ticket.route_id, ticket.vendor_id)

        db_ticket = storage.tickets.create(obj_in=ticket)
        logger.info(f"Ticket created: {db_ticket.id} ({db_ticket.booking_reference})")
        return ResponseWrapper.created(data=db_ticket, message="Ticket created successfully")

    except DuplicateKeyError as e:
        logger.warning(f"Duplicate ticket: {e}")
        raise handle_duplicate_error(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error while creating ticket: {e}")
        raise handle_http_error(e)


@router.get("/reference/{reference}", status_code=status.HTTP_200_OK)
def get_ticket_by_reference(
    reference: str,
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    ticket = storage.tickets.get_by_reference(reference)
    if not ticket:
        raise not_found("Ticket", reference)
    return ResponseWrapper.success(data=ticket, message="Ticket fetched successfully")


@router.get("/{ticket_id}", status_code=status.HTTP_200_OK)
def get_ticket(
    ticket_id: int,
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    ticket = storage.tickets.get(ticket_id)
    if not ticket:
        raise not_found("Ticket", ticket_id)
    return ResponseWrapper.success(data=ticket, message="Ticket fetched successfully")


@router.patch("/{ticket_id}", status_code=status.HTTP_200_OK)
def update_ticket(
    ticket_id: int,
    ticket_update: TicketUpdate,
    storage: MemStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    try:
        _check_references(storage, ticket_update.route_id, ticket_update.vendor_id)

        ticket = storage.tickets.update(ticket_id, obj_in=ticket_update)
        if not ticket:
            raise not_found("Ticket", ticket_id)
        logger.info(f"Ticket {ticket_id} updated: {ticket_update.model_dump(exclude_unset=True)}")
        return ResponseWrapper.updated(data=ticket, message="Ticket updated successfully")

    except DuplicateKeyError as e:
        raise handle_duplicate_error(e)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error while updating ticket {ticket_id}: {e}")
        raise handle_http_error(e)
