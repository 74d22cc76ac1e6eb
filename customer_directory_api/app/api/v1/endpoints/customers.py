"""
Customer endpoints for API v1.

These routes provide create, read, update and delete operations for
customers, the list of a customer's addresses, the "exactly one
address" report and a location search.  Each handler catches the
``StoreError`` raised by its own service call and answers with a 500
carrying an operation-specific message; driver error text is logged,
never returned.

The fixed paths ``/one-address`` and ``/search`` are declared before
``/{customer_id}`` so the identifier route does not capture them.
"""

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from customer_directory_api.app.api.deps import get_address_service, get_customer_service
from customer_directory_api.app.core.db import StoreError
from customer_directory_api.app.schemas.address import AddressRead
from customer_directory_api.app.schemas.customer import (
    CustomerCreate,
    CustomerRead,
    CustomerSummary,
    CustomerUpdate,
    DeleteConfirmation,
)
from customer_directory_api.app.services.address_service import AddressService
from customer_directory_api.app.services.customer_service import CustomerService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=CustomerRead, status_code=status.HTTP_201_CREATED)
def create_customer(
    customer: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerRead:
    """Create a new customer.

    Returns the stored row, including the generated ``customer_id``.
    """
    try:
        return service.create_customer(customer)
    except StoreError as e:
        logger.exception("Failed to create customer")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create customer",
        ) from e


@router.get("/one-address", response_model=List[CustomerSummary])
def list_customers_with_one_address(
    service: CustomerService = Depends(get_customer_service),
) -> List[CustomerSummary]:
    """List customers that have exactly one address on file."""
    try:
        return service.list_customers_with_one_address()
    except StoreError as e:
        logger.exception("Failed to fetch customers with one address")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching customers with one address",
        ) from e


@router.get("/search", response_model=List[CustomerRead])
def search_customers(
    city: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    postal_code: Optional[str] = Query(None),
    service: CustomerService = Depends(get_customer_service),
) -> List[CustomerRead]:
    """Search customers by location.

    - **city**, **state**, **postal_code**: optional, exact match.
      Supplied filters are combined with AND.  Without any filter
      every customer is returned.
    """
    try:
        return service.search_customers(city=city, state=state, postal_code=postal_code)
    except StoreError as e:
        logger.exception("Customer search failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error searching customers",
        ) from e


@router.get("/{customer_id}", response_model=CustomerRead)
def get_customer(
    customer_id: UUID,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerRead:
    """Retrieve a single customer by ID.  Raises 404 if there is none."""
    try:
        customer = service.get_customer(customer_id)
    except StoreError as e:
        logger.exception("Failed to retrieve customer %s", customer_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving customer details",
        ) from e
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customer


@router.put("/{customer_id}", response_model=CustomerRead)
def update_customer(
    customer_id: UUID,
    updates: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerRead:
    """Update a customer's first name, last name and phone number.

    City, state and postal code cannot be changed here.  Raises 404 if
    no customer has this ID.
    """
    try:
        customer = service.update_customer(customer_id, updates)
    except StoreError as e:
        logger.exception("Failed to update customer %s", customer_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update customer information",
        ) from e
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customer


@router.delete("/{customer_id}", response_model=DeleteConfirmation)
def delete_customer(
    customer_id: UUID,
    service: CustomerService = Depends(get_customer_service),
) -> DeleteConfirmation:
    """Delete a customer.

    The confirmation is returned whether or not a row existed.  A
    customer that still owns addresses is protected by the foreign key
    and the request fails with 500.
    """
    try:
        service.delete_customer(customer_id)
    except StoreError as e:
        logger.exception("Failed to delete customer %s", customer_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error deleting customer",
        ) from e
    return DeleteConfirmation(message="Customer successfully deleted")


@router.get("/{customer_id}/addresses", response_model=List[AddressRead])
def list_customer_addresses(
    customer_id: UUID,
    service: AddressService = Depends(get_address_service),
) -> List[AddressRead]:
    """List all addresses of a customer (possibly none)."""
    try:
        return service.list_addresses(customer_id)
    except StoreError as e:
        logger.exception("Failed to fetch addresses of customer %s", customer_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching addresses",
        ) from e
