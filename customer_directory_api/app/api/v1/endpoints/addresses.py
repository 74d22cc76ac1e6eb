"""
Address endpoints for API v1.

Only updating an address lives here; listing is exposed under
``/customers/{customer_id}/addresses``.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from customer_directory_api.app.api.deps import get_address_service
from customer_directory_api.app.core.db import StoreError
from customer_directory_api.app.schemas.address import AddressRead, AddressUpdate
from customer_directory_api.app.services.address_service import AddressService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.put("/{address_id}", response_model=AddressRead)
def update_address(
    address_id: UUID,
    updates: AddressUpdate,
    service: AddressService = Depends(get_address_service),
) -> AddressRead:
    """Replace the address line, city, state and postal code of an address."""
    try:
        address = service.update_address(address_id, updates)
    except StoreError as e:
        logger.exception("Failed to update address %s", address_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error updating address",
        ) from e
    if address is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Address not found")
    return address
