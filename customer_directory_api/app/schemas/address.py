"""
Pydantic models for address data.

Addresses belong to a customer through ``customer_id``.  The API only
reads and updates them; there is no create or delete endpoint.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class AddressUpdate(BaseModel):
    """Schema for updating an address.  Every field is replaced."""

    address_line: str = Field(..., examples=["742 Evergreen Terrace"])
    city: str = Field(..., examples=["Springfield"])
    state: str = Field(..., examples=["IL"])
    postal_code: str = Field(..., examples=["62701"])


class AddressRead(AddressUpdate):
    """Schema for reading an address from the API."""

    address_id: UUID
    # Nullable in the schema, although rows are always written with an owner.
    customer_id: Optional[UUID] = None

    model_config = {
        "from_attributes": True,
    }
