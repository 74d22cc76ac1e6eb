"""
Pydantic models for customer data.

``CustomerBase`` holds the contact and location fields shared by
requests and responses; ``CustomerCreate`` is the body of
``POST /customers`` and ``CustomerRead`` adds the server-generated
``customer_id``.  Only the name and phone fields can be changed after
creation, which is what ``CustomerUpdate`` carries.
"""

from uuid import UUID

from pydantic import BaseModel, Field


class CustomerBase(BaseModel):
    first_name: str = Field(..., examples=["Homer"])
    last_name: str = Field(..., examples=["Simpson"])
    phone_number: str = Field(..., examples=["555-0134"])
    city: str = Field(..., examples=["Springfield"])
    state: str = Field(..., examples=["IL"])
    postal_code: str = Field(..., examples=["62701"])


class CustomerCreate(CustomerBase):
    """Schema for creating a customer."""
    pass


class CustomerUpdate(BaseModel):
    """Schema for updating a customer.

    All three fields are required; city, state and postal code are not
    updatable.
    """
    first_name: str = Field(..., examples=["Marge"])
    last_name: str = Field(..., examples=["Simpson"])
    phone_number: str = Field(..., examples=["555-0199"])


class CustomerRead(CustomerBase):
    """Schema for reading a customer from the API."""

    customer_id: UUID

    model_config = {
        "from_attributes": True,
    }


class CustomerSummary(BaseModel):
    """Identifier and name of a customer, as returned by aggregate queries."""

    customer_id: UUID
    first_name: str
    last_name: str


class DeleteConfirmation(BaseModel):
    message: str = Field(..., examples=["Customer successfully deleted"])
