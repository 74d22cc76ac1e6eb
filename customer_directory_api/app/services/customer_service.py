"""
Business logic for customers.

The ``CustomerService`` maps each customer operation onto a single
parameterized statement against the store and converts the returned
rows into schema objects.  Store failures are not handled here: the
``StoreError`` raised by the store client propagates to the API
handler, which decides how to report it.
"""

import logging
from typing import Any, List, Optional, Tuple
from uuid import UUID

from customer_directory_api.app.core.db import StoreClient
from customer_directory_api.app.schemas.customer import (
    CustomerCreate,
    CustomerRead,
    CustomerSummary,
    CustomerUpdate,
)

logger = logging.getLogger(__name__)


def build_customer_search(
    city: Optional[str] = None,
    state: Optional[str] = None,
    postal_code: Optional[str] = None,
) -> Tuple[str, List[Any]]:
    """Build the customer search statement and its parameters.

    Starts from an always-true predicate and appends one equality
    condition per supplied filter, in the order city, state, postal
    code.  Empty strings are treated as absent.  With no filters the
    statement selects every customer.
    """
    query = "SELECT * FROM customers WHERE 1=1"
    params: List[Any] = []
    if city:
        query += " AND city = %s"
        params.append(city)
    if state:
        query += " AND state = %s"
        params.append(state)
    if postal_code:
        query += " AND postal_code = %s"
        params.append(postal_code)
    return query, params


class CustomerService:
    """Customer operations backed by an injected ``StoreClient``."""

    def __init__(self, store: StoreClient) -> None:
        self.store = store

    def create_customer(self, data: CustomerCreate) -> CustomerRead:
        """Insert a customer and return the stored row.

        ``customer_id`` is generated by the database.
        """
        result = self.store.query(
            """
            INSERT INTO customers (first_name, last_name, phone_number, city, state, postal_code)
            VALUES (%s, %s, %s, %s, %s, %s)
            RETURNING *
            """,
            (
                data.first_name,
                data.last_name,
                data.phone_number,
                data.city,
                data.state,
                data.postal_code,
            ),
        )
        customer = CustomerRead(**result.first())
        logger.info("Created customer %s", customer.customer_id)
        return customer

    def get_customer(self, customer_id: UUID) -> Optional[CustomerRead]:
        result = self.store.query(
            "SELECT * FROM customers WHERE customer_id = %s",
            (str(customer_id),),
        )
        row = result.first()
        if row is None:
            return None
        return CustomerRead(**row)

    def update_customer(self, customer_id: UUID, data: CustomerUpdate) -> Optional[CustomerRead]:
        """Replace a customer's name and phone number.

        Location fields are left untouched.  Returns ``None`` when no
        row has the given identifier.
        """
        result = self.store.query(
            """
            UPDATE customers
            SET first_name = %s, last_name = %s, phone_number = %s
            WHERE customer_id = %s
            RETURNING *
            """,
            (data.first_name, data.last_name, data.phone_number, str(customer_id)),
        )
        row = result.first()
        if row is None:
            return None
        logger.info("Updated customer %s", customer_id)
        return CustomerRead(**row)

    def delete_customer(self, customer_id: UUID) -> int:
        """Delete a customer and return the number of rows removed (0 or 1)."""
        result = self.store.query(
            "DELETE FROM customers WHERE customer_id = %s",
            (str(customer_id),),
        )
        if result.row_count:
            logger.info("Deleted customer %s", customer_id)
        return result.row_count

    def list_customers_with_one_address(self) -> List[CustomerSummary]:
        """Return customers that own exactly one address.

        The left join keeps customers without addresses in the grouping
        (with a count of zero) so the filter can exclude them.
        """
        result = self.store.query(
            """
            SELECT c.customer_id, c.first_name, c.last_name
            FROM customers c
            LEFT JOIN addresses a ON c.customer_id = a.customer_id
            GROUP BY c.customer_id, c.first_name, c.last_name
            HAVING COUNT(a.address_id) = 1
            """
        )
        return [CustomerSummary(**row) for row in result.rows]

    def search_customers(
        self,
        city: Optional[str] = None,
        state: Optional[str] = None,
        postal_code: Optional[str] = None,
    ) -> List[CustomerRead]:
        query, params = build_customer_search(city=city, state=state, postal_code=postal_code)
        result = self.store.query(query, params)
        return [CustomerRead(**row) for row in result.rows]
