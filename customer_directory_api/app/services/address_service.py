"""
Business logic for addresses.

Addresses are listed per customer and updated in place.  Creating and
deleting addresses is not part of the API.
"""

import logging
from typing import List, Optional
from uuid import UUID

from customer_directory_api.app.core.db import StoreClient
from customer_directory_api.app.schemas.address import AddressRead, AddressUpdate

logger = logging.getLogger(__name__)


class AddressService:
    """Address operations backed by an injected ``StoreClient``."""

    def __init__(self, store: StoreClient) -> None:
        self.store = store

    def list_addresses(self, customer_id: UUID) -> List[AddressRead]:
        """Return every address owned by ``customer_id``.

        An unknown customer simply has no addresses; the result is an
        empty list rather than an error.
        """
        result = self.store.query(
            "SELECT * FROM addresses WHERE customer_id = %s",
            (str(customer_id),),
        )
        return [AddressRead(**row) for row in result.rows]

    def update_address(self, address_id: UUID, data: AddressUpdate) -> Optional[AddressRead]:
        """Replace all editable fields of an address.

        Returns ``None`` when no row has the given identifier.
        """
        result = self.store.query(
            """
            UPDATE addresses
            SET address_line = %s, city = %s, state = %s, postal_code = %s
            WHERE address_id = %s
            RETURNING *
            """,
            (data.address_line, data.city, data.state, data.postal_code, str(address_id)),
        )
        row = result.first()
        if row is None:
            return None
        logger.info("Updated address %s", address_id)
        return AddressRead(**row)
