from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from postaddress.domain.address import Address
from postaddress.schemas.addresses import StoredAddressResponse


@dataclass
class StoredAddress:
    """Persisted address row."""

    address_id: int
    address: Address
    created_at: datetime

    def to_response(self) -> StoredAddressResponse:
        return StoredAddressResponse(
            address_id=self.address_id,
            address=self.address.text,
            created_at=self.created_at,
        )
