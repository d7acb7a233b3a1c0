from __future__ import annotations

from functools import lru_cache
from itertools import groupby
from pathlib import Path
from typing import Callable

from postaddress.core.logging import get_logger
from postaddress.domain.address import Address
from postaddress.domain.comparison import AddressComparison, compare_addresses
from postaddress.schemas.addresses import ListOrder
from postaddress.services.models import StoredAddress
from postaddress.services.parsing import parse_address
from postaddress.services.repository import AddressRepository


AddressParserCallable = Callable[[str], Address]


_logger = get_logger(__name__)


class AddressBookService:
    """Parses, stores and looks up addresses."""

    def __init__(
        self,
        repository: AddressRepository,
        *,
        address_parser: AddressParserCallable = parse_address,
        default_order: ListOrder = "address",
    ) -> None:
        self._repository = repository
        self._address_parser = address_parser
        self._default_order = default_order

    def parse(self, text: str) -> Address:
        return self._address_parser(text)

    def add(self, text: str) -> StoredAddress:
        return self._repository.add(self._address_parser(text))

    def get(self, address_id: int) -> StoredAddress | None:
        return self._repository.get(address_id)

    def delete(self, address_id: int) -> bool:
        return self._repository.delete(address_id)

    def list(self, order: ListOrder | None = None) -> list[StoredAddress]:
        return self._repository.list(order or self._default_order)

    def compare(self, left: str, right: str) -> AddressComparison:
        return compare_addresses(
            self._address_parser(left), self._address_parser(right)
        )

    def find_equal(self, text: str) -> list[StoredAddress]:
        return self._repository.find_equal(self._address_parser(text))

    def find_approx(self, text: str) -> list[StoredAddress]:
        address = self._address_parser(text)
        matches = self._repository.find_approx(address)
        _logger.info(
            "Approximate lookup", address=address.text, matches=len(matches)
        )
        return matches

    def localities(self) -> list[tuple[str, str, int]]:
        """Count stored addresses per (state, suburb), ignoring case.

        Each group is labelled with the spelling of its first address.
        """

        records = self._repository.list("address")
        counts: list[tuple[str, str, int]] = []
        for _, group in groupby(records, key=_locality_key):
            members = list(group)
            fields = members[0].address.fields
            counts.append((fields.state, fields.suburb, len(members)))
        return counts


def _locality_key(record: StoredAddress) -> tuple[str, str]:
    state, suburb = record.address.fields.locality
    return state.lower(), suburb.lower()


@lru_cache(maxsize=4)
def get_address_book_service(
    db_path: Path, default_order: ListOrder = "address"
) -> AddressBookService:
    return AddressBookService(
        AddressRepository(db_path), default_order=default_order
    )
