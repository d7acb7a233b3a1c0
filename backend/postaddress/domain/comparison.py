from __future__ import annotations

import zlib
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from postaddress.domain.address import Address


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True, slots=True)
class AddressComparison:
    """Outcome of comparing two addresses.

    ``differs_at_locality`` is set when state or suburb decided the ordering,
    which is exactly when the two addresses are not approximately equal.
    """

    ordering: Ordering
    differs_at_locality: bool = False

    @property
    def code(self) -> int:
        """Integer form: -2/2 for a locality difference, -1/1 below it."""
        weight = 2 if self.differs_at_locality else 1
        return int(self.ordering) * weight


def _compare_text(left: str, right: str) -> Ordering:
    left, right = left.lower(), right.lower()
    if left > right:
        return Ordering.GREATER
    if left < right:
        return Ordering.LESS
    return Ordering.EQUAL


def compare_addresses(a: Address, b: Address) -> AddressComparison:
    """Compare by state, suburb, street and unit, ignoring case."""

    left, right = a.fields, b.fields

    for left_value, right_value in (
        (left.state, right.state),
        (left.suburb, right.suburb),
    ):
        ordering = _compare_text(left_value, right_value)
        if ordering is not Ordering.EQUAL:
            return AddressComparison(ordering, differs_at_locality=True)

    ordering = _compare_text(left.street, right.street)
    if ordering is not Ordering.EQUAL:
        return AddressComparison(ordering)

    # An address with a unit sorts after the same street address without one.
    if left.unit is None or right.unit is None:
        has_unit = (left.unit is not None) - (right.unit is not None)
        return AddressComparison(Ordering(has_unit))

    return AddressComparison(_compare_text(left.unit, right.unit))


def compare(a: Address, b: Address) -> int:
    return compare_addresses(a, b).code


def lt(a: Address, b: Address) -> bool:
    return compare(a, b) < 0


def le(a: Address, b: Address) -> bool:
    return compare(a, b) <= 0


def eq(a: Address, b: Address) -> bool:
    return compare(a, b) == 0


def ne(a: Address, b: Address) -> bool:
    return compare(a, b) != 0


def ge(a: Address, b: Address) -> bool:
    return compare(a, b) >= 0


def gt(a: Address, b: Address) -> bool:
    return compare(a, b) > 0


def approx_equal(a: Address, b: Address) -> bool:
    """True when both addresses share state and suburb (the ``~`` operator)."""

    return not compare_addresses(a, b).differs_at_locality


def not_approx_equal(a: Address, b: Address) -> bool:
    return compare_addresses(a, b).differs_at_locality


def address_hash(address: Address) -> int:
    """Unsigned 32-bit CRC of the canonical text bytes.

    Case matters here even though it does not for ``eq``.
    """

    return zlib.crc32(address.text.encode("utf-8"))
