from __future__ import annotations

import sqlite3
from typing import Any, Callable

from postaddress.domain import comparison, views
from postaddress.domain.address import Address
from postaddress.parsing.address_parser import parse_address


COLLATION_NAME = "POSTADDRESS"


def _unary(func: Callable[[Address], Any]) -> Callable[[str | None], Any]:
    def wrapper(value: str | None) -> Any:
        if value is None:
            return None
        return func(Address.trusted(value))

    return wrapper


def _binary(func: Callable[[Address, Address], Any]) -> Callable[..., Any]:
    def wrapper(left: str | None, right: str | None) -> Any:
        if left is None or right is None:
            return None
        return func(Address.trusted(left), Address.trusted(right))

    return wrapper


def _collate(left: str, right: str) -> int:
    return comparison.compare(Address.trusted(left), Address.trusted(right))


_UNARY_FUNCTIONS: dict[str, Callable[[Address], Any]] = {
    "postaddress_out": views.format_address,
    "show_postcode": views.show_postcode,
    "show_unit": views.show_unit,
    "show": views.show,
    "postaddress_hash": comparison.address_hash,
}

_BINARY_FUNCTIONS: dict[str, Callable[[Address, Address], Any]] = {
    "postaddress_cmp": comparison.compare,
    "postaddress_lt": comparison.lt,
    "postaddress_le": comparison.le,
    "postaddress_eq": comparison.eq,
    "postaddress_ne": comparison.ne,
    "postaddress_ge": comparison.ge,
    "postaddress_gt": comparison.gt,
    "postaddress_ti": comparison.approx_equal,
    "postaddress_nt": comparison.not_approx_equal,
}


def _postaddress_in(value: str | None) -> str | None:
    if value is None:
        return None
    return parse_address(value).text


def register_address_type(conn: sqlite3.Connection) -> None:
    """Install the address collation and SQL functions on a connection.

    Values are stored as their canonical text. ``postaddress_in`` rejects text
    outside the grammar; the driver reports that as an OperationalError. The
    other functions and the collation trust their arguments and do not
    validate them again.
    """

    conn.create_collation(COLLATION_NAME, _collate)
    conn.create_function("postaddress_in", 1, _postaddress_in, deterministic=True)
    for name, unary in _UNARY_FUNCTIONS.items():
        conn.create_function(name, 1, _unary(unary), deterministic=True)
    for name, binary in _BINARY_FUNCTIONS.items():
        conn.create_function(name, 2, _binary(binary), deterministic=True)
