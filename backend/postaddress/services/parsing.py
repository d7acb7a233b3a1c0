from __future__ import annotations

from postaddress.domain.address import AddressValidationError
from postaddress.parsing.address_parser import parse_address
from postaddress.parsing.validation import AddressValidationResult, validate_address

__all__ = [
    "AddressValidationError",
    "AddressValidationResult",
    "parse_address",
    "validate_address",
]
