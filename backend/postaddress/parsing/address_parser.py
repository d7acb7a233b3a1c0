from __future__ import annotations

from postaddress.core.logging import get_logger
from postaddress.domain.address import Address, AddressValidationError


_logger = get_logger(__name__)


def parse_address(text: str) -> Address:
    """Validate ``[unit/]street, suburb, STATE POSTCODE`` text into an Address.

    The text is kept exactly as given; nothing is trimmed or re-cased.
    """

    try:
        address = Address(text)
    except AddressValidationError as exc:
        _logger.debug("Address rejected", raw_text=text, reason=exc.reason)
        raise

    _logger.debug("Address parsed", raw_text=text)
    return address
