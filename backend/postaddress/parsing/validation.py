from __future__ import annotations

from dataclasses import dataclass

from postaddress.core.logging import get_logger
from postaddress.domain.address import AddressValidationError, decompose

_logger = get_logger(__name__)


@dataclass(slots=True)
class AddressValidationResult:
    is_valid: bool
    reason: str | None = None
    components: dict[str, str] | None = None


def validate_address(text: str) -> AddressValidationResult:
    """Check address text against the grammar without raising."""

    try:
        fields = decompose(text)
    except AddressValidationError as exc:
        _logger.debug("Address failed validation", raw_text=text, reason=exc.reason)
        return AddressValidationResult(False, reason=exc.reason)

    return AddressValidationResult(True, components=fields.as_dict())
