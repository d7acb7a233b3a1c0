from __future__ import annotations

import re
from dataclasses import dataclass

from postaddress.domain import comparison


UNIT_SEPARATOR = "/"
FIELD_SEPARATOR = ","

# Segments after a comma keep their leading separator space.
_UNIT_PATTERN = re.compile(r"[a-zA-Z][0-9]+")
_STREET_PATTERN = re.compile(r"[0-9]+ [a-zA-Z]+(?: [a-zA-Z]+)*")
_SUBURB_PATTERN = re.compile(r" [a-zA-Z]+(?: [a-zA-Z]+)*")
_STATE_POSTCODE_PATTERN = re.compile(r" [A-Z]{2} [0-9]{4}")


class AddressValidationError(ValueError):
    """Raised when text does not follow the address grammar."""

    def __init__(self, text: str, reason: str | None = None) -> None:
        super().__init__(f'invalid input syntax for address: "{text}"')
        self.text = text
        self.reason = reason


@dataclass(frozen=True, slots=True)
class AddressFields:
    """Fields of an address, without their separators.

    The grammar requires a space after each comma, but that space is not part
    of the value: ``"12 Smith Street, Springfield, VI 3000"`` has suburb
    ``"Springfield"`` and state ``"VI"``. Comparisons use these values.
    """

    unit: str | None
    street: str
    suburb: str
    state: str
    postcode: str

    @property
    def house_number(self) -> str:
        return self.street.partition(" ")[0]

    @property
    def street_name(self) -> str:
        return self.street.partition(" ")[2]

    @property
    def locality(self) -> tuple[str, str]:
        return self.state, self.suburb

    @property
    def comparison_key(self) -> tuple[str, str, str, bool, str]:
        """Case-folded key that sorts the same way as ``compare``."""

        return (
            self.state.lower(),
            self.suburb.lower(),
            self.street.lower(),
            self.unit is not None,
            (self.unit or "").lower(),
        )

    def as_dict(self) -> dict[str, str]:
        components = {
            "street": self.street,
            "suburb": self.suburb,
            "state": self.state,
            "postcode": self.postcode,
        }
        if self.unit is not None:
            components["unit"] = self.unit
        return components


def decompose(text: str, *, validate: bool = True) -> AddressFields:
    """Split address text into its fields.

    Fields are located left to right: the unit up to the first ``/``, then the
    street and suburb up to the next two commas, then state and postcode. With
    ``validate`` every segment is checked against the grammar as soon as it is
    found, so the first violated rule is the one reported. Without it the text
    is trusted and only sliced.
    """

    rest = text
    unit: str | None = None
    head, separator, tail = text.partition(UNIT_SEPARATOR)
    if separator:
        unit, rest = head, tail
        if validate and not _UNIT_PATTERN.fullmatch(unit):
            raise AddressValidationError(text, "invalid unit")

    street, separator, rest = rest.partition(FIELD_SEPARATOR)
    if not separator:
        raise AddressValidationError(text, "missing suburb")
    if validate and not _STREET_PATTERN.fullmatch(street):
        raise AddressValidationError(text, "invalid street")

    suburb, separator, state_postcode = rest.partition(FIELD_SEPARATOR)
    if not separator:
        raise AddressValidationError(text, "missing state and postcode")
    if validate and not _SUBURB_PATTERN.fullmatch(suburb):
        raise AddressValidationError(text, "invalid suburb")

    if validate and not _STATE_POSTCODE_PATTERN.fullmatch(state_postcode):
        raise AddressValidationError(text, "invalid state or postcode")

    state, _, postcode = state_postcode.removeprefix(" ").partition(" ")
    return AddressFields(
        unit=unit,
        street=street,
        suburb=suburb.removeprefix(" "),
        state=state,
        postcode=postcode,
    )


@dataclass(frozen=True, slots=True, eq=False)
class Address:
    """A postal address held as its canonical text.

    The text is checked once on construction. Fields are derived from it on
    every access; nothing else is stored.

    Equality and ordering follow ``comparison.compare``: state, suburb, street
    then unit, ignoring case. ``hash()`` agrees with that equality. The
    host-facing ``comparison.address_hash`` hashes the raw text instead.
    """

    text: str

    def __post_init__(self) -> None:
        decompose(self.text)

    @classmethod
    def trusted(cls, text: str) -> Address:
        """Wrap text that already passed validation, such as stored values."""

        address = object.__new__(cls)
        object.__setattr__(address, "text", text)
        return address

    @property
    def fields(self) -> AddressFields:
        return decompose(self.text, validate=False)

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return comparison.eq(self, other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return comparison.ne(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return comparison.lt(self, other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return comparison.le(self, other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return comparison.gt(self, other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return comparison.ge(self, other)

    def __hash__(self) -> int:
        return hash(self.fields.comparison_key)
