from __future__ import annotations

from postaddress.domain.address import Address


NULL_UNIT = "NULL"


def format_address(address: Address) -> str:
    return address.text


def show_postcode(address: Address) -> str:
    return address.fields.postcode


def show_unit(address: Address) -> str:
    unit = address.fields.unit
    return NULL_UNIT if unit is None else unit


def show(address: Address) -> str:
    """
    Short display form: street name and state.

    The unit, house number, suburb and postcode are left out, so
    ``"A1/12 Smith Street, Springfield, VI 3000"`` shows as
    ``"Smith Street, VI"``.
    """
    fields = address.fields
    return f"{fields.street_name}, {fields.state}"
