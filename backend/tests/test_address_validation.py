from postaddress.services.parsing import validate_address


def test_validator_accepts_common_address():
    result = validate_address("1 Science Park, Kensington, NS 2033")

    assert result.is_valid
    assert result.reason is None
    assert result.components == {
        "street": "1 Science Park",
        "suburb": "Kensington",
        "state": "NS",
        "postcode": "2033",
    }


def test_validator_includes_unit_when_present():
    result = validate_address("C3/1 Science Park, Kensington, NS 2033")

    assert result.is_valid
    assert result.components is not None
    assert result.components["unit"] == "C3"


def test_validator_rejects_digits_in_suburb():
    result = validate_address("1 Science Park, Kensington 2, NS 2033")

    assert not result.is_valid
    assert result.reason == "invalid suburb"
    assert result.components is None


def test_validator_requires_address_structure():
    result = validate_address("Kensington NS")

    assert not result.is_valid
    assert result.reason == "missing suburb"
