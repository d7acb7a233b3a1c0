import zlib
from itertools import product

import pytest

from postaddress.domain.comparison import (
    AddressComparison,
    Ordering,
    address_hash,
    approx_equal,
    compare,
    compare_addresses,
    eq,
    ge,
    gt,
    le,
    lt,
    ne,
    not_approx_equal,
)
from postaddress.parsing.address_parser import parse_address


def _pair(left, right):
    return parse_address(left), parse_address(right)


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("1 A St, X, VI 3000", "2 B St, X, VI 3000", -1),
        ("2 B St, X, VI 3000", "1 A St, X, VI 3000", 1),
        ("1 A St, X, NS 2000", "1 A St, X, VI 3000", -2),
        ("1 A St, Beta, VI 3000", "1 A St, Alpha, VI 3000", 2),
        ("1 A St, Zeta, NS 2000", "1 A St, Alpha, VI 3000", -2),
        ("9 Z St, Alpha, VI 3000", "1 A St, Beta, VI 3000", -2),
        ("A1/1 A St, X, VI 3000", "1 A St, X, VI 3000", 1),
        ("1 A St, X, VI 3000", "A1/1 A St, X, VI 3000", -1),
        ("A1/1 A St, X, VI 3000", "B1/1 A St, X, VI 3000", -1),
        ("a1/1 A St, X, VI 3000", "A1/1 A St, X, VI 3000", 0),
        ("1 a st, x, VI 3000", "1 A St, X, VI 3000", 0),
        ("1 A St, X, VI 3000", "1 A St, X, VI 3999", 0),
        ("1 A St, X, VI 3000", "1 A St, X, VI 3000", 0),
    ],
)
def test_compare_precedence(left, right, expected):
    a, b = _pair(left, right)

    assert compare(a, b) == expected


def test_street_difference_is_not_a_locality_difference():
    a, b = _pair("1 A St, X, VI 3000", "2 B St, X, VI 3000")
    result = compare_addresses(a, b)

    assert result == AddressComparison(Ordering.LESS, differs_at_locality=False)
    assert result.code == -1


def test_comparison_code_encodes_locality():
    assert AddressComparison(Ordering.GREATER, True).code == 2
    assert AddressComparison(Ordering.LESS, True).code == -2
    assert AddressComparison(Ordering.EQUAL).code == 0


_SAMPLES = [
    "1 A St, X, VI 3000",
    "A1/1 A St, X, VI 3000",
    "b2/1 a st, x, VI 3000",
    "2 B St, X, VI 3000",
    "2 b st, x, VI 3001",
    "5 Main Road, Richmond, VI 3121",
    "10 George St, Sydney, NS 2000",
]


@pytest.mark.parametrize(("left", "right"), list(product(_SAMPLES, repeat=2)))
def test_exactly_one_ordering_holds(left, right):
    a, b = _pair(left, right)

    outcomes = [lt(a, b), eq(a, b), gt(a, b)]
    assert outcomes.count(True) == 1
    assert le(a, b) == (lt(a, b) or eq(a, b))
    assert ge(a, b) == (gt(a, b) or eq(a, b))
    assert ne(a, b) != eq(a, b)
    assert compare(a, b) == -compare(b, a)


def test_approx_equal_ignores_street_and_postcode():
    a, b = _pair(
        "1 A St, Springfield, VI 3000", "99 Z Rd, Springfield, VI 3111"
    )

    assert approx_equal(a, b)
    assert not not_approx_equal(a, b)


def test_approx_equal_ignores_case_and_unit():
    a, b = _pair("C4/1 A St, springfield, VI 3000", "7 B St, SPRINGFIELD, VI 3000")

    assert approx_equal(a, b)


@pytest.mark.parametrize(
    ("left", "right"),
    [
        ("1 A St, Springfield, VI 3000", "1 A St, Shelbyville, VI 3000"),
        ("1 A St, Springfield, VI 3000", "1 A St, Springfield, NS 3000"),
    ],
)
def test_approx_equal_requires_same_locality(left, right):
    a, b = _pair(left, right)

    assert not approx_equal(a, b)
    assert not_approx_equal(a, b)


def test_address_hash_is_unsigned_32_bit_and_stable():
    a = parse_address("1 A St, X, VI 3000")
    value = address_hash(a)

    assert 0 <= value < 2**32
    assert address_hash(parse_address("1 A St, X, VI 3000")) == value


def test_address_hash_is_case_sensitive():
    a, b = _pair("1 a st, x, VI 3000", "1 A St, X, VI 3000")

    assert eq(a, b)
    assert address_hash(a) != address_hash(b)


def test_address_operators_follow_compare():
    richmond = parse_address("5 Main Road, Richmond, VI 3121")
    richmond_unit = parse_address("A2/5 Main Road, Richmond, VI 3121")
    high_street = parse_address("3 High Street, Richmond, VI 3121")
    sydney = parse_address("10 George St, Sydney, NS 2000")
    brighton = parse_address("1 Beach Road, Brighton, VI 3186")

    ordered = sorted([richmond_unit, richmond, sydney, high_street, brighton])

    assert ordered == [sydney, brighton, high_street, richmond, richmond_unit]
    assert richmond < richmond_unit
    assert richmond_unit >= richmond
    assert richmond != sydney


def test_address_hash_dunder_agrees_with_equality():
    lower = parse_address("1 a st, x, VI 3000")
    upper = parse_address("1 A St, X, VI 3000")

    assert lower == upper
    assert hash(lower) == hash(upper)
    assert len({lower, upper}) == 1


def test_address_hash_is_crc32_of_text():
    text = "A12/12 Smith Street, Springfield, VI 3000"

    assert address_hash(parse_address(text)) == zlib.crc32(text.encode("utf-8"))
