import math
import struct

import pytest
from pydantic import ValidationError

from sizednum.exceptions import UnsupportedRepresentationError
from sizednum.models.common import Endian, NumberKind
from sizednum.models.number import GenericNumber


def test_provenance_queries():
    n = GenericNumber.new("i16", -2, "little")
    assert n.size == 2 and n.bits == 16
    assert n.is_signed and not n.is_float and n.is_integer
    assert n.endian is Endian.LITTLE
    f = GenericNumber.from_float(1.5, "f32")
    assert f.size == 4 and f.is_float and f.is_signed


@pytest.mark.parametrize(
    "kind, value",
    [
        ("u8", 256),
        ("u8", -1),
        ("i8", 128),
        ("u128", 1 << 128),
        ("i128", -(1 << 127) - 1),
        ("u32", 1.0),
        ("f64", 1),
        ("u8", True),
        ("f32", 0.1),      # not exactly representable in binary32
        ("f32", 1e300),
    ],
)
def test_value_must_agree_with_kind(kind, value):
    with pytest.raises(ValidationError):
        GenericNumber.new(kind, value)


def test_f32_accepts_specials():
    assert math.isnan(GenericNumber.new("f32", float("nan")).value)
    assert GenericNumber.new("f32", float("-inf")).value == float("-inf")


def test_extreme_integers():
    assert GenericNumber.new("u128", (1 << 128) - 1).value == (1 << 128) - 1
    assert GenericNumber.new("i128", -(1 << 127)).value == -(1 << 127)


def test_equality_ignores_provenance():
    a = GenericNumber.new("u8", 5)
    b = GenericNumber.new("i64", 5, "little")
    c = GenericNumber.new("f64", 5.0)
    assert a == b == c
    assert a == 5
    assert hash(a) == hash(b) == hash(c)
    assert GenericNumber.new("u8", 5) != GenericNumber.new("u8", 6)
    assert len({a, b, c}) == 1


def test_ordering():
    nums = [GenericNumber.new("u32", 7), GenericNumber.new("i8", -3), GenericNumber.new("f64", 2.5)]
    assert [n.value for n in sorted(nums)] == [-3, 2.5, 7]
    assert GenericNumber.new("i8", -3) < 0
    assert GenericNumber.new("u8", 3) >= GenericNumber.new("i16", 3)


def test_nan_is_not_equal_to_itself():
    n = GenericNumber.new("f64", float("nan"))
    assert n != n


def test_as_int_rejects_floats():
    assert GenericNumber.new("i32", -9).as_int() == -9
    with pytest.raises(UnsupportedRepresentationError):
        GenericNumber.new("f64", 1.0).as_int()


def test_as_float():
    assert GenericNumber.new("u16", 513).as_float() == 513.0


def test_as_u64_and_as_i64():
    assert GenericNumber.new("u64", (1 << 64) - 1).as_u64() == (1 << 64) - 1
    assert GenericNumber.new("i32", -5).as_i64() == -5
    for kind, value, method in [
        ("u128", 1, "as_u64"),
        ("i8", 1, "as_u64"),
        ("u8", 1, "as_i64"),
        ("i128", 1, "as_i64"),
        ("f32", 1.0, "as_u64"),
    ]:
        with pytest.raises(UnsupportedRepresentationError):
            getattr(GenericNumber.new(kind, value), method)()


def test_bit_pattern_is_twos_complement():
    assert GenericNumber.new("i8", -1).bit_pattern() == 0xFF
    assert GenericNumber.new("i16", -32768).bit_pattern() == 0x8000
    assert GenericNumber.new("i128", -1).bit_pattern() == (1 << 128) - 1
    assert GenericNumber.new("u32", 0x1234).bit_pattern() == 0x1234


def test_to_bytes_uses_own_endian():
    n = GenericNumber.new("u32", 0x01234567, "little")
    assert n.to_bytes() == b"\x67\x45\x23\x01"
    assert n.to_bytes("big") == b"\x01\x23\x45\x67"
    f = GenericNumber.new(NumberKind.F32, struct.unpack(">f", b"\x40\x49\x0f\xdb")[0])
    assert f.to_bytes() == b"\x40\x49\x0f\xdb"
