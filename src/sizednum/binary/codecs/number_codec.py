from __future__ import annotations
import math
import struct

from ...models.common import Endian, NumberKind

_STRUCT_CODES = {
    NumberKind.U8: "B", NumberKind.I8: "b",
    NumberKind.U16: "H", NumberKind.I16: "h",
    NumberKind.U32: "I", NumberKind.I32: "i",
    NumberKind.U64: "Q", NumberKind.I64: "q",
    NumberKind.F32: "f", NumberKind.F64: "d",
}

# binary32 -> binary64 NaN: payload moves up by the difference in fraction widths
_F32_TO_F64_SHIFT = 52 - 23
_F32_QUIET_BIT = 1 << 22


def _f32_nan_from_bits(bits: int) -> float:
    """Widen a binary32 NaN by hand; a C float->double cast would set the quiet bit."""
    sign = bits >> 31
    fraction = bits & 0x7FFFFF
    wide = (sign << 63) | (0x7FF << 52) | (fraction << _F32_TO_F64_SHIFT)
    return struct.unpack("<d", struct.pack("<Q", wide))[0]


def _f32_nan_to_bits(value: float) -> int:
    wide = struct.unpack("<Q", struct.pack("<d", value))[0]
    sign = wide >> 63
    fraction = (wide >> _F32_TO_F64_SHIFT) & 0x7FFFFF
    if fraction == 0:
        # payload lived only in the low bits binary32 can't hold
        fraction = _F32_QUIET_BIT
    return (sign << 31) | (0xFF << 23) | fraction


def decode_number(raw: bytes, kind: NumberKind, endian: Endian) -> int | float:
    """
    Decode exactly ``kind.size`` bytes.
    Integers are two's complement when signed; floats use the IEEE-754 layout.
    F32 NaNs keep their sign, quiet bit and payload.
    """
    if len(raw) != kind.size:
        raise ValueError(f"{kind.value} needs {kind.size} bytes, got {len(raw)}")
    code = _STRUCT_CODES.get(kind)
    if code is None:
        # 128-bit: no struct code
        return int.from_bytes(raw, endian.value, signed=kind.is_signed)
    if kind is NumberKind.F32:
        bits = struct.unpack(endian.struct_prefix + "I", raw)[0]
        if (bits >> 23) & 0xFF == 0xFF and bits & 0x7FFFFF:
            return _f32_nan_from_bits(bits)
    return struct.unpack(endian.struct_prefix + code, raw)[0]


def encode_number(value: int | float, kind: NumberKind, endian: Endian) -> bytes:
    code = _STRUCT_CODES.get(kind)
    try:
        if code is None:
            return int(value).to_bytes(kind.size, endian.value, signed=kind.is_signed)
        if kind is NumberKind.F32 and isinstance(value, float) and math.isnan(value):
            return struct.pack(endian.struct_prefix + "I", _f32_nan_to_bits(value))
        return struct.pack(endian.struct_prefix + code, value)
    except (struct.error, OverflowError) as e:
        raise ValueError(f"cannot encode {value!r} as {kind.value}: {e}") from e
