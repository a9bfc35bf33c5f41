from __future__ import annotations
from enum import Enum


class Endian(str, Enum):
    BIG = "big"
    LITTLE = "little"

    @property
    def struct_prefix(self) -> str:
        return ">" if self is Endian.BIG else "<"


class NumberKind(str, Enum):
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    F32 = "f32"
    F64 = "f64"

    @property
    def size(self) -> int:
        """Width in bytes."""
        return int(self.value[1:]) // 8

    @property
    def bits(self) -> int:
        return int(self.value[1:])

    @property
    def is_signed(self) -> bool:
        # IEEE-754 floats carry a sign bit too
        return self.value[0] in ("i", "f")

    @property
    def is_float(self) -> bool:
        return self.value[0] == "f"

    @property
    def is_integer(self) -> bool:
        return not self.is_float

    @property
    def min_value(self) -> int:
        if self.is_float:
            raise TypeError(f"{self.value} has no integer range")
        return -(1 << (self.bits - 1)) if self.is_signed else 0

    @property
    def max_value(self) -> int:
        if self.is_float:
            raise TypeError(f"{self.value} has no integer range")
        return (1 << (self.bits - 1)) - 1 if self.is_signed else (1 << self.bits) - 1
