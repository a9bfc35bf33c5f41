from __future__ import annotations
import math
import struct
from typing import Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, model_validator

from .common import Endian, NumberKind
from ..exceptions import UnsupportedRepresentationError


class GenericNumber(BaseModel):
    """
    A decoded value plus the kind and endianness it was read with.

    The kind is what lets a formatter show an I8 as an 8-bit quantity even
    though ``value`` is a plain Python int. Comparisons look at ``value`` only.
    """

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    kind: NumberKind
    endian: Endian = Endian.BIG
    value: Union[StrictInt, StrictFloat]

    @model_validator(mode="after")
    def check_value_fits_kind(self) -> "GenericNumber":
        kind, v = self.kind, self.value
        if kind.is_float:
            if not isinstance(v, float):
                raise ValueError(f"{kind.value} needs a float value, got {type(v).__name__}")
            if kind is NumberKind.F32 and math.isfinite(v) and not _fits_f32(v):
                raise ValueError(f"{v!r} is not representable as f32")
        else:
            if not isinstance(v, int):
                raise ValueError(f"{kind.value} needs an int value, got {type(v).__name__}")
            if not (kind.min_value <= v <= kind.max_value):
                raise ValueError(f"{v} out of range for {kind.value} [{kind.min_value}, {kind.max_value}]")
        return self

    # Constructors

    @classmethod
    def new(cls, kind: NumberKind | str, value: int | float, endian: Endian | str = Endian.BIG) -> "GenericNumber":
        return cls(kind=NumberKind(kind), endian=Endian(endian), value=value)

    @classmethod
    def from_int(cls, value: int, kind: NumberKind | str = NumberKind.I64, endian: Endian | str = Endian.BIG) -> "GenericNumber":
        return cls.new(kind, int(value), endian)

    @classmethod
    def from_float(cls, value: float, kind: NumberKind | str = NumberKind.F64, endian: Endian | str = Endian.BIG) -> "GenericNumber":
        return cls.new(kind, float(value), endian)

    # Provenance

    @property
    def size(self) -> int:
        return self.kind.size

    @property
    def bits(self) -> int:
        return self.kind.bits

    @property
    def is_signed(self) -> bool:
        return self.kind.is_signed

    @property
    def is_float(self) -> bool:
        return self.kind.is_float

    @property
    def is_integer(self) -> bool:
        return self.kind.is_integer

    # Views

    def as_int(self) -> int:
        if self.is_float:
            raise UnsupportedRepresentationError("integer", self.kind.value)
        return self.value

    def as_float(self) -> float:
        return float(self.value)

    def as_u64(self) -> int:
        if self.is_float or self.is_signed or self.bits > 64:
            raise UnsupportedRepresentationError("u64", self.kind.value)
        return self.value

    def as_i64(self) -> int:
        if self.is_float or not self.is_signed or self.bits > 64:
            raise UnsupportedRepresentationError("i64", self.kind.value)
        return self.value

    def bit_pattern(self) -> int:
        """Unsigned two's-complement bits of the value at its own width."""
        return self.as_int() & ((1 << self.bits) - 1)

    def to_bytes(self, endian: Endian | str | None = None) -> bytes:
        from ..binary.codecs.number_codec import encode_number
        return encode_number(self.value, self.kind, Endian(endian) if endian is not None else self.endian)

    # Value semantics

    def _other_value(self, other):
        if isinstance(other, GenericNumber):
            return other.value
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return other
        return NotImplemented

    def __eq__(self, other) -> bool:
        o = self._other_value(other)
        return o if o is NotImplemented else self.value == o

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other) -> bool:
        o = self._other_value(other)
        return o if o is NotImplemented else self.value < o

    def __le__(self, other) -> bool:
        o = self._other_value(other)
        return o if o is NotImplemented else self.value <= o

    def __gt__(self, other) -> bool:
        o = self._other_value(other)
        return o if o is NotImplemented else self.value > o

    def __ge__(self, other) -> bool:
        o = self._other_value(other)
        return o if o is NotImplemented else self.value >= o


def _fits_f32(v: float) -> bool:
    try:
        return struct.unpack("<f", struct.pack("<f", v))[0] == v
    except OverflowError:
        return False
