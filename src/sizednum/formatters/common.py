from __future__ import annotations
import math
from decimal import Decimal
from typing import ClassVar

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.common import NumberKind
from ..models.number import GenericNumber
from ..exceptions import UnsupportedRepresentationError


def full_width(bits: int, bits_per_digit: int) -> int:
    """Digits needed to show ``bits`` bits in a base of ``2**bits_per_digit``."""
    return -(-bits // bits_per_digit)


def group_digits(digits: str, size: int, separator: str) -> str:
    """Insert ``separator`` every ``size`` digits, counting from the right."""
    head = len(digits) % size or size
    parts = [digits[:head]]
    parts += [digits[i:i + size] for i in range(head, len(digits), size)]
    return separator.join(parts)


def shortest_digits(number: GenericNumber) -> Decimal:
    """
    Exact Decimal for integers; shortest round-trip digits for floats.
    F32 values get binary32 digits (314.159, not 314.15899658203125).
    """
    if number.is_integer:
        return Decimal(number.value)
    v = number.value
    if not math.isfinite(v):
        return Decimal(v)
    if number.kind is NumberKind.F32:
        return Decimal(np.format_float_scientific(np.float32(v), unique=True, trim="-"))
    return Decimal(repr(v))


def trim_zeros(d: Decimal) -> Decimal:
    """Drop trailing zero digits without touching the value (no context rounding)."""
    sign, digits, exp = d.as_tuple()
    digits = list(digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exp += 1
    if digits == [0]:
        exp = 0
    return Decimal((sign, tuple(digits), exp))


def special_float(v: float) -> str | None:
    """Text for NaN and the infinities, None for finite values."""
    if math.isnan(v):
        return "nan"
    if math.isinf(v):
        return "inf" if v > 0 else "-inf"
    return None


def check_separator(v: str | None) -> str | None:
    """Separators are one printable ASCII character that can't be mistaken for a digit."""
    if v is None:
        return v
    if len(v) != 1 or not v.isascii() or not v.isprintable() or v.isalnum():
        raise ValueError(f"separator must be one ASCII punctuation or space character, got {v!r}")
    return v


class IntegerBaseFormatter(BaseModel):
    """Shared options and rendering for the power-of-two bases (hex, octal, binary)."""

    model_config = ConfigDict(frozen=True)

    uppercase: bool = False
    prefix: bool = True
    zero_pad_to_full_width: bool = True
    group_separator: str | None = None
    group_size: int = Field(default=4, ge=1)

    # set per base
    representation: ClassVar[str] = "integer"
    digit_spec: ClassVar[str] = "d"
    digit_prefix: ClassVar[str] = ""
    bits_per_digit: ClassVar[int] = 1

    @field_validator("group_separator")
    @classmethod
    def validate_group_separator(cls, v: str | None) -> str | None:
        return check_separator(v)

    @classmethod
    def new(
        cls,
        prefix: bool = True,
        padded: bool = True,
        *,
        uppercase: bool = False,
        group_separator: str | None = None,
        group_size: int = 4,
    ):
        return cls(
            uppercase=uppercase,
            prefix=prefix,
            zero_pad_to_full_width=padded,
            group_separator=group_separator,
            group_size=group_size,
        )

    def render(self, number: GenericNumber) -> str:
        if number.is_float:
            raise UnsupportedRepresentationError(self.representation, number.kind.value)
        s = format(number.bit_pattern(), self.digit_spec)
        if self.uppercase:
            s = s.upper()
        if self.zero_pad_to_full_width:
            s = s.rjust(full_width(number.bits, self.bits_per_digit), "0")
        if self.group_separator is not None:
            s = group_digits(s, self.group_size, self.group_separator)
        if self.prefix:
            s = self.digit_prefix + s
        return s
