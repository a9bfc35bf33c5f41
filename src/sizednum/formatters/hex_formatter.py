from __future__ import annotations
from typing import ClassVar, Literal

from .common import IntegerBaseFormatter


class HexFormatter(IntegerBaseFormatter):
    """
    Render an integer as hexadecimal.

    Signed values show their two's-complement bits, so an I8 of -1 is ``0xff``.
    Padding goes to the full width of the number (two digits per byte).
    """

    style: Literal["hex"] = "hex"

    representation: ClassVar[str] = "hex"
    digit_spec: ClassVar[str] = "x"
    digit_prefix: ClassVar[str] = "0x"
    bits_per_digit: ClassVar[int] = 4

    @classmethod
    def pretty(cls) -> "HexFormatter":
        return cls.new(prefix=True, padded=True)
