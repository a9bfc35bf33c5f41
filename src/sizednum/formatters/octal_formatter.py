from __future__ import annotations
from typing import ClassVar, Literal

from .common import IntegerBaseFormatter


class OctalFormatter(IntegerBaseFormatter):
    """Render an integer as octal (``0o40``). A padded U32 has 11 digits."""

    style: Literal["octal"] = "octal"

    representation: ClassVar[str] = "octal"
    digit_spec: ClassVar[str] = "o"
    digit_prefix: ClassVar[str] = "0o"
    bits_per_digit: ClassVar[int] = 3

    @classmethod
    def pretty(cls) -> "OctalFormatter":
        # octal widths don't line up with bytes, so the preset stays unpadded
        return cls.new(prefix=True, padded=False)
