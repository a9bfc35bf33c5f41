from __future__ import annotations
from typing import ClassVar, Literal

from .common import IntegerBaseFormatter


class BinaryFormatter(IntegerBaseFormatter):
    style: Literal["binary"] = "binary"

    representation: ClassVar[str] = "binary"
    digit_spec: ClassVar[str] = "b"
    digit_prefix: ClassVar[str] = "0b"
    bits_per_digit: ClassVar[int] = 1

    @classmethod
    def pretty(cls) -> "BinaryFormatter":
        return cls.new(prefix=True, padded=True)
