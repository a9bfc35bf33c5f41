from __future__ import annotations
from typing import Iterable

from .codecs.number_codec import encode_number
from ..models.common import Endian
from ..models.number import GenericNumber


def write_number(number: GenericNumber, endian: Endian | str | None = None) -> bytes:
    """Encode a number at its own width; endianness defaults to the one it was read with."""
    order = Endian(endian) if endian is not None else number.endian
    return encode_number(number.value, number.kind, order)


def write_numbers(numbers: Iterable[GenericNumber]) -> bytes:
    out = bytearray()
    for n in numbers:
        out += write_number(n)
    return bytes(out)
