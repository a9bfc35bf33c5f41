from __future__ import annotations
import re

from pydantic import BaseModel, ConfigDict

from .common import Endian, NumberKind
from .number import GenericNumber
from ..binary.context import Context
from ..binary.codecs.number_codec import decode_number

_READER_SPEC = re.compile(r"^(?P<kind>[uif](?:8|16|32|64|128))(?P<endian>be|le)?$")


class GenericReader(BaseModel):
    """How to pull one number out of a buffer: its kind and byte order.

    Readers hold no state, so the same instance can be reused for any number
    of reads against any buffer.
    """

    model_config = ConfigDict(frozen=True)

    kind: NumberKind
    endian: Endian = Endian.BIG

    @classmethod
    def of(cls, kind: NumberKind | str, endian: Endian | str = Endian.BIG) -> "GenericReader":
        return cls(kind=NumberKind(kind), endian=Endian(endian))

    @classmethod
    def parse(cls, text: str) -> "GenericReader":
        """Parse a compact name such as ``u32``, ``i16le`` or ``f64be`` (big-endian by default)."""
        m = _READER_SPEC.match(text.strip().lower())
        if m is None:
            raise ValueError(f"unknown number type {text!r}")
        try:
            kind = NumberKind(m["kind"])
        except ValueError:
            raise ValueError(f"unknown number type {text!r}") from None
        endian = Endian.LITTLE if m["endian"] == "le" else Endian.BIG
        return cls(kind=kind, endian=endian)

    @property
    def size(self) -> int:
        return self.kind.size

    def read(self, context: Context) -> GenericNumber:
        """Decode one number at the context's offset; raises OutOfBoundsError on a short read."""
        raw = context.read_bytes(self.kind.size)
        value = decode_number(raw, self.kind, self.endian)
        return GenericNumber(kind=self.kind, endian=self.endian, value=value)

    def __str__(self) -> str:
        # byte order is meaningless for one byte; only a non-default one is spelled out
        if self.kind.size == 1 and self.endian is Endian.BIG:
            return self.kind.value
        return self.kind.value + ("be" if self.endian is Endian.BIG else "le")
