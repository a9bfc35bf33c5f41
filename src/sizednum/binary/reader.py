from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, Union

from .context import Context
from ..exceptions import OutOfBoundsError
from ..models.common import Endian, NumberKind
from ..models.number import GenericNumber
from ..models.reader import GenericReader

BytesLike = Union[str, Path, bytes, bytearray, memoryview]


# -----------------------------
# Helpers
# -----------------------------

def load_bytes(inp: BytesLike) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    p = Path(str(inp))
    return p.read_bytes()


# -----------------------------
# Single reads
# -----------------------------

def read_number(data: BytesLike, reader: GenericReader, offset: int = 0) -> GenericNumber:
    """Decode one number at ``offset``."""
    return reader.read(Context.new_at(load_bytes(data), offset))


# -----------------------------
# Sequential reads
# -----------------------------

def iter_numbers(
    data: BytesLike,
    reader: GenericReader,
    *,
    offset: int = 0,
    count: Optional[int] = None,
    stride: Optional[int] = None,
) -> Iterator[tuple[int, GenericNumber]]:
    """
    Stream ``(offset, number)`` pairs, stepping ``stride`` bytes (default: the reader's size).
      - count=None: read until fewer than ``reader.size`` bytes are left.
      - count=N: read exactly N values; raises OutOfBoundsError if the buffer runs out.
    """
    step = reader.size if stride is None else stride
    if step <= 0:
        raise ValueError(f"stride must be positive, got {step}")
    if count is not None and count < 0:
        raise ValueError(f"count must not be negative, got {count}")

    ctx = Context.new_at(load_bytes(data), offset)
    emitted = 0
    while count is None or emitted < count:
        if count is None and ctx.remaining() < reader.size:
            return
        yield ctx.offset, reader.read(ctx)
        emitted += 1
        nxt = ctx.offset + step
        if nxt > len(ctx):
            if count is None or emitted >= count:
                return
            raise OutOfBoundsError(nxt, reader.size, 0)
        ctx = ctx.at(nxt)


# -----------------------------
# Inspection
# -----------------------------

def inspect_offset(data: BytesLike, offset: int = 0) -> dict[str, GenericNumber]:
    """
    Every reading that fits at ``offset``, keyed by reader name (``u8``, ``u16le``, ``f64be``, ...).
    Kinds wider than the bytes left are left out rather than failing.
    """
    ctx = Context.new_at(load_bytes(data), offset)
    out: dict[str, GenericNumber] = {}
    for kind in NumberKind:
        if kind.size > ctx.remaining():
            continue
        orders = (Endian.BIG,) if kind.size == 1 else (Endian.LITTLE, Endian.BIG)
        for endian in orders:
            reader = GenericReader(kind=kind, endian=endian)
            out[str(reader)] = reader.read(ctx)
    return out
