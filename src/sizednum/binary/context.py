from __future__ import annotations

from ..exceptions import OutOfBoundsError


class Context:
    """Read-only view over a byte buffer at a fixed offset.

    A Context never moves: ``at`` and ``advance`` hand back a new view over the
    same buffer, so one Context can be shared freely between readers.
    """

    __slots__ = ("_buf", "_pos")

    def __init__(self, data: bytes | bytearray | memoryview, offset: int = 0):
        buf = memoryview(data)
        if not (0 <= offset <= len(buf)):
            raise OutOfBoundsError(offset, 0, max(len(buf) - offset, 0))
        object.__setattr__(self, "_buf", buf)
        object.__setattr__(self, "_pos", offset)

    def __setattr__(self, name, value):
        raise AttributeError("Context is immutable")

    @classmethod
    def new(cls, data: bytes | bytearray | memoryview) -> "Context":
        return cls(data, 0)

    @classmethod
    def new_at(cls, data: bytes | bytearray | memoryview, offset: int) -> "Context":
        return cls(data, offset)

    @property
    def offset(self) -> int: return self._pos

    def __len__(self) -> int: return len(self._buf)

    def remaining(self) -> int: return len(self._buf) - self._pos

    def at(self, offset: int) -> "Context":
        return Context(self._buf, offset)

    def advance(self, n: int) -> "Context":
        return Context(self._buf, self._pos + n)

    def read_bytes(self, n: int) -> bytes:
        """Return the ``n`` bytes starting at the offset; the view doesn't advance."""
        if n < 0: raise ValueError(f"negative read length {n}")
        end = self._pos + n
        if end > len(self._buf):
            raise OutOfBoundsError(self._pos, n, self.remaining())
        return self._buf[self._pos:end].tobytes()

    def __repr__(self) -> str:
        return f"Context(offset={self._pos}, length={len(self._buf)})"
