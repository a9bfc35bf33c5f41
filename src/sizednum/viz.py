from __future__ import annotations
from typing import Iterable

from .models.number import GenericNumber


def plot_values(values: Iterable[tuple[int, GenericNumber]], title: str | None = None):
    """Minimal line plot of decoded values against their offsets, for sanity-checking."""
    import matplotlib.pyplot as plt
    offsets, ys = [], []
    for off, num in values:
        offsets.append(off)
        ys.append(num.as_float())
    plt.figure()
    plt.plot(offsets, ys, marker=".", linewidth=0.8)
    plt.xlabel("Offset (bytes)")
    plt.ylabel("Value")
    plt.title(title or "Decoded values")
    plt.show()
