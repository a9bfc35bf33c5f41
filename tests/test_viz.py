import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from sizednum.binary.reader import iter_numbers
from sizednum.models.reader import GenericReader
from sizednum.viz import plot_values


@pytest.fixture(autouse=True)
def no_window(monkeypatch):
    monkeypatch.setattr(plt, "show", lambda *a, **k: None)
    yield
    plt.close("all")


def test_plot_values_offsets_and_values():
    data = bytes.fromhex("0001 ffff 0010")
    plot_values(iter_numbers(data, GenericReader.parse("i16"), offset=0), title="i16 run")
    ax = plt.gca()
    (line,) = ax.get_lines()
    assert list(line.get_xdata()) == [0, 2, 4]
    assert list(line.get_ydata()) == [1.0, -1.0, 16.0]
    assert ax.get_title() == "i16 run"
    assert ax.get_xlabel() == "Offset (bytes)"


def test_plot_values_default_title():
    plot_values([])
    assert plt.gca().get_title() == "Decoded values"
