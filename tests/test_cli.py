import json

import pytest

from sizednum.cli import main
from sizednum.formatters.hex_formatter import HexFormatter
from sizednum.models.field import NumberField
from sizednum.models.reader import GenericReader


@pytest.fixture
def blob(tmp_path, monkeypatch):
    for var in ("SIZEDNUM_TYPE", "SIZEDNUM_MAX_VALUES", "SIZEDNUM_STYLE"):
        monkeypatch.delenv(var, raising=False)
    p = tmp_path / "blob.bin"
    p.write_bytes(b"\x01\x23\x45\x67")
    return p


def test_read_hex(blob, capsys):
    assert main(["read", str(blob), "-t", "u32", "-f", "hex"]) == 0
    assert capsys.readouterr().out == "0x01234567\n"


def test_read_defaults_to_config(blob, capsys, monkeypatch):
    monkeypatch.setenv("SIZEDNUM_TYPE", "u32le")
    assert main(["read", str(blob)]) == 0
    assert capsys.readouterr().out == "1732584193\n"


def test_read_json(blob, capsys):
    assert main(["read", str(blob), "-t", "i16", "-o", "0x2", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == {"kind": "i16", "endian": "big", "value": 0x4567}


def test_read_out_of_bounds(blob):
    assert main(["read", str(blob), "-t", "u32", "-o", "1"]) == 1


def test_read_bad_type(blob):
    assert main(["read", str(blob), "-t", "u24"]) == 1


def test_read_missing_file(tmp_path):
    assert main(["read", str(tmp_path / "nope.bin")]) == 1


def test_dump(blob, capsys):
    assert main(["dump", str(blob), "-t", "u16", "-f", "hex"]) == 0
    assert capsys.readouterr().out.splitlines() == ["0x00000000\t0x0123", "0x00000002\t0x4567"]


def test_dump_count_and_stride(blob, capsys):
    assert main(["dump", str(blob), "-n", "2", "--stride", "2", "-f", "binary"]) == 0
    assert capsys.readouterr().out.splitlines() == ["0x00000000\t0b00000001", "0x00000002\t0b01000101"]


def test_dump_with_field_file(blob, tmp_path, capsys):
    field = NumberField(reader=GenericReader.parse("u16le"), formatter=HexFormatter.new(uppercase=True))
    path = tmp_path / "field.json"
    path.write_text(field.model_dump_json(), encoding="utf-8")
    assert main(["dump", str(blob), "--field", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["0x00000000\t0x2301", "0x00000002\t0x6745"]


def test_no_command(capsys):
    assert main([]) == 2


def test_inspect(blob, capsys):
    assert main(["inspect", str(blob), "-f", "hex"]) == 0
    rows = dict(line.split() for line in capsys.readouterr().out.splitlines())
    assert rows["u8"] == "0x01"
    assert rows["u16be"] == "0x0123"
    assert rows["u32le"] == "0x67452301"
    assert rows["f32be"] == "-"
    assert "u64be" not in rows


def test_plot_uses_viz(blob, monkeypatch):
    seen = {}
    monkeypatch.setattr("sizednum.viz.plot_values", lambda values, title=None: seen.update(values=values, title=title))
    assert main(["plot", str(blob), "-t", "u8", "--stride", "3"]) == 0
    assert [(off, n.value) for off, n in seen["values"]] == [(0, 0x01), (3, 0x67)]
    assert seen["title"] == "blob.bin (u8)"
