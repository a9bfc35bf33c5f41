from __future__ import annotations
from typing import Annotated, Any, Union

from pydantic import Field, TypeAdapter

from .binary_formatter import BinaryFormatter
from .decimal_formatter import DecimalFormatter, SignDisplay
from .default_formatter import DefaultFormatter
from .hex_formatter import HexFormatter
from .octal_formatter import OctalFormatter
from .scientific_formatter import ExponentSign, ScientificFormatter

GenericFormatter = Annotated[
    Union[
        HexFormatter,
        OctalFormatter,
        BinaryFormatter,
        DecimalFormatter,
        ScientificFormatter,
        DefaultFormatter,
    ],
    Field(discriminator="style"),
]

FORMATTER_ADAPTER: TypeAdapter[GenericFormatter] = TypeAdapter(GenericFormatter)

PRESETS = {
    "hex": HexFormatter,
    "octal": OctalFormatter,
    "binary": BinaryFormatter,
    "decimal": DecimalFormatter,
    "scientific": ScientificFormatter,
    "default": DefaultFormatter,
}


def pretty_formatter(style: str) -> GenericFormatter:
    """The ``pretty()`` preset for a style name (``hex``, ``octal``, ...)."""
    try:
        return PRESETS[style].pretty()
    except KeyError:
        raise ValueError(f"unknown formatter style {style!r}; expected one of {', '.join(PRESETS)}") from None


def formatter_to_dict(formatter: GenericFormatter) -> dict[str, Any]:
    return FORMATTER_ADAPTER.dump_python(formatter, mode="json")


def formatter_from_dict(data: dict[str, Any]) -> GenericFormatter:
    return FORMATTER_ADAPTER.validate_python(data)


def formatter_to_json(formatter: GenericFormatter) -> str:
    return FORMATTER_ADAPTER.dump_json(formatter).decode("utf-8")


def formatter_from_json(data: str | bytes) -> GenericFormatter:
    return FORMATTER_ADAPTER.validate_json(data)


__all__ = [
    "BinaryFormatter",
    "DecimalFormatter",
    "DefaultFormatter",
    "ExponentSign",
    "FORMATTER_ADAPTER",
    "GenericFormatter",
    "HexFormatter",
    "OctalFormatter",
    "PRESETS",
    "ScientificFormatter",
    "SignDisplay",
    "formatter_from_dict",
    "formatter_from_json",
    "formatter_to_dict",
    "formatter_to_json",
    "pretty_formatter",
]
