from __future__ import annotations
from decimal import Decimal
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .common import shortest_digits, special_float, trim_zeros
from ..models.number import GenericNumber


class ExponentSign(str, Enum):
    NEGATIVE = "negative"   # 1e7, 1e-7
    ALWAYS = "always"       # 1e+7, 1e-7


class ScientificFormatter(BaseModel):
    """
    Render a number in exponent notation: ``1.9088743e7``, ``1e2``, ``-1e0``.

    With no ``mantissa_precision`` every significant digit is kept (integers
    exactly, floats with their shortest round-trip digits). With a precision
    the exact stored value is rounded half-even to that many fractional digits.
    """

    model_config = ConfigDict(frozen=True)

    style: Literal["scientific"] = "scientific"
    mantissa_precision: int | None = Field(default=None, ge=0)
    uppercase: bool = False
    exponent_sign: ExponentSign = ExponentSign.NEGATIVE

    @classmethod
    def new(
        cls,
        uppercase: bool = False,
        mantissa_precision: int | None = None,
        exponent_sign: ExponentSign | str = ExponentSign.NEGATIVE,
    ) -> "ScientificFormatter":
        return cls(
            uppercase=uppercase,
            mantissa_precision=mantissa_precision,
            exponent_sign=ExponentSign(exponent_sign),
        )

    @classmethod
    def pretty(cls) -> "ScientificFormatter":
        return cls.new()

    def render(self, number: GenericNumber) -> str:
        if number.is_float:
            special = special_float(number.value)
            if special is not None:
                return special
        if self.mantissa_precision is None:
            d, spec = trim_zeros(shortest_digits(number)), "e"
        else:
            # round the exact stored value, not its shortest digits
            d, spec = Decimal(number.value), f".{self.mantissa_precision}e"
        # Decimal formats as "1.9088743e+7"; rebuild the exponent our way
        mantissa, _, exponent = format(d, spec).partition("e")
        exp = int(exponent)
        marker = "E" if self.uppercase else "e"
        if exp < 0:
            exp_text = f"-{-exp}"
        elif self.exponent_sign is ExponentSign.ALWAYS:
            exp_text = f"+{exp}"
        else:
            exp_text = str(exp)
        return f"{mantissa}{marker}{exp_text}"
