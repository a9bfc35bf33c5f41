from __future__ import annotations
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from .common import check_separator, group_digits, shortest_digits, special_float, trim_zeros
from ..models.number import GenericNumber


class SignDisplay(str, Enum):
    NEGATIVE = "negative"   # "-5", "5"
    ALWAYS = "always"       # "-5", "+5"


class DecimalFormatter(BaseModel):
    """
    Render a number in base 10.

    Whether a value shows as signed depends on how it was read: the bytes
    ``ff`` are ``255`` as U8 and ``-1`` as I8. Floats use their shortest
    round-trip digits written out positionally, without an exponent.
    """

    model_config = ConfigDict(frozen=True)

    style: Literal["decimal"] = "decimal"
    thousands_separator: str | None = None
    sign: SignDisplay = SignDisplay.NEGATIVE

    @field_validator("thousands_separator")
    @classmethod
    def validate_thousands_separator(cls, v: str | None) -> str | None:
        return check_separator(v)

    @classmethod
    def new(cls, thousands_separator: str | None = None, sign: SignDisplay | str = SignDisplay.NEGATIVE) -> "DecimalFormatter":
        return cls(thousands_separator=thousands_separator, sign=SignDisplay(sign))

    @classmethod
    def pretty(cls) -> "DecimalFormatter":
        return cls.new()

    def render(self, number: GenericNumber) -> str:
        if number.is_float:
            special = special_float(number.value)
            if special is not None:
                if self.sign is SignDisplay.ALWAYS and special == "inf":
                    return "+inf"
                return special
        d = trim_zeros(shortest_digits(number))
        negative = d.is_signed()
        text = format(d.copy_abs(), "f")
        whole, dot, frac = text.partition(".")
        if self.thousands_separator is not None:
            whole = group_digits(whole, 3, self.thousands_separator)
        text = whole + dot + frac
        if negative:
            return "-" + text
        if self.sign is SignDisplay.ALWAYS:
            return "+" + text
        return text
