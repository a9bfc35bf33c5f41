from __future__ import annotations
from typing import Literal

import numpy as np
from pydantic import BaseModel, ConfigDict

from ..models.common import NumberKind
from ..models.number import GenericNumber


class DefaultFormatter(BaseModel):
    """Decimal for integers, the shortest natural text for floats (``3.14``, ``1e+20``)."""

    model_config = ConfigDict(frozen=True)

    style: Literal["default"] = "default"

    @classmethod
    def new(cls) -> "DefaultFormatter":
        return cls()

    @classmethod
    def pretty(cls) -> "DefaultFormatter":
        return cls()

    def render(self, number: GenericNumber) -> str:
        if number.is_integer:
            return str(number.value)
        if number.kind is NumberKind.F32:
            return str(np.float32(number.value))
        return repr(number.value)
