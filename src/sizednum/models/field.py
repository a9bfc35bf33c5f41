from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

from .number import GenericNumber
from .reader import GenericReader
from ..binary.context import Context
from ..formatters.default_formatter import DefaultFormatter
from ..formatters.generic import GenericFormatter


class NumberField(BaseModel):
    """A reader paired with the formatter used to show what it reads."""

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    reader: GenericReader
    formatter: GenericFormatter = Field(default_factory=DefaultFormatter)

    @property
    def size(self) -> int:
        return self.reader.size

    def read(self, context: Context) -> GenericNumber:
        return self.reader.read(context)

    def render(self, context: Context) -> str:
        return self.formatter.render(self.reader.read(context))
