from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.config import settings


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CurrencyConfig(CamelModel):
    ratio: float = Field(1.0, description="Exchange rate against Euro. Display metadata only, never applied.")
    currency_name: str = Field(
        default_factory=lambda: settings.DEFAULT_CURRENCY,
        description="Currency code shown next to amounts, e.g. USD",
    )


class ProfitStatus(str, Enum):
    PROFIT = "profit"
    LOSS = "loss"
    BREAK_EVEN = "break_even"
