from __future__ import annotations

from typing import Dict

from pydantic import Field

from .models.common import CamelModel, ProfitStatus
from .models.results import FinancialCalculations


class CalculationResponse(CamelModel):
    result: FinancialCalculations
    profit_status: ProfitStatus


class FormulasResponse(CamelModel):
    formulas: Dict[str, str]


class RequiredGrowthRequest(CamelModel):
    current_revenue: float
    target_revenue: float
    months: int = Field(..., description="Number of months to reach the target")


class RequiredGrowthResponse(CamelModel):
    growth_rate: float = Field(..., description="Monthly growth rate needed, percent")


class ProjectionRequest(CamelModel):
    current_revenue: float
    growth_rate: float = Field(..., description="Monthly growth rate, percent")
    months: int


class ProjectionResponse(CamelModel):
    projected_revenue: float
