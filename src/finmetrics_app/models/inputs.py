from __future__ import annotations

from typing import List

from pydantic import Field

from .common import CamelModel, CurrencyConfig


class FinancialInputs(CamelModel):
    currency_config: CurrencyConfig = Field(default_factory=CurrencyConfig)

    # Fixed costs, monthly amounts in the operating currency
    rent: float = 0.0
    salaries: float = 0.0
    supplies: float = 0.0
    utilities: float = 0.0
    insurance: float = 0.0
    marketing: float = 0.0
    other_fixed_costs: float = 0.0

    # Variable costs, percent of revenue (0-100)
    credit_card_commissions: float = 0.0
    cost_of_goods_sold: float = 0.0
    other_variable_costs: float = 0.0

    initial_investment: float = 0.0
    total_market_cap: float = 0.0
    monthly_revenue: float = 0.0

    # Accepted for the input form but not read by any calculation yet.
    tax_rate: float = Field(0.0, description="Percent. Currently has no effect on any result.")
    growth_rate: float = Field(0.0, description="Monthly growth, percent")

    def fixed_costs(self) -> List[float]:
        return [
            self.rent,
            self.salaries,
            self.supplies,
            self.utilities,
            self.insurance,
            self.marketing,
            self.other_fixed_costs,
        ]

    def variable_cost_percentages(self) -> List[float]:
        return [
            self.credit_card_commissions,
            self.cost_of_goods_sold,
            self.other_variable_costs,
        ]
