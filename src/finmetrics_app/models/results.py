from __future__ import annotations

from .common import CamelModel


class FinancialCalculations(CamelModel):
    # Inputs are entered in the target currency, so these are identity copies
    converted_monthly_revenue: float
    converted_total_fixed_costs: float
    converted_total_variable_costs: float

    # Break-even analysis
    total_fixed_costs: float
    total_variable_costs: float
    contribution_margin: float
    contribution_margin_ratio: float
    break_even_point: float
    break_even_point_months: float

    # Profit analysis
    gross_profit: float
    net_profit: float
    profit_margin: float

    # Market analysis
    market_share: float
    market_share_percentage: float

    cash_flow: float
    return_on_investment: float
    payback_period: float
    monthly_burn_rate: float
    runway_months: float

    # Growth projections
    projected_revenue_3_months: float
    projected_revenue_6_months: float
    projected_revenue_12_months: float
    growth_rate: float
