from __future__ import annotations

import logging
import math
from typing import Iterable

from ..models.common import ProfitStatus
from ..models.inputs import FinancialInputs
from ..models.results import FinancialCalculations
from .growth import ProjectedRevenueEvaluator


logger = logging.getLogger(__name__)

PROJECTION_HORIZONS = (3, 6, 12)


def _sum_positive(values: Iterable[float]) -> float:
    # Non-positive entries are dropped, so a negative cost never offsets another.
    return sum(value for value in values if value > 0)


def classify_profit(net_profit: float) -> ProfitStatus:
    if net_profit > 0:
        return ProfitStatus.PROFIT
    if net_profit < 0:
        return ProfitStatus.LOSS
    return ProfitStatus.BREAK_EVEN


class MetricsCalculator:
    def __init__(self, evaluator: ProjectedRevenueEvaluator | None = None) -> None:
        self.evaluator = evaluator or ProjectedRevenueEvaluator()

    def compute(self, inputs: FinancialInputs) -> FinancialCalculations:
        # Values arrive already expressed in the target currency; currency_config.ratio
        # is display metadata and is never multiplied in. tax_rate is not used either.
        monthly_revenue = inputs.monthly_revenue

        projections = {
            months: self.evaluator.project(monthly_revenue, inputs.growth_rate, months)
            for months in PROJECTION_HORIZONS
        }

        total_fixed_costs = _sum_positive(inputs.fixed_costs())
        variable_cost_pct = _sum_positive(inputs.variable_cost_percentages())
        total_variable_costs = monthly_revenue * variable_cost_pct / 100

        contribution_margin = monthly_revenue - total_variable_costs
        contribution_margin_ratio = contribution_margin / monthly_revenue if monthly_revenue > 0 else 0.0
        break_even_point = total_fixed_costs / contribution_margin_ratio if contribution_margin_ratio > 0 else 0.0
        break_even_point_months = break_even_point / monthly_revenue if monthly_revenue > 0 else 0.0

        gross_profit = monthly_revenue - total_variable_costs
        net_profit = gross_profit - total_fixed_costs
        profit_margin = net_profit / monthly_revenue if monthly_revenue > 0 else 0.0

        market_cap = inputs.total_market_cap
        market_share = monthly_revenue / market_cap if market_cap > 0 else 0.0
        market_share_percentage = market_share * 100

        cash_flow = monthly_revenue - (total_fixed_costs + total_variable_costs)

        investment = inputs.initial_investment
        return_on_investment = net_profit / investment if investment > 0 else 0.0
        payback_period = investment / net_profit if net_profit > 0 else 0.0
        monthly_burn_rate = total_fixed_costs + total_variable_costs
        runway_months = self._runway(investment, monthly_burn_rate) if investment > 0 else 0.0

        logger.debug(
            "Computed metrics: revenue=%s fixed=%s variable=%s net_profit=%s",
            monthly_revenue,
            total_fixed_costs,
            total_variable_costs,
            net_profit,
        )

        return FinancialCalculations(
            converted_monthly_revenue=monthly_revenue,
            converted_total_fixed_costs=total_fixed_costs,
            converted_total_variable_costs=total_variable_costs,
            total_fixed_costs=total_fixed_costs,
            total_variable_costs=total_variable_costs,
            contribution_margin=contribution_margin,
            contribution_margin_ratio=contribution_margin_ratio,
            break_even_point=break_even_point,
            break_even_point_months=break_even_point_months,
            gross_profit=gross_profit,
            net_profit=net_profit,
            profit_margin=profit_margin,
            market_share=market_share,
            market_share_percentage=market_share_percentage,
            cash_flow=cash_flow,
            return_on_investment=return_on_investment,
            payback_period=payback_period,
            monthly_burn_rate=monthly_burn_rate,
            runway_months=runway_months,
            projected_revenue_3_months=projections[3],
            projected_revenue_6_months=projections[6],
            projected_revenue_12_months=projections[12],
            growth_rate=inputs.growth_rate,
        )

    def _runway(self, investment: float, burn_rate: float) -> float:
        # Burn rate is unguarded upstream; zero burn yields an infinite runway, not an error.
        if burn_rate == 0:
            return math.copysign(math.inf, burn_rate)
        return investment / burn_rate
