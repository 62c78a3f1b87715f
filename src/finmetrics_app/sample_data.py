from __future__ import annotations

from .core.config import settings
from .models.common import CurrencyConfig
from .models.inputs import FinancialInputs


def default_inputs() -> FinancialInputs:
    return FinancialInputs(currency_config=CurrencyConfig(ratio=1.0, currency_name=settings.DEFAULT_CURRENCY))


def build_sample_inputs() -> FinancialInputs:
    return FinancialInputs(
        currency_config=CurrencyConfig(ratio=1.0, currency_name="EUR"),
        rent=1800.0,
        salaries=6500.0,
        supplies=400.0,
        utilities=350.0,
        insurance=150.0,
        marketing=800.0,
        other_fixed_costs=0.0,
        credit_card_commissions=2.5,
        cost_of_goods_sold=32.0,
        other_variable_costs=1.5,
        initial_investment=60000.0,
        total_market_cap=2_500_000.0,
        monthly_revenue=18000.0,
        tax_rate=21.0,
        growth_rate=3.0,
    )
