from __future__ import annotations

from typing import Dict


# Keyed by the camelCase result field names the front end uses for tooltips.
CALCULATION_FORMULAS: Dict[str, str] = {
    "convertedMonthlyRevenue": "Monthly Revenue (in target currency)",
    "convertedTotalFixedCosts": "Total Fixed Costs (in target currency)",
    "convertedTotalVariableCosts": "(Monthly Revenue × Total Variable Cost Percentage) / 100",
    "totalFixedCosts": "Rent + Salaries + Supplies + Utilities + Insurance + Marketing + Other Fixed Costs",
    "totalVariableCosts": "(Monthly Revenue × Total Variable Cost Percentage) / 100",
    "contributionMargin": "Monthly Revenue - Total Variable Costs",
    "contributionMarginRatio": "Contribution Margin / Monthly Revenue",
    "breakEvenPoint": "Total Fixed Costs / Contribution Margin Ratio",
    "breakEvenPointMonths": "Break Even Point / Monthly Revenue",
    "grossProfit": "Monthly Revenue - Total Variable Costs",
    "netProfit": "Gross Profit - Total Fixed Costs",
    "profitMargin": "Net Profit / Monthly Revenue",
    "marketShare": "Monthly Revenue / Total Market Cap",
    "marketSharePercentage": "Market Share × 100",
    "cashFlow": "Monthly Revenue - (Total Fixed Costs + Total Variable Costs)",
    "returnOnInvestment": "Net Profit / Initial Investment",
    "paybackPeriod": "Initial Investment / Net Profit",
    "monthlyBurnRate": "Total Fixed Costs + Total Variable Costs",
    "runwayMonths": "Initial Investment / Monthly Burn Rate",
}


def get_calculation_formulas() -> Dict[str, str]:
    return dict(CALCULATION_FORMULAS)
