from __future__ import annotations

from finmetrics_app.sample_data import build_sample_inputs
from finmetrics_app.services.calculator import MetricsCalculator
from finmetrics_app.services.formulas import get_calculation_formulas


def test_formulas_cover_every_non_growth_result_field():
    result = MetricsCalculator().compute(build_sample_inputs())
    fields = set(result.model_dump(by_alias=True))
    growth_fields = {
        "projectedRevenue3Months",
        "projectedRevenue6Months",
        "projectedRevenue12Months",
        "growthRate",
    }

    assert set(get_calculation_formulas()) == fields - growth_fields


def test_formulas_are_a_fresh_copy():
    formulas = get_calculation_formulas()
    formulas["netProfit"] = "changed"

    assert get_calculation_formulas()["netProfit"] == "Gross Profit - Total Fixed Costs"
