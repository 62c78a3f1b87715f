from __future__ import annotations

import math

import pytest

from finmetrics_app.services.growth import ProjectedRevenueEvaluator, RequiredGrowthRateSolver


def test_projection_compounds_monthly():
    evaluator = ProjectedRevenueEvaluator()

    assert evaluator.project(1000, 10, 3) == pytest.approx(1331.0)
    assert evaluator.project(1000, -10, 2) == pytest.approx(810.0)
    assert evaluator.project(1000, 25, 0) == 1000


@pytest.mark.parametrize(
    "current, target, months",
    [
        (0, 1000, 12),
        (-100, 1000, 12),
        (1000, 0, 12),
        (1000, -5, 12),
        (1000, 2000, 0),
        (1000, 2000, -3),
    ],
)
def test_required_rate_is_zero_for_degenerate_inputs(current, target, months):
    assert RequiredGrowthRateSolver().solve(current, target, months) == 0


def test_required_rate_to_double_in_a_year():
    rate = RequiredGrowthRateSolver().solve(5000, 10000, 12)
    assert rate == pytest.approx((2 ** (1 / 12) - 1) * 100)


def test_required_rate_for_decline_is_negative():
    assert RequiredGrowthRateSolver().solve(1000, 810, 2) == pytest.approx(-10.0)


@pytest.mark.parametrize("revenue, growth, months", [(1000, 10, 3), (12500, 4.5, 12), (800, -7.5, 6)])
def test_projection_and_solver_are_inverses(revenue, growth, months):
    projected = ProjectedRevenueEvaluator().project(revenue, growth, months)
    recovered = RequiredGrowthRateSolver().solve(revenue, projected, months)

    assert recovered == pytest.approx(growth)


def test_projection_overflow_is_infinite():
    evaluator = ProjectedRevenueEvaluator()

    assert evaluator.project(1000, 1e120, 3) == math.inf
    assert evaluator.project(1000, -1e120, 3) == -math.inf
    assert evaluator.project(1000, -1e120, 4) == math.inf


def test_projection_of_total_loss_over_negative_months_is_infinite():
    assert ProjectedRevenueEvaluator().project(1000, -100, -1) == math.inf
