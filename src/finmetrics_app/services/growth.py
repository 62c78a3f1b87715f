from __future__ import annotations

import math


class ProjectedRevenueEvaluator:
    """Compound monthly growth: revenue * (1 + rate) ** months."""

    def project(self, current_revenue: float, growth_rate_percent: float, months: int) -> float:
        # Negative rates model decline; zero months returns the input revenue.
        monthly_rate = growth_rate_percent / 100
        return current_revenue * self._growth_factor(1 + monthly_rate, months)

    def _growth_factor(self, base: float, months: int) -> float:
        # Out-of-range powers saturate to infinity instead of raising.
        try:
            return base ** months
        except OverflowError:
            if base < 0 and months % 2 == 1:
                return -math.inf
            return math.inf
        except ZeroDivisionError:
            return math.inf


class RequiredGrowthRateSolver:
    """Inverse of the compound growth formula, answered in percent."""

    def solve(self, current_revenue: float, target_revenue: float, months: int) -> float:
        if current_revenue <= 0 or target_revenue <= 0 or months <= 0:
            return 0.0
        rate = (target_revenue / current_revenue) ** (1 / months) - 1
        return rate * 100
