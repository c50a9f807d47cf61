# Import required modules
import logging
from dataclasses import asdict
from typing import Optional

from config import MAX_APPRECIATION_RATE, MIN_APPRECIATION_RATE
from models import CalculationResults, RepaymentPolicy, Scenario
from finance.costs import compute_affordability
from finance.schedule import build_schedule
from analytics.simulation import project_rent_vs_buy

logger = logging.getLogger(__name__)


def calculate(scenario: Scenario) -> CalculationResults:
    """Full recomputation for one scenario: loan figures, both schedules, rent vs buy."""
    affordability = compute_affordability(scenario.to_affordability_input())

    annuity = build_schedule(
        RepaymentPolicy.ANNUITY,
        scenario.interest,
        scenario.deduction,
        scenario.savings,
        affordability.loan,
    )
    linear = build_schedule(
        RepaymentPolicy.LINEAR,
        scenario.interest,
        scenario.deduction,
        scenario.savings,
        affordability.loan,
    )

    rent_vs_buy = project_rent_vs_buy(
        loan=affordability.loan,
        total_cost=affordability.total_cost,
        monthly_net_payment=annuity.monthly_net_average,
        price=scenario.price,
        rent=scenario.rent,
        savings=scenario.savings,
        appreciation_rate=scenario.property_appreciation_rate,
        years=scenario.comparison_period_years,
    )

    logger.debug(
        "calculated price=%s loan=%.2f ltv=%.4f break_even=%s",
        scenario.price,
        affordability.loan,
        affordability.loan_to_value,
        rent_vs_buy.break_even_year,
    )
    return CalculationResults(
        scenario=scenario,
        affordability=affordability,
        annuity=annuity,
        linear=linear,
        rent_vs_buy=rent_vs_buy,
    )


def breakeven_appreciation_rate(
    scenario: Scenario, tol=1e-6, lo=-20.0, hi=20.0, iters=80
) -> Optional[float]:
    """Solve for the appreciation rate (%) where buying and renting end level
    after the comparison period. None when no rate in reach brackets a crossing."""
    base = calculate(scenario)
    monthly_net = base.annuity.monthly_net_average

    def diff_at(g):
        res = project_rent_vs_buy(
            loan=base.affordability.loan,
            total_cost=base.affordability.total_cost,
            monthly_net_payment=monthly_net,
            price=scenario.price,
            rent=scenario.rent,
            savings=scenario.savings,
            appreciation_rate=g,
            years=scenario.comparison_period_years,
        )
        return res.final_year.net_worth_difference

    a, b = lo, hi
    fa, fb = diff_at(a), diff_at(b)
    # Expand if needed, within the accepted appreciation range
    k = 0
    while fa * fb > 0 and k < 8:
        a = max(a - 10.0, MIN_APPRECIATION_RATE)
        b = min(b + 10.0, MAX_APPRECIATION_RATE)
        fa, fb = diff_at(a), diff_at(b)
        k += 1
    if fa * fb > 0:
        logger.debug("no break-even appreciation between %.1f%% and %.1f%%", a, b)
        return None

    for _ in range(iters):
        m = 0.5 * (a + b)
        fm = diff_at(m)
        if abs(fm) < tol:
            return m
        if fa * fm <= 0:
            b, fb = m, fm
        else:
            a, fa = m, fm
    return 0.5 * (a + b)


def results_to_dict(results: CalculationResults) -> dict:
    """Plain-dict form of every result shape, field names unchanged, for storage."""
    data = asdict(results)
    for key in ("annuity", "linear"):
        data[key]["policy"] = getattr(results, key).policy.value
    return data
