# Import required modules
from typing import Iterable, List, Optional

from config import (
    DEFAULT_COMPARISON_YEARS,
    INVESTMENT_RETURN_RATE,
    MAX_APPRECIATION_RATE,
    MAX_COMPARISON_YEARS,
    MIN_APPRECIATION_RATE,
    RENT_GROWTH_RATE,
    TERM_YEARS,
)
from models import (
    InvalidInputError,
    RentVsBuyResult,
    YearlyComparisonRow,
    require_finite,
    require_non_negative,
)


def find_break_even_year(rows: Iterable[YearlyComparisonRow]) -> Optional[int]:
    """First year in which buying is ahead. The difference need not be monotonic,
    so later dips below zero do not move this year."""
    for row in rows:
        if row.net_worth_difference > 0:
            return row.year
    return None


def project_rent_vs_buy(
    loan: float,
    total_cost: float,
    monthly_net_payment: float,
    price: float,
    rent: float,
    savings: float,
    appreciation_rate: float,
    years: int = DEFAULT_COMPARISON_YEARS,
) -> RentVsBuyResult:
    """
    Year-by-year net worth of buying vs renting over 'years' years.

    Buying: property value minus a straight-line remaining loan (loan / 30 per
    year, not the exact schedule) minus the acquisition costs.
    Renting: savings invested at a fixed return minus rent paid, with rent
    growing every year.
    'appreciation_rate' is a percentage per year.
    """
    if isinstance(years, bool) or not isinstance(years, int) or years < 1:
        raise InvalidInputError("years", f"must be an integer >= 1, got {years!r}")
    if years > MAX_COMPARISON_YEARS:
        raise InvalidInputError("years", f"must be <= {MAX_COMPARISON_YEARS}, got {years!r}")
    loan = require_finite("loan", loan)
    total_cost = require_finite("total_cost", total_cost)
    monthly_net_payment = require_finite("monthly_net_payment", monthly_net_payment)
    price = require_non_negative("price", price)
    rent = require_non_negative("rent", rent)
    savings = require_non_negative("savings", savings)
    appreciation_rate = require_finite("appreciation_rate", appreciation_rate)
    if not MIN_APPRECIATION_RATE <= appreciation_rate <= MAX_APPRECIATION_RATE:
        raise InvalidInputError(
            "appreciation_rate",
            f"must be between {MIN_APPRECIATION_RATE} and {MAX_APPRECIATION_RATE}, "
            f"got {appreciation_rate!r}",
        )

    yearly_mortgage_payment = monthly_net_payment * 12
    yearly_principal_payment = loan / TERM_YEARS

    rows: List[YearlyComparisonRow] = []
    total_rent_paid = 0.0
    for year in range(1, years + 1):
        property_value = price * (1 + appreciation_rate / 100) ** year
        remaining_loan = max(0.0, loan - yearly_principal_payment * year)
        equity = property_value - remaining_loan

        # Rent grows once a year, starting from the second year
        total_rent_paid += rent * 12 * (1 + RENT_GROWTH_RATE) ** (year - 1)

        total_mortgage_paid = yearly_mortgage_payment * year

        buying_net_worth = equity - total_cost
        renting_net_worth = (
            savings * (1 + INVESTMENT_RETURN_RATE) ** year - total_rent_paid
        )

        rows.append(
            YearlyComparisonRow(
                year=year,
                property_value=property_value,
                remaining_loan=remaining_loan,
                equity=equity,
                total_rent_paid=total_rent_paid,
                total_mortgage_paid=total_mortgage_paid,
                net_worth_difference=buying_net_worth - renting_net_worth,
                buying_net_worth=buying_net_worth,
                renting_net_worth=renting_net_worth,
            )
        )

    return RentVsBuyResult(years=tuple(rows), break_even_year=find_break_even_year(rows))
