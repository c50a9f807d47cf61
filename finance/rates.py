from typing import Optional

from config import INTEREST_RATES
from models import InvalidInputError, require_non_negative


def lookup_interest_rate(
    fixed_years: int, loan_to_value: float, guarantee_eligible: bool = False
) -> Optional[float]:
    """
    Indicative fixed rate (percentage) for a fixed-rate period and LTV.

    Guarantee-eligible loans get the NHG rate regardless of LTV. Otherwise the
    smallest bucket that covers the LTV is used; above 100% LTV there is no
    offer and None is returned.
    """
    table = INTEREST_RATES.get(fixed_years)
    if table is None:
        raise InvalidInputError(
            "fixed_years", f"no rates for {fixed_years!r}, choose from {sorted(INTEREST_RATES)}"
        )
    loan_to_value = require_non_negative("loan_to_value", loan_to_value)

    if guarantee_eligible:
        return table["NHG"]

    buckets = sorted(k for k in table if k != "NHG")
    for cap in buckets:
        if loan_to_value <= cap:
            return table[cap]
    return None
