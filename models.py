import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from config import DEFAULT_VALUES


class InvalidInputError(ValueError):
    """Raised before any computation starts when an input field is unusable."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


def require_finite(field: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(field, f"expected a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidInputError(field, f"must be finite, got {value!r}")
    return float(value)


def require_non_negative(field: str, value: float) -> float:
    value = require_finite(field, value)
    if value < 0:
        raise InvalidInputError(field, f"must be >= 0, got {value!r}")
    return value


class RepaymentPolicy(str, Enum):
    ANNUITY = "annuity"
    LINEAR = "linear"


@dataclass(frozen=True)
class LoanTerms:
    annual_rate_percent: float
    term_months: int
    principal: float

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / 1200


@dataclass(frozen=True)
class MonthlyRow:
    month: int
    balance: float  # outstanding at the start of the month
    gross_paid: float
    capital_paid: float
    interest: float
    deduction: float
    net_paid: float


@dataclass(frozen=True)
class ScheduleTotals:
    total_paid_gross: float
    total_paid_net: float
    total_interest_gross: float
    total_interest_net: float
    total_invested_gross: float
    total_invested_net: float


@dataclass(frozen=True)
class MortgageSchedule:
    policy: RepaymentPolicy
    rows: Tuple[MonthlyRow, ...]
    totals: ScheduleTotals

    @property
    def monthly_net_average(self) -> float:
        """Net paid per month spread evenly over the whole term"""
        return self.totals.total_paid_net / len(self.rows)


@dataclass
class AffordabilityInput:
    price: float
    savings: float
    notary: float = 0.0
    valuation: float = 0.0
    financial_advisor: float = 0.0
    real_estate_agent: float = 0.0
    structural_survey: float = 0.0
    is_first_time_buyer: bool = False
    transfer_tax_rate: float = 0.0  # percentage


@dataclass(frozen=True)
class AffordabilityResult:
    loan: float
    total_cost: float
    loan_to_value: float
    transfer_tax: float
    transfer_tax_exempt: bool
    bank_guarantee: float = 0.0
    guarantee_eligible: bool = False
    guarantee_fee: float = 0.0


@dataclass(frozen=True)
class YearlyComparisonRow:
    year: int
    property_value: float
    remaining_loan: float
    equity: float
    total_rent_paid: float
    total_mortgage_paid: float
    net_worth_difference: float
    buying_net_worth: float = 0.0
    renting_net_worth: float = 0.0


@dataclass(frozen=True)
class RentVsBuyResult:
    years: Tuple[YearlyComparisonRow, ...]
    break_even_year: Optional[int] = None

    @property
    def final_year(self) -> Optional[YearlyComparisonRow]:
        return self.years[-1] if self.years else None


@dataclass
class Scenario:
    price: float
    interest: float  # percentage
    deduction: float  # percentage of interest
    savings: float
    rent: float
    notary: float = 0.0
    valuation: float = 0.0
    financial_advisor: float = 0.0
    real_estate_agent: float = 0.0
    structural_survey: float = 0.0
    is_first_time_buyer: bool = False
    transfer_tax_rate: float = 0.0  # percentage
    property_appreciation_rate: float = 0.0  # percentage
    comparison_period_years: int = 10

    @classmethod
    def from_defaults(cls, **overrides) -> "Scenario":
        return cls(**{**DEFAULT_VALUES, **overrides})

    def to_affordability_input(self) -> AffordabilityInput:
        return AffordabilityInput(
            price=self.price,
            savings=self.savings,
            notary=self.notary,
            valuation=self.valuation,
            financial_advisor=self.financial_advisor,
            real_estate_agent=self.real_estate_agent,
            structural_survey=self.structural_survey,
            is_first_time_buyer=self.is_first_time_buyer,
            transfer_tax_rate=self.transfer_tax_rate,
        )


@dataclass(frozen=True)
class CalculationResults:
    scenario: Scenario
    affordability: AffordabilityResult
    annuity: MortgageSchedule
    linear: MortgageSchedule
    rent_vs_buy: RentVsBuyResult
