# Import required modules
from typing import List, Union

from config import MAX_INTEREST_RATE, TERM_MONTHS
from finance.mortgage import pmt, ppmt, ipmt
from models import (
    LoanTerms,
    MonthlyRow,
    MortgageSchedule,
    RepaymentPolicy,
    ScheduleTotals,
    InvalidInputError,
    require_non_negative,
)


def _validate(interest: float, deduction: float, savings: float, loan: float):
    interest = require_non_negative("interest", interest)
    if interest > MAX_INTEREST_RATE:
        raise InvalidInputError(
            "interest", f"must be <= {MAX_INTEREST_RATE}, got {interest!r}"
        )
    deduction = require_non_negative("deduction", deduction)
    if deduction > 100:
        raise InvalidInputError("deduction", f"must be <= 100, got {deduction!r}")
    savings = require_non_negative("savings", savings)
    loan = require_non_negative("loan", loan)
    return interest, deduction, savings, loan


def _totals(
    total_paid_gross: float, total_paid_net: float, loan: float, savings: float
) -> ScheduleTotals:
    return ScheduleTotals(
        total_paid_gross=total_paid_gross,
        total_paid_net=total_paid_net,
        total_interest_gross=total_paid_gross - loan,
        total_interest_net=total_paid_net - loan,
        total_invested_gross=total_paid_gross + savings,
        total_invested_net=total_paid_net + savings,
    )


def annuity_schedule(
    interest: float,
    deduction: float,
    savings: float,
    loan: float,
    term_months: int = TERM_MONTHS,
) -> MortgageSchedule:
    """
    Annuity mortgage: every month the payment is re-amortized against the
    remaining balance and the remaining number of months, then split into
    interest (first period of that fresh loan) and capital.

    `interest` and `deduction` are percentages; `deduction` is the share of
    the interest returned through income tax.
    """
    interest, deduction, savings, loan = _validate(interest, deduction, savings, loan)
    if term_months <= 0:
        raise InvalidInputError("term_months", f"must be > 0, got {term_months!r}")

    terms = LoanTerms(annual_rate_percent=interest, term_months=term_months, principal=loan)
    rate = terms.monthly_rate
    total_paid_gross = 0.0
    total_paid_net = 0.0
    acc_paid = 0.0
    rows: List[MonthlyRow] = []

    for i in range(terms.term_months):
        remaining = terms.term_months - i
        balance = max(loan - acc_paid, 0.0)
        payment = pmt(rate, remaining, balance)
        capital_paid = -ppmt(rate, 1, remaining, balance)
        interest_paid = -ipmt(balance, payment, rate, 1)
        gross_paid = capital_paid + interest_paid
        tax_back = (interest_paid * deduction) / 100
        net_paid = gross_paid - tax_back

        total_paid_gross += gross_paid
        total_paid_net += net_paid
        acc_paid += capital_paid

        rows.append(
            MonthlyRow(
                month=i + 1,
                balance=balance,
                gross_paid=gross_paid,
                capital_paid=capital_paid,
                interest=interest_paid,
                deduction=tax_back,
                net_paid=net_paid,
            )
        )

    return MortgageSchedule(
        policy=RepaymentPolicy.ANNUITY,
        rows=tuple(rows),
        totals=_totals(total_paid_gross, total_paid_net, loan, savings),
    )


def linear_schedule(
    interest: float,
    deduction: float,
    savings: float,
    loan: float,
    term_months: int = TERM_MONTHS,
) -> MortgageSchedule:
    """Linear mortgage: fixed capital repayment, interest on the declining balance."""
    interest, deduction, savings, loan = _validate(interest, deduction, savings, loan)
    if term_months <= 0:
        raise InvalidInputError("term_months", f"must be > 0, got {term_months!r}")

    terms = LoanTerms(annual_rate_percent=interest, term_months=term_months, principal=loan)
    rate = terms.monthly_rate
    capital_paid = loan / terms.term_months
    total_paid_gross = 0.0
    total_paid_net = 0.0
    rows: List[MonthlyRow] = []

    for i in range(terms.term_months):
        balance = loan - capital_paid * i
        interest_paid = balance * rate
        gross_paid = capital_paid + interest_paid
        tax_back = (interest_paid * deduction) / 100
        net_paid = gross_paid - tax_back

        total_paid_net += net_paid
        total_paid_gross += gross_paid

        rows.append(
            MonthlyRow(
                month=i + 1,
                balance=balance,
                gross_paid=gross_paid,
                capital_paid=capital_paid,
                interest=interest_paid,
                deduction=tax_back,
                net_paid=net_paid,
            )
        )

    return MortgageSchedule(
        policy=RepaymentPolicy.LINEAR,
        rows=tuple(rows),
        totals=_totals(total_paid_gross, total_paid_net, loan, savings),
    )


def build_schedule(
    policy: Union[RepaymentPolicy, str],
    interest: float,
    deduction: float,
    savings: float,
    loan: float,
) -> MortgageSchedule:
    try:
        policy = RepaymentPolicy(policy)
    except ValueError:
        raise InvalidInputError("policy", f"unknown repayment policy {policy!r}") from None

    if policy is RepaymentPolicy.ANNUITY:
        return annuity_schedule(interest, deduction, savings, loan)
    return linear_schedule(interest, deduction, savings, loan)
