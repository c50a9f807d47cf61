"""Spreadsheet-style payment functions for a fixed-rate, fixed-term loan.

All three work on a periodic (monthly) rate and follow the cash-outflow sign
convention: a positive outstanding balance yields negative payment, interest
and principal amounts. Nothing is rounded.
"""


def pmt(rate: float, nper: int, pv: float) -> float:
    """Level payment that fully amortizes `pv` over `nper` periods at `rate`."""
    if nper <= 0:
        raise ValueError("nper must be > 0")
    if rate == 0:
        return -pv / nper

    pvif = (1 + rate) ** nper
    return (rate / (pvif - 1)) * -(pv * pvif)


def ipmt(pv: float, payment: float, rate: float, per: int) -> float:
    """Interest part of payment number `per` (1-based) on a starting balance `pv`."""
    tmp = (1 + rate) ** (per - 1)
    return 0 - (pv * tmp * rate + payment * (tmp - 1))


def ppmt(rate: float, per: int, nper: int, pv: float) -> float:
    """Principal part of payment number `per`: the payment minus its interest."""
    payment = pmt(rate, nper, pv)
    return payment - ipmt(pv, payment, rate, per)
