from config import (
    BANK_GUARANTEE_RATE,
    FIRST_TIME_BUYER_PRICE_LIMIT,
    GUARANTEE_FEE_RATE,
    MAX_GUARANTEE_PRICE,
)


def transfer_tax_exempt(price: float, is_first_time_buyer: bool) -> bool:
    """
    Dutch transfer tax (overdrachtsbelasting) starter exemption.
    A first-time buyer pays no transfer tax when the price is strictly below
    the limit; at exactly the limit the full rate applies.
    """
    return bool(is_first_time_buyer) and price < FIRST_TIME_BUYER_PRICE_LIMIT


def transfer_tax(price: float, rate_pct: float, is_first_time_buyer: bool) -> float:
    """
    Transfer tax on the full purchase price.

    'rate_pct' is a percentage (2.0 for owner-occupied homes). Returns 0.0 when
    the starter exemption applies. Not rounded.
    """
    if transfer_tax_exempt(price, is_first_time_buyer):
        return 0.0
    return (rate_pct / 100) * price


def bank_guarantee(price: float) -> float:
    return BANK_GUARANTEE_RATE * price


def guarantee_eligible(price: float) -> bool:
    """Mortgage guarantee (NHG) is available up to and including the price cap."""
    return price <= MAX_GUARANTEE_PRICE


def guarantee_fee(loan: float, eligible: bool) -> float:
    return GUARANTEE_FEE_RATE * loan if eligible else 0.0
