# Import required modules
from config import GUARANTEE_FEE_RATE
from models import (
    AffordabilityInput,
    AffordabilityResult,
    InvalidInputError,
    require_finite,
    require_non_negative,
)
from finance.taxes import (
    bank_guarantee,
    guarantee_eligible,
    guarantee_fee,
    transfer_tax,
    transfer_tax_exempt,
)

_COST_FIELDS = (
    "savings",
    "notary",
    "valuation",
    "financial_advisor",
    "real_estate_agent",
    "structural_survey",
    "transfer_tax_rate",
)


def _validate(inputs: AffordabilityInput):
    price = require_finite("price", inputs.price)
    if price <= 0:
        raise InvalidInputError("price", f"must be > 0, got {price!r}")
    for name in _COST_FIELDS:
        require_non_negative(name, getattr(inputs, name))


def compute_affordability(inputs: AffordabilityInput) -> AffordabilityResult:
    """
    Loan needed to buy at 'price' with 'savings', and what the purchase costs.

    The loan also finances every acquisition cost. When the price qualifies for
    the mortgage guarantee, its fee is a share of the loan itself, so the loan
    is grossed up by (1 - fee rate) first and the fee added to the costs after.
    """
    _validate(inputs)
    price = inputs.price

    guarantee = bank_guarantee(price)
    exempt = transfer_tax_exempt(price, inputs.is_first_time_buyer)
    tax = transfer_tax(price, inputs.transfer_tax_rate, inputs.is_first_time_buyer)
    eligible = guarantee_eligible(price)

    cost = (
        guarantee
        + tax
        + inputs.notary
        + inputs.valuation
        + inputs.financial_advisor
        + inputs.real_estate_agent
        + inputs.structural_survey
    )

    # Loan from the pre-fee cost; the fee is then charged on that loan
    loan = (price - inputs.savings + cost) / (1 - GUARANTEE_FEE_RATE if eligible else 1)
    fee = guarantee_fee(loan, eligible)
    cost = cost + fee

    return AffordabilityResult(
        loan=loan,
        total_cost=cost,
        loan_to_value=loan / price,
        transfer_tax=tax,
        transfer_tax_exempt=exempt,
        bank_guarantee=guarantee,
        guarantee_eligible=eligible,
        guarantee_fee=fee,
    )
