import pytest

from models import AffordabilityInput, Scenario


@pytest.fixture
def scenario():
    return Scenario.from_defaults()


@pytest.fixture
def purchase():
    return AffordabilityInput(
        price=310000,
        savings=40000,
        notary=1500,
        valuation=500,
        financial_advisor=2500,
        real_estate_agent=5000,
        structural_survey=500,
        is_first_time_buyer=False,
        transfer_tax_rate=2.0,
    )
