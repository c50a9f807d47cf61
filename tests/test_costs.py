import pytest

from finance.costs import compute_affordability
from finance.taxes import guarantee_eligible, transfer_tax, transfer_tax_exempt
from models import AffordabilityInput, InvalidInputError


def with_(inputs, **changes):
    return AffordabilityInput(**{**inputs.__dict__, **changes})


class TestTransferTax:
    def test_first_time_buyer_below_limit_exempt(self):
        assert transfer_tax_exempt(524999.99, True)
        assert transfer_tax(524999.99, 2.0, True) == 0.0

    def test_limit_itself_is_taxed(self):
        assert not transfer_tax_exempt(525000, True)
        assert transfer_tax(525000, 2.0, True) == pytest.approx(10500)

    def test_not_first_time_buyer_taxed(self):
        assert not transfer_tax_exempt(200000, False)
        assert transfer_tax(200000, 10.4, False) == pytest.approx(20800)

    def test_guarantee_cap_inclusive(self):
        assert guarantee_eligible(435000)
        assert not guarantee_eligible(435000.01)


class TestComputeAffordability:
    def test_reference_purchase(self, purchase):
        result = compute_affordability(purchase)
        assert result.loan > 0
        assert result.total_cost > 0
        assert 0 < result.loan_to_value < 1.2
        assert result.transfer_tax == pytest.approx(6200)
        assert not result.transfer_tax_exempt

    def test_guarantee_fee_grossed_up_loan(self, purchase):
        result = compute_affordability(purchase)
        base_cost = 310 + 6200 + 1500 + 500 + 2500 + 5000 + 500
        assert result.guarantee_eligible
        assert result.bank_guarantee == pytest.approx(310)
        assert result.loan == pytest.approx((310000 - 40000 + base_cost) / (1 - 0.007))
        assert result.guarantee_fee == pytest.approx(0.007 * result.loan)
        assert result.total_cost == pytest.approx(base_cost + 0.007 * result.loan)
        assert result.loan_to_value == result.loan / 310000

    def test_loan_covers_price_and_costs(self, purchase):
        result = compute_affordability(purchase)
        assert result.loan + 40000 == pytest.approx(310000 + result.total_cost)

    def test_above_guarantee_cap_no_fee(self, purchase):
        result = compute_affordability(with_(purchase, price=450000))
        base_cost = 450 + 9000 + 1500 + 500 + 2500 + 5000 + 500
        assert not result.guarantee_eligible
        assert result.guarantee_fee == 0.0
        assert result.loan == pytest.approx(450000 - 40000 + base_cost)
        assert result.total_cost == pytest.approx(base_cost)

    def test_first_time_buyer(self, purchase):
        result = compute_affordability(with_(purchase, is_first_time_buyer=True))
        assert result.transfer_tax == 0
        assert result.transfer_tax_exempt

    def test_first_time_buyer_expensive_house(self, purchase):
        result = compute_affordability(
            with_(purchase, is_first_time_buyer=True, price=600000)
        )
        assert result.transfer_tax > 0
        assert not result.transfer_tax_exempt

    def test_first_time_buyer_at_limit(self, purchase):
        result = compute_affordability(
            with_(purchase, is_first_time_buyer=True, price=525000)
        )
        assert not result.transfer_tax_exempt
        assert result.transfer_tax == pytest.approx(10500)

    def test_savings_beyond_purchase_gives_negative_loan(self, purchase):
        result = compute_affordability(with_(purchase, savings=500000))
        assert result.loan < 0

    @pytest.mark.parametrize(
        "changes, field",
        [
            ({"price": 0}, "price"),
            ({"price": -1}, "price"),
            ({"price": float("nan")}, "price"),
            ({"savings": -1}, "savings"),
            ({"notary": float("inf")}, "notary"),
            ({"structural_survey": -100}, "structural_survey"),
            ({"transfer_tax_rate": -2.0}, "transfer_tax_rate"),
        ],
    )
    def test_invalid_input_named(self, purchase, changes, field):
        with pytest.raises(InvalidInputError) as exc:
            compute_affordability(with_(purchase, **changes))
        assert exc.value.field == field
