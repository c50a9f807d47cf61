import math

import pytest

from finance.schedule import annuity_schedule, build_schedule, linear_schedule
from models import InvalidInputError, RepaymentPolicy

# Known-good schedule inputs
FIXTURE_LOAN = 286529.1750503018
FIXTURE_INTEREST = 1.34
FIXTURE_DEDUCTION = 36.93


@pytest.fixture
def annuity():
    return annuity_schedule(FIXTURE_INTEREST, FIXTURE_DEDUCTION, 40000, FIXTURE_LOAN)


@pytest.fixture
def linear():
    return linear_schedule(FIXTURE_INTEREST, FIXTURE_DEDUCTION, 40000, FIXTURE_LOAN)


class TestAnnuitySchedule:
    def test_known_first_month(self, annuity):
        first = annuity.rows[0]
        assert first.month == 1
        assert first.balance == FIXTURE_LOAN
        assert first.capital_paid == pytest.approx(647.0637766, abs=1e-6)
        assert first.interest == pytest.approx(319.9575788, abs=1e-6)
        assert first.net_paid == pytest.approx(848.8610215, abs=1e-6)

    def test_known_last_month(self, annuity):
        last = annuity.rows[-1]
        assert last.month == 360
        assert last.capital_paid == pytest.approx(965.9427193, abs=1e-6)
        assert last.interest == pytest.approx(1.0786360, abs=1e-6)

    def test_known_total_interest(self, annuity):
        assert annuity.totals.total_interest_gross == pytest.approx(61598.5128976, abs=1e-4)

    def test_capital_repaid_equals_loan(self, annuity):
        repaid = math.fsum(row.capital_paid for row in annuity.rows)
        assert repaid == pytest.approx(FIXTURE_LOAN, rel=1e-9)

    def test_payment_stays_level(self, annuity):
        first = annuity.rows[0].gross_paid
        for row in annuity.rows:
            assert row.gross_paid == pytest.approx(first, rel=1e-9)

    def test_zero_rate_is_flat(self):
        schedule = annuity_schedule(0, 40, 0, 360000)
        for row in schedule.rows:
            assert row.gross_paid == pytest.approx(1000.0, rel=1e-12)
            assert row.interest == 0
            assert row.deduction == 0
        assert schedule.totals.total_paid_gross == pytest.approx(360000)

    def test_zero_loan(self):
        schedule = annuity_schedule(4.5, 37, 0, 0)
        assert len(schedule.rows) == 360
        assert all(row.gross_paid == 0 for row in schedule.rows)

    def test_reference_loan(self):
        result = annuity_schedule(4.5, 37, 40000, 300000)
        assert len(result.rows) == 360
        assert result.rows[0].balance == 300000
        assert result.rows[0].gross_paid > 0
        assert result.totals.total_paid_gross > 300000


class TestLinearSchedule:
    def test_known_first_month(self, linear):
        first = linear.rows[0]
        assert first.capital_paid == pytest.approx(795.9143751, abs=1e-6)
        assert first.interest == pytest.approx(319.9575788, abs=1e-6)

    def test_capital_is_constant(self, linear):
        assert {row.capital_paid for row in linear.rows} == {FIXTURE_LOAN / 360}

    def test_payments_decline(self, linear):
        for prev, row in zip(linear.rows, linear.rows[1:]):
            assert row.gross_paid < prev.gross_paid
            assert row.balance < prev.balance

    def test_reference_loan(self):
        result = linear_schedule(4.5, 37, 40000, 300000)
        assert len(result.rows) == 360
        assert result.rows[0].month == 1
        assert result.rows[0].balance == 300000
        assert result.rows[0].capital_paid == pytest.approx(300000 / 360)
        assert result.totals.total_paid_gross > 300000

    def test_linear_pays_less_interest_than_annuity(self, annuity, linear):
        assert linear.totals.total_interest_gross < annuity.totals.total_interest_gross


@pytest.mark.parametrize("policy", [RepaymentPolicy.ANNUITY, RepaymentPolicy.LINEAR])
class TestScheduleConsistency:
    def test_rows_are_consistent(self, policy):
        schedule = build_schedule(policy, 3.8, 36.93, 25000, 250000)
        assert [row.month for row in schedule.rows] == list(range(1, 361))
        for row in schedule.rows:
            assert row.gross_paid == row.capital_paid + row.interest
            assert row.net_paid == row.gross_paid - row.deduction
            assert row.deduction == pytest.approx(row.interest * 0.3693)
            assert row.balance >= 0

    def test_totals(self, policy):
        schedule = build_schedule(policy, 3.8, 36.93, 25000, 250000)
        totals = schedule.totals
        assert totals.total_paid_gross == pytest.approx(
            math.fsum(row.gross_paid for row in schedule.rows)
        )
        assert totals.total_paid_net == pytest.approx(
            math.fsum(row.net_paid for row in schedule.rows)
        )
        assert totals.total_interest_gross == totals.total_paid_gross - 250000
        assert totals.total_interest_net == totals.total_paid_net - 250000
        assert totals.total_invested_gross == totals.total_paid_gross + 25000
        assert totals.total_invested_net == totals.total_paid_net + 25000

    def test_idempotent(self, policy):
        first = build_schedule(policy, 4.62, 36.93, 40000, 288529.7)
        second = build_schedule(policy, 4.62, 36.93, 40000, 288529.7)
        assert first == second
        assert first.policy is policy


class TestBuildSchedule:
    def test_policy_by_name(self):
        assert build_schedule("linear", 4, 30, 0, 1000).policy is RepaymentPolicy.LINEAR
        assert build_schedule("annuity", 4, 30, 0, 1000).policy is RepaymentPolicy.ANNUITY

    def test_unknown_policy(self):
        with pytest.raises(InvalidInputError) as exc:
            build_schedule("balloon", 4, 30, 0, 1000)
        assert exc.value.field == "policy"

    @pytest.mark.parametrize(
        "args, field",
        [
            ((float("nan"), 30, 0, 1000), "interest"),
            ((-1, 30, 0, 1000), "interest"),
            ((4, 101, 0, 1000), "deduction"),
            ((4, 30, -5, 1000), "savings"),
            ((4, 30, 0, -1000), "loan"),
            ((4, 30, 0, float("inf")), "loan"),
            ((7296, 30, 0, 1e7), "interest"),
            ((10000, 30, 0, 100000), "interest"),
        ],
    )
    def test_invalid_input_named(self, args, field):
        with pytest.raises(InvalidInputError) as exc:
            build_schedule(RepaymentPolicy.ANNUITY, *args)
        assert exc.value.field == field

    def test_invalid_term(self):
        with pytest.raises(InvalidInputError) as exc:
            linear_schedule(4, 30, 0, 1000, term_months=0)
        assert exc.value.field == "term_months"

    @pytest.mark.parametrize("policy", list(RepaymentPolicy))
    def test_highest_accepted_rate_stays_finite(self, policy):
        schedule = build_schedule(policy, 100.0, 30, 0, 1e7)
        totals = schedule.totals
        assert all(math.isfinite(v) for v in totals.__dict__.values())
        assert all(math.isfinite(row.net_paid) for row in schedule.rows)

    def test_rate_just_above_limit_rejected(self):
        with pytest.raises(InvalidInputError) as exc:
            linear_schedule(100.01, 30, 0, 1000)
        assert exc.value.field == "interest"
