"""Unit tests for CalculateMortgageCost use case."""

from unittest.mock import patch

import pytest

from app.adapters.outbound.cache import InMemoryMortgageCostCache
from app.application.use_cases.calculate_mortgage_cost import CalculateMortgageCost
from app.domain.exceptions import LoanCostOverflowError, ZeroInterestRateError
from app.domain.value_objects.loan_terms import LoanTerms


class TestCalculateMortgageCost:
    """Test cases for CalculateMortgageCost."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.cache = InMemoryMortgageCostCache()
        self.calculator = CalculateMortgageCost(cache=self.cache)
        self.terms = LoanTerms.from_values(250000, 6.5, 5)

    def test_calculate_breakdown(self) -> None:
        """Test breakdown for 250,000 at 6.5% over 5 years."""
        breakdown = self.calculator.calculate(self.terms)

        assert breakdown.principal == 250000.0
        assert breakdown.annual_rate_percent == 6.5
        assert breakdown.years == 5
        assert breakdown.term_months == 60
        assert breakdown.monthly_payment == 4891.54
        assert breakdown.total_cost == 293492.22
        assert breakdown.total_interest == 43492.22

    def test_total_paid_equals_principal_plus_interest(self) -> None:
        breakdown = self.calculator.calculate(LoanTerms.from_values(412000, 5.75, 30))

        assert abs(breakdown.total_cost - (breakdown.principal + breakdown.total_interest)) < 0.01
        # Monthly payment is rounded to cents, so allow one cent per month
        assert abs(breakdown.total_cost - breakdown.monthly_payment * 360) < 3.6

    def test_result_is_cached(self) -> None:
        self.calculator.calculate(self.terms)

        assert self.cache.size() == 1
        assert self.cache.get((250000, 6.5, 5)) == pytest.approx(293492.22328093013)

    def test_cached_result_skips_computation(self) -> None:
        first = self.calculator.calculate(self.terms)

        with patch(
            "app.application.use_cases.calculate_mortgage_cost.total_loan_cost_for"
        ) as formula:
            second = self.calculator.calculate(LoanTerms.from_values(250000, 6.5, 5))

        formula.assert_not_called()
        assert second == first

    def test_without_cache(self) -> None:
        calculator = CalculateMortgageCost()

        first = calculator.calculate(self.terms)
        second = calculator.calculate(self.terms)

        assert first == second

    def test_calculation_is_logged(self) -> None:
        with patch(
            "app.application.use_cases.calculate_mortgage_cost.log_mortgage_calculation"
        ) as log:
            self.calculator.calculate(self.terms, request_id="req-1")
            self.calculator.calculate(self.terms, request_id="req-2")

        assert log.call_count == 2
        assert log.call_args_list[0].kwargs["cache_hit"] is False
        assert log.call_args_list[1].kwargs["cache_hit"] is True
        assert log.call_args_list[1].kwargs["request_id"] == "req-2"

    def test_zero_rate_raises_and_is_not_cached(self) -> None:
        with pytest.raises(ZeroInterestRateError):
            self.calculator.calculate(LoanTerms.from_values(250000, 0, 5))

        assert self.cache.size() == 0

    def test_longer_term_lowers_payment_and_raises_interest(self) -> None:
        short = self.calculator.calculate(LoanTerms.from_values(300000, 6.0, 15))
        long = self.calculator.calculate(LoanTerms.from_values(300000, 6.0, 30))

        assert long.monthly_payment < short.monthly_payment
        assert long.total_interest > short.total_interest

    def test_calculate_multiple_terms_default_options(self) -> None:
        breakdowns = self.calculator.calculate_multiple_terms(250000, 6.5)

        assert [b.years for b in breakdowns] == [10, 15, 20, 30]
        assert breakdowns[0].monthly_payment > breakdowns[-1].monthly_payment
        assert breakdowns[0].total_cost < breakdowns[-1].total_cost

    def test_calculate_multiple_terms_keeps_order(self) -> None:
        breakdowns = self.calculator.calculate_multiple_terms(
            250000, 6.5, years_options=[30, 5, 15]
        )

        assert [b.years for b in breakdowns] == [30, 5, 15]

    def test_calculate_multiple_terms_skips_invalid_terms(self) -> None:
        breakdowns = self.calculator.calculate_multiple_terms(
            250000, 6.5, years_options=[15, 0, -10, 30]
        )

        assert [b.years for b in breakdowns] == [15, 30]

    def test_calculate_multiple_terms_invalid_principal_raises(self) -> None:
        with pytest.raises(ValueError, match="Principal must be positive"):
            self.calculator.calculate_multiple_terms(0, 6.5, years_options=[15])

    def test_calculate_multiple_terms_zero_rate_raises(self) -> None:
        with pytest.raises(ZeroInterestRateError):
            self.calculator.calculate_multiple_terms(250000, 0, years_options=[15, 30])

    def test_overflowing_total_raises_and_is_not_cached(self) -> None:
        with pytest.raises(LoanCostOverflowError):
            self.calculator.calculate(LoanTerms.from_values(1e308, 6.5, 30))

        assert self.cache.size() == 0
