"""Calculate mortgage cost use case."""

from typing import Optional

from app.application.dtos.mortgage import MortgageCostBreakdown
from app.application.ports.mortgage_cost_cache import MortgageCostCache
from app.domain.services.mortgage_cost_calculator import total_loan_cost_for
from app.domain.value_objects.annual_rate import AnnualRate
from app.domain.value_objects.loan_terms import LoanTerms
from app.domain.value_objects.principal import Principal
from app.infrastructure.logging.logger import log_mortgage_calculation


class CalculateMortgageCost:
    """Use case for calculating the total cost of a mortgage."""

    DEFAULT_YEARS_OPTIONS = [10, 15, 20, 30]

    def __init__(self, cache: Optional[MortgageCostCache] = None) -> None:
        """
        Initialize use case.

        Args:
            cache: Total cost cache (None disables caching)
        """
        self._cache = cache

    def calculate(self, terms: LoanTerms, request_id: str = "-") -> MortgageCostBreakdown:
        """
        Calculate mortgage cost breakdown.

        Args:
            terms: Validated loan terms
            request_id: Identifier used to correlate log lines

        Returns:
            Cost breakdown with monthly payment, total cost and total interest

        Raises:
            ZeroInterestRateError: If the annual rate is 0%
            LoanCostOverflowError: If the total is too large to represent
        """
        cached_total = self._cache.get(terms.cache_key) if self._cache is not None else None
        cache_hit = cached_total is not None
        if cache_hit:
            total_cost = cached_total
        else:
            total_cost = total_loan_cost_for(terms)
            if self._cache is not None:
                self._cache.set(terms.cache_key, total_cost)

        log_mortgage_calculation(
            request_id=request_id,
            principal=terms.principal.amount,
            annual_rate_percent=terms.rate.percent,
            years=terms.term.years,
            total_cost=total_cost,
            cache_hit=cache_hit,
        )

        monthly = total_cost / terms.months
        return MortgageCostBreakdown(
            principal=terms.principal.amount,
            annual_rate_percent=terms.rate.percent,
            years=terms.term.years,
            term_months=terms.months,
            monthly_payment=round(monthly, 2),
            total_cost=round(total_cost, 2),
            total_interest=round(total_cost - terms.principal.amount, 2),
        )

    def calculate_multiple_terms(
        self,
        principal: float,
        annual_rate_percent: float,
        years_options: Optional[list[int]] = None,
        request_id: str = "-",
    ) -> list[MortgageCostBreakdown]:
        """
        Calculate cost breakdowns for several loan terms.

        Args:
            principal: Borrowed amount
            annual_rate_percent: Nominal annual rate as percentage
            years_options: Terms in years (default: [10, 15, 20, 30])
            request_id: Identifier used to correlate log lines

        Returns:
            Breakdowns in the order of the given terms

        Raises:
            ValueError: If principal or rate is invalid
        """
        if years_options is None:
            years_options = self.DEFAULT_YEARS_OPTIONS

        # Only invalid terms are skipped; principal and rate errors propagate
        Principal(principal)
        AnnualRate(annual_rate_percent)

        breakdowns = []
        for years in years_options:
            try:
                terms = LoanTerms.from_values(principal, annual_rate_percent, years)
            except ValueError:
                # Skip invalid terms
                continue
            breakdowns.append(self.calculate(terms, request_id=request_id))

        return breakdowns
