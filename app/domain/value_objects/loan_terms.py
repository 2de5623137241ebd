"""Loan terms value object."""

from dataclasses import dataclass

from app.domain.value_objects.annual_rate import AnnualRate
from app.domain.value_objects.loan_term_years import LoanTermYears
from app.domain.value_objects.principal import Principal


@dataclass(frozen=True)
class LoanTerms:
    """Principal, rate and term of a fixed-rate amortized loan."""

    principal: Principal
    rate: AnnualRate
    term: LoanTermYears

    @classmethod
    def from_values(
        cls,
        principal: float,
        annual_rate_percent: float,
        years: int,
    ) -> "LoanTerms":
        """
        Build loan terms from raw numbers.

        Args:
            principal: Borrowed amount
            annual_rate_percent: Nominal annual rate as percentage (e.g., 6.5)
            years: Loan term in whole years

        Returns:
            Validated loan terms

        Raises:
            ValueError: If any value is outside its domain
        """
        return cls(
            principal=Principal(principal),
            rate=AnnualRate(annual_rate_percent),
            term=LoanTermYears(years),
        )

    @property
    def monthly_rate(self) -> float:
        """Get monthly interest rate as decimal."""
        return self.rate.monthly_rate

    @property
    def months(self) -> int:
        """Get number of monthly payments."""
        return self.term.months

    @property
    def cache_key(self) -> tuple[float, float, int]:
        """Get (principal, annual_rate_percent, years) for memoization."""
        return (self.principal.amount, self.rate.percent, self.term.years)
