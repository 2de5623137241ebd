"""Loan term in years value object."""

from dataclasses import dataclass

MAX_LOAN_TERM_YEARS = 100


@dataclass(frozen=True)
class LoanTermYears:
    """Loan term in whole years value object."""

    years: int

    def __post_init__(self) -> None:
        """Validate loan term."""
        if isinstance(self.years, bool) or not isinstance(self.years, int):
            raise ValueError("Loan term must be a whole number of years")
        if self.years <= 0:
            raise ValueError("Loan term must be positive")
        if self.years > MAX_LOAN_TERM_YEARS:
            raise ValueError(f"Loan term must be at most {MAX_LOAN_TERM_YEARS} years")

    @property
    def months(self) -> int:
        """Get number of monthly payments."""
        return self.years * 12
