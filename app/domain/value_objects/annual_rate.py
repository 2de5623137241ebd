"""Nominal annual interest rate value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnnualRate:
    """Nominal annual interest rate value object."""

    percent: float  # As percentage (e.g., 6.5 for 6.5%)

    def __post_init__(self) -> None:
        """Validate annual rate."""
        if isinstance(self.percent, bool) or not isinstance(self.percent, (int, float)):
            raise ValueError("Annual rate must be a number")
        if not 0 <= self.percent <= 100:
            raise ValueError("Annual rate must be between 0 and 100 percent")

    @property
    def as_decimal(self) -> float:
        """Get annual rate as decimal (e.g., 0.065 for 6.5%)."""
        return self.percent / 100

    @property
    def monthly_rate(self) -> float:
        """Get monthly interest rate as decimal."""
        return self.as_decimal / 12

