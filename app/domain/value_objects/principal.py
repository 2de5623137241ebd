"""Loan principal value object."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Principal:
    """Borrowed amount, in currency units."""

    amount: float

    def __post_init__(self) -> None:
        """Validate principal amount."""
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise ValueError("Principal must be a number")
        if not math.isfinite(self.amount):
            raise ValueError("Principal must be finite")
        if self.amount <= 0:
            raise ValueError("Principal must be positive")
