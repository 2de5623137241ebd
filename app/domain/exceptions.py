"""Domain errors."""


class ZeroInterestRateError(ValueError):
    """Raised when the amortized total-cost formula is asked for a 0% loan.

    With a zero monthly rate the formula's denominator ``1 - (1 + r) ** -n``
    is zero, so the total cost is undefined rather than merely large.
    """

    def __init__(self) -> None:
        super().__init__("Total loan cost is undefined for a 0% annual rate")


class LoanCostOverflowError(ValueError):
    """Raised when a payment or total cost does not fit in a float."""

    def __init__(self) -> None:
        super().__init__("Total loan cost is too large to represent")
