"""Amortized mortgage cost formulas."""

import math

from app.domain.exceptions import LoanCostOverflowError, ZeroInterestRateError
from app.domain.value_objects.loan_terms import LoanTerms


def monthly_payment(terms: LoanTerms) -> float:
    """
    Calculate the fixed monthly payment of an amortized loan.

    M = r * P / (1 - (1 + r) ** -n)
    Where:
    r = monthly interest rate
    P = principal
    n = number of months

    The denominator is evaluated as -expm1(-n * log1p(r)) so that rates close
    to zero keep their precision instead of rounding 1 + r to 1.

    Args:
        terms: Validated loan terms

    Returns:
        Monthly payment amount (unrounded)

    Raises:
        ZeroInterestRateError: If the monthly rate is zero in float arithmetic
        LoanCostOverflowError: If the payment is too large to represent
    """
    monthly_rate = terms.monthly_rate
    if monthly_rate == 0:
        raise ZeroInterestRateError()

    numerator = monthly_rate * terms.principal.amount
    denominator = -math.expm1(-terms.months * math.log1p(monthly_rate))
    # Subnormal rates can still underflow either side to zero
    if numerator == 0 or denominator == 0:
        raise ZeroInterestRateError()

    payment = numerator / denominator
    if not math.isfinite(payment):
        raise LoanCostOverflowError()
    return payment


def total_loan_cost_for(terms: LoanTerms) -> float:
    """
    Calculate the sum of all payments over the life of the loan.

    Args:
        terms: Validated loan terms

    Returns:
        Total amount paid (unrounded)

    Raises:
        ZeroInterestRateError: If the monthly rate is zero in float arithmetic
        LoanCostOverflowError: If the total is too large to represent
    """
    total = monthly_payment(terms) * terms.months
    if not math.isfinite(total):
        raise LoanCostOverflowError()
    return total


def total_loan_cost(principal: float, annual_rate_percent: float, years: int) -> float:
    """
    Calculate total loan cost from raw numbers.

    Args:
        principal: Borrowed amount, must be positive
        annual_rate_percent: Nominal annual rate as percentage (6.5 for 6.5%)
        years: Loan term in whole years, between 1 and 100

    Returns:
        Total amount paid over the full amortization period

    Raises:
        ValueError: If any input is outside its domain
        ZeroInterestRateError: If the annual rate is 0%
        LoanCostOverflowError: If the total is too large to represent
    """
    return total_loan_cost_for(LoanTerms.from_values(principal, annual_rate_percent, years))
