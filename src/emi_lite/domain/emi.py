from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoanTerms:
    principal: float
    annual_rate_percent: float
    months: int


@dataclass(frozen=True, slots=True)
class EmiResult:
    emi: float
    total_payment: float
    total_interest: float


DEFAULT_LOAN_TERMS = LoanTerms(principal=500_000.0, annual_rate_percent=7.5, months=60)

ZERO_RESULT = EmiResult(emi=0.0, total_payment=0.0, total_interest=0.0)


def calculate_emi(principal: float, annual_rate_percent: float, months: int) -> EmiResult:
    """
    Equated monthly installment for an amortizing loan.

    emi = P * r * (1+r)^n / ((1+r)^n - 1), with r = annual_rate_percent / 12 / 100

    Evaluated as P * r / (1 - (1+r)^-n), which stays finite when (1+r)^n
    alone would not.

    Policy:
    - Total over its numeric domain: never raises, never validates ranges.
      Negative principal or rate flow through the arithmetic.
    - months <= 0 is a degenerate tenure and yields an all-zero result.
    - A zero monthly rate amortizes linearly (principal / months).
    - No rounding; presentation is handled by emi_lite.domain.formatting.
    """
    if months <= 0:
        return ZERO_RESULT

    principal = float(principal)
    monthly_rate = annual_rate_percent / 12 / 100

    if monthly_rate == 0:
        return _linear(principal, months)

    try:
        discount = (1 + monthly_rate) ** -months
    except (OverflowError, ZeroDivisionError):
        # (1+r)^-n beyond float range: the installment tends to zero
        discount = math.inf

    if discount == 1:
        # Rate too small to register in (1+r)^n
        return _linear(principal, months)

    emi = principal * monthly_rate / (1 - discount)
    total_payment = emi * months
    return EmiResult(
        emi=emi,
        total_payment=total_payment,
        total_interest=total_payment - principal,
    )


def _linear(principal: float, months: int) -> EmiResult:
    return EmiResult(emi=principal / months, total_payment=principal, total_interest=0.0)
