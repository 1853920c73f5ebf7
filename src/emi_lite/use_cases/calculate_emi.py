from __future__ import annotations

import logging
from dataclasses import dataclass

from emi_lite.domain.emi import EmiResult, LoanTerms, calculate_emi

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalculateEmi:
    """
    Calculate the installment, total payment and total interest for loan terms.

    Input policy:
    - No range validation: any numeric terms are accepted and passed to the
      engine unchanged (negative principal or rate included)
    - months <= 0 yields an all-zero result rather than an error
    - Results are unrounded floats; callers format them for display
    """

    def execute(self, terms: LoanTerms) -> EmiResult:
        result = calculate_emi(terms.principal, terms.annual_rate_percent, terms.months)

        logger.debug(
            "EMI calculated",
            extra={
                "principal": terms.principal,
                "annual_rate_percent": terms.annual_rate_percent,
                "months": terms.months,
                "emi": result.emi,
            },
        )

        return result
