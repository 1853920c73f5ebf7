from __future__ import annotations

import math

from emi_lite.domain.emi import EmiResult, LoanTerms
from emi_lite.domain.errors import OutOfRangeError
from emi_lite.domain.formatting import format_currency
from emi_lite.entrypoints.http.dtos.emi import (
    EmiRequestDTO,
    EmiResponseDTO,
    FormattedEmiDTO,
)


class EmiMapper:
    """Maps between REST DTOs and domain models for EMI calculation."""

    @staticmethod
    def to_domain_terms(dto: EmiRequestDTO) -> LoanTerms:
        """
        Converts request DTO to domain LoanTerms.

        Pydantic has already enforced types; no range checks are applied here.

        Args:
            dto: Request DTO

        Returns:
            LoanTerms with the same values
        """
        return LoanTerms(
            principal=dto.principal,
            annual_rate_percent=dto.annual_rate_percent,
            months=dto.months,
        )

    @staticmethod
    def to_response(result: EmiResult) -> EmiResponseDTO:
        """
        Converts domain EmiResult to response DTO.

        Raw figures are passed through unrounded; the formatted block carries
        the display strings.

        Args:
            result: Domain EMI result

        Returns:
            Response DTO with raw and formatted figures

        Raises:
            OutOfRangeError: If a figure is not finite (JSON has no infinity)
        """
        overflowed = [
            name
            for name in ("emi", "total_payment", "total_interest")
            if not math.isfinite(getattr(result, name))
        ]
        if overflowed:
            raise OutOfRangeError("EMI exceeds the representable range", fields=overflowed)

        return EmiResponseDTO(
            emi=result.emi,
            total_payment=result.total_payment,
            total_interest=result.total_interest,
            formatted=FormattedEmiDTO(
                emi=format_currency(result.emi),
                total_payment=format_currency(result.total_payment),
                total_interest=format_currency(result.total_interest),
            ),
        )
