from fastapi import APIRouter, Depends

from emi_lite.entrypoints.http.dependencies import get_calculate_emi_use_case
from emi_lite.entrypoints.http.dtos.emi import EmiRequestDTO, EmiResponseDTO
from emi_lite.entrypoints.http.mappers.emi_mapper import EmiMapper
from emi_lite.use_cases.calculate_emi import CalculateEmi


router = APIRouter(tags=["EMI"])


@router.post(
    "/emi",
    response_model=EmiResponseDTO,
    summary="Calculate EMI",
    description="""
    Calculate the equated monthly installment for a loan.

    ## Inputs
    - principal: loan amount
    - annual_rate_percent: yearly rate in percent (7.5 means 7.5%)
    - months: tenure in months

    ## Calculation
    - Monthly rate r = annual_rate_percent / 12 / 100
    - EMI = P × r × (1+r)^n / ((1+r)^n - 1)
    - 0% rate: EMI = principal / months
    - months <= 0: every figure is 0
    - Total payment = EMI × months
    - Total interest = total payment - principal

    No range checks are applied; negative values flow through the formula.
    A result too large for a float is reported as 400 OUT_OF_RANGE.

    ## Example
    ```
    POST /v1/emi
    {
        "principal": 500000,
        "annual_rate_percent": 7.5,
        "months": 60
    }
    ```
    """,
    responses={
        400: {
            "description": "Result beyond the representable range",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "EMI exceeds the representable range",
                        "code": "OUT_OF_RANGE",
                    }
                }
            },
        },
        422: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Invalid request parameters",
                        "code": "VALIDATION_ERROR",
                        "errors": [
                            {
                                "field": "months",
                                "message": "Input should be a valid integer",
                                "code": "int_parsing",
                            }
                        ],
                    }
                }
            },
        },
    },
)
def calculate_emi(
    payload: EmiRequestDTO,
    use_case: CalculateEmi = Depends(get_calculate_emi_use_case),
) -> EmiResponseDTO:
    """Calculate EMI endpoint following parse → map → execute → map → return."""
    # 1. Map to domain terms
    terms = EmiMapper.to_domain_terms(payload)

    # 2. Execute use case
    result = use_case.execute(terms)

    # 3. Map to response
    return EmiMapper.to_response(result)
