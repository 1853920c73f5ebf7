from fastapi import APIRouter, Depends

from emi_lite.adapters.emi_calculator_session import EmiCalculatorSession
from emi_lite.adapters.in_memory_results_view import InMemoryResultsView
from emi_lite.entrypoints.http.dependencies import get_calculator_session, get_results_view
from emi_lite.entrypoints.http.dtos.calculator import CalculatorInputDTO, CalculatorPanelDTO
from emi_lite.entrypoints.http.mappers.calculator_mapper import CalculatorMapper


router = APIRouter(tags=["Calculator"])


@router.post(
    "/calculator",
    response_model=CalculatorPanelDTO,
    summary="Render calculator panel",
    description="""
    Render the calculator panel for the given control values.

    Every request starts a fresh session at the default inputs
    (principal 500000, rate 7.5%, 60 months) and applies the provided
    raw values on top. Nothing is stored between requests.

    ## Inputs
    - Values are raw strings as typed into the controls
    - Omitted fields keep their default
    - months is truncated to an integer ("60.9" → 60)

    ## Example
    ```
    POST /v1/calculator
    {"principal": "1000000"}
    ```
    """,
    responses={
        422: {
            "description": "Unparseable control value",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Validation failed",
                        "code": "VALIDATION_ERROR",
                        "errors": [
                            {
                                "field": "principal",
                                "message": "Must be a number: abc",
                                "code": "INVALID_NUMBER",
                            }
                        ],
                    }
                }
            },
        },
    },
)
def render_calculator(
    payload: CalculatorInputDTO,
    session: EmiCalculatorSession = Depends(get_calculator_session),
    view: InMemoryResultsView = Depends(get_results_view),
) -> CalculatorPanelDTO:
    """Apply control values to a fresh session and return what it rendered."""
    session.update(
        principal=payload.principal,
        annual_rate_percent=payload.annual_rate_percent,
        months=payload.months,
    )

    return CalculatorMapper.to_panel(view)


@router.post(
    "/calculator/reset",
    response_model=CalculatorPanelDTO,
    summary="Reset calculator panel",
    description="Render the calculator panel at its default inputs.",
)
def reset_calculator(
    session: EmiCalculatorSession = Depends(get_calculator_session),
    view: InMemoryResultsView = Depends(get_results_view),
) -> CalculatorPanelDTO:
    session.reset()

    return CalculatorMapper.to_panel(view)
