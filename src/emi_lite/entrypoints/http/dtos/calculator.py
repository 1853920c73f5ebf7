from pydantic import BaseModel, ConfigDict, Field

from emi_lite.entrypoints.http.dtos.emi import FormattedEmiDTO


class CalculatorInputDTO(BaseModel):
    """Raw control values; omitted fields keep their default."""

    principal: str | None = Field(
        default=None,
        description="Loan amount as entered",
        examples=["500000"],
    )
    annual_rate_percent: str | None = Field(
        default=None,
        description="Annual interest rate in percent as entered",
        examples=["7.5"],
    )
    months: str | None = Field(
        default=None,
        description="Tenure in months as entered (fractions are truncated)",
        examples=["60"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "principal": "1000000",
                "annual_rate_percent": "8.5",
                "months": "120",
            }
        }
    )


class InputDisplayDTO(BaseModel):
    """Current inputs as shown next to their controls."""

    principal: str = Field(examples=["5,00,000"])
    annual_rate_percent: str = Field(examples=["7.5"])
    months: str = Field(examples=["60"])


class CalculatorPanelDTO(BaseModel):
    """Everything the calculator page shows after a recomputation."""

    inputs: InputDisplayDTO
    results: FormattedEmiDTO
    results_visible: bool = Field(description="Whether the results panel is shown")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "inputs": {
                    "principal": "5,00,000",
                    "annual_rate_percent": "7.5",
                    "months": "60",
                },
                "results": {
                    "emi": "₹10,018.97",
                    "total_payment": "₹6,01,138.46",
                    "total_interest": "₹1,01,138.46",
                },
                "results_visible": True,
            }
        }
    )
