from pydantic import BaseModel, ConfigDict, Field


class EmiRequestDTO(BaseModel):
    """Request payload for calculating an EMI."""

    principal: float = Field(
        description="Loan amount",
        examples=[500000],
        allow_inf_nan=False,
    )
    annual_rate_percent: float = Field(
        description="Annual interest rate in percent (7.5 means 7.5% per year)",
        examples=[7.5],
        allow_inf_nan=False,
    )
    months: int = Field(
        description="Loan tenure in months. Zero or negative yields an all-zero result",
        examples=[60],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "principal": 500000,
                "annual_rate_percent": 7.5,
                "months": 60,
            }
        }
    )


class FormattedEmiDTO(BaseModel):
    """EMI figures rendered for display (₹, en-IN grouping)."""

    emi: str = Field(description="Monthly installment", examples=["₹10,018.97"])
    total_payment: str = Field(description="Sum of all installments", examples=["₹6,01,138.46"])
    total_interest: str = Field(description="Total payment minus principal", examples=["₹1,01,138.46"])


class EmiResponseDTO(BaseModel):
    """Response with the calculated EMI, unrounded and formatted."""

    emi: float = Field(description="Monthly installment (unrounded)", examples=[10018.9743])
    total_payment: float = Field(description="emi × months (unrounded)", examples=[601138.46])
    total_interest: float = Field(
        description="total_payment - principal (unrounded)", examples=[101138.46]
    )
    formatted: FormattedEmiDTO

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "emi": 10018.974302,
                "total_payment": 601138.4581,
                "total_interest": 101138.4581,
                "formatted": {
                    "emi": "₹10,018.97",
                    "total_payment": "₹6,01,138.46",
                    "total_interest": "₹1,01,138.46",
                },
            }
        }
    )
