"""Data contracts for the investment growth simulation."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

# twelve digits, the most the amount inputs accept
MAX_AMOUNT = 999_999_999_999
MAX_RATE = 100.0
MAX_DURATION_YEARS = 100


class SimulationParams(BaseModel):
    """Inputs required to simulate an investment's growth."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    initialAmount: int = Field(
        ...,
        ge=-MAX_AMOUNT,
        le=MAX_AMOUNT,
        description="Starting principal in whole currency units.",
    )
    monthlyAmount: int = Field(
        ...,
        ge=-MAX_AMOUNT,
        le=MAX_AMOUNT,
        description="Amount added every month; negative values are withdrawals.",
    )
    annualRate: float = Field(
        ...,
        ge=-MAX_RATE,
        le=MAX_RATE,
        description="Annual interest rate as a percentage (e.g. 5 for 5%).",
    )
    durationYears: int = Field(
        ...,
        ge=0,
        le=MAX_DURATION_YEARS,
        description="Number of full years to simulate.",
    )


class YearlySnapshot(BaseModel):
    """State of the investment at the end of one simulated year."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(..., ge=1)
    totalPrincipal: int
    totalProfit: int
    totalAmount: int


class SimulationResult(BaseModel):
    """Year-by-year series plus the final totals."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    params: SimulationParams
    yearlyData: List[YearlySnapshot]
    finalAmount: int
    totalPrincipal: int
    totalProfit: int
