"""Raw text inputs as typed into the simulation form."""

from pydantic import BaseModel, ConfigDict


class SimulationForm(BaseModel):
    model_config = ConfigDict(extra="forbid")

    initialAmount: str = ""
    monthlyAmount: str = ""
    annualRate: str = ""
    durationYears: str = ""


class RatePreset(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: float
