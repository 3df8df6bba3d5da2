"""Monthly-compounding investment simulation with yearly reporting."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import List

from backend.schemas.simulation import (
    SimulationParams,
    SimulationResult,
    YearlySnapshot,
)

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12

_ONE = Decimal(1)


def round_half_away(value: float) -> int:
    """Round to the nearest whole unit, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    # from 2 ** 52 up every float is already a whole number
    if abs(value) >= 2 ** 52:
        return int(value)
    return int(Decimal(value).quantize(_ONE, rounding=ROUND_HALF_UP))


def simulate(params: SimulationParams) -> SimulationResult:
    """
    Simulate the investment year by year.

    Order of operations (per month):
      1) Apply growth at annualRate / 100 / 12 to the running balance.
      2) Add monthlyAmount to both the balance and the principal.

    A snapshot is recorded after every 12th month. Only the reported values are
    rounded; the running balance and principal keep full precision, and the
    balance is never floored, so heavy withdrawals can drive it negative.
    """
    monthly_rate = params.annualRate / 100 / MONTHS_PER_YEAR

    balance = float(params.initialAmount)
    principal = float(params.initialAmount)

    yearly_data: List[YearlySnapshot] = []
    for year in range(1, params.durationYears + 1):
        for _ in range(MONTHS_PER_YEAR):
            # growth first, then the contribution (not grown this month)
            balance = balance * (1 + monthly_rate)
            balance += params.monthlyAmount
            principal += params.monthlyAmount

        total_amount = round_half_away(balance)
        total_principal = round_half_away(principal)
        yearly_data.append(
            YearlySnapshot(
                year=year,
                totalPrincipal=total_principal,
                totalProfit=total_amount - total_principal,
                totalAmount=total_amount,
            )
        )

    if yearly_data:
        final_amount = yearly_data[-1].totalAmount
        total_principal = yearly_data[-1].totalPrincipal
    else:
        final_amount = total_principal = 0

    logger.debug(
        "simulated %d years: final=%d principal=%d",
        params.durationYears,
        final_amount,
        total_principal,
    )

    return SimulationResult(
        params=params,
        yearlyData=yearly_data,
        finalAmount=final_amount,
        totalPrincipal=total_principal,
        totalProfit=final_amount - total_principal,
    )


__all__ = ["MONTHS_PER_YEAR", "round_half_away", "simulate"]
