from __future__ import annotations

from backend.core.simulation import simulate
from backend.schemas.simulation import SimulationParams


def test_withdrawals_can_drive_balance_negative():
    """
    Withdrawing 5,000 a month from 500,000 at 3% outpaces the interest; the balance
    crosses zero during year 10 and is reported as negative, never clamped.
    """
    params = SimulationParams(
        initialAmount=500_000,
        monthlyAmount=-5_000,
        annualRate=3,
        durationYears=10,
    )

    rows = simulate(params).yearlyData

    totals = [row.totalAmount for row in rows]
    assert totals == sorted(totals, reverse=True), "balance should only shrink"
    assert rows[8].totalAmount > 0
    assert rows[9].totalAmount < 0
    assert rows[9].totalPrincipal == 500_000 - 5_000 * 120


def test_principal_goes_negative_without_a_floor():
    params = SimulationParams(
        initialAmount=0,
        monthlyAmount=-1_000,
        annualRate=0,
        durationYears=2,
    )

    result = simulate(params)

    assert [row.totalPrincipal for row in result.yearlyData] == [-12_000, -24_000]
    assert [row.totalAmount for row in result.yearlyData] == [-12_000, -24_000]
    assert result.totalProfit == 0
