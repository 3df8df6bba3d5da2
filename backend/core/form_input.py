"""Turn text typed into the simulation form into engine parameters.

Everything here is forgiving: text that cannot be read as a number becomes 0
instead of raising, so the engine only ever sees well-formed parameters.
"""

from __future__ import annotations

import logging
import math
import re
from typing import List

from backend.schemas.form import RatePreset, SimulationForm
from backend.schemas.simulation import (
    MAX_AMOUNT,
    MAX_DURATION_YEARS,
    MAX_RATE,
    SimulationParams,
)

logger = logging.getLogger(__name__)

MAX_AMOUNT_DIGITS = 12

RATE_PRESETS: List[RatePreset] = [
    RatePreset(label="3% (stable)", value=3),
    RatePreset(label="5% (balanced)", value=5),
    RatePreset(label="7% (aggressive)", value=7),
]

# full-width digits and the dash look-alikes an IME may produce
_HALFWIDTH = str.maketrans(
    {
        **{chr(0xFF10 + i): str(i) for i in range(10)},
        "ー": "-",  # katakana prolonged sound mark
        "—": "-",  # em dash
        "－": "-",  # full-width hyphen-minus
        "−": "-",  # minus sign
    }
)

_LEADING_INT = re.compile(r"^\s*([+-]?)(\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_NON_DIGIT = re.compile(r"\D")


def to_halfwidth(value: str) -> str:
    return value.translate(_HALFWIDTH)


def format_amount(value: int) -> str:
    """Group thousands with commas, e.g. 1234567 -> '1,234,567'."""
    return f"{value:,}"


def normalize_amount_text(value: str, previous: str = "", allow_negative: bool = False) -> str:
    """
    Normalise one keystroke's worth of amount text for display.

    Steps:
      1) Full-width digits and dash variants become their ASCII forms.
      2) The value is negative only if allowed and it starts with '-'.
      3) Everything but digits is dropped.
      4) Nothing left -> '' (or a lone '-' while a negative value is being typed).
      5) More than MAX_AMOUNT_DIGITS digits -> the edit is rejected, `previous` is kept.
      6) Otherwise the digits are regrouped with thousands separators.
    """
    normalized = to_halfwidth(value)
    is_negative = allow_negative and normalized.startswith("-")
    raw_digits = _NON_DIGIT.sub("", normalized)

    if not raw_digits:
        return "-" if is_negative else ""

    if len(raw_digits) > MAX_AMOUNT_DIGITS:
        return previous

    formatted = format_amount(int(raw_digits))
    return f"-{formatted}" if is_negative else formatted


def _clamp(value, low, high):
    return max(low, min(value, high))


def _leading_int(text: str, limit: int) -> int:
    """Leading signed integer of `text`, clamped to +/- limit; 0 when there is none."""
    match = _LEADING_INT.match(text)
    if not match:
        return 0
    sign, digits = match.group(1), match.group(2).lstrip("0")
    # too many digits to fit: clamp without converting the whole run
    if len(digits) > len(str(limit)):
        magnitude = limit
    else:
        magnitude = min(int(digits or "0"), limit)
    return -magnitude if sign == "-" else magnitude


def parse_amount(text: str) -> int:
    """Read a comma-grouped amount; blank or a lone '-' counts as 0."""
    normalized = to_halfwidth(text).replace(",", "")
    if normalized in ("", "-"):
        return 0
    return _leading_int(normalized, MAX_AMOUNT)


def parse_rate(text: str) -> float:
    match = _LEADING_FLOAT.match(to_halfwidth(text))
    if not match:
        return 0.0
    rate = float(match.group(1))
    return _clamp(rate, -MAX_RATE, MAX_RATE) if math.isfinite(rate) else 0.0


def parse_years(text: str) -> int:
    return max(_leading_int(to_halfwidth(text), MAX_DURATION_YEARS), 0)


def params_from_form(form: SimulationForm) -> SimulationParams:
    """Build engine parameters from raw form text, defaulting bad entries to 0."""
    params = SimulationParams(
        initialAmount=parse_amount(form.initialAmount),
        monthlyAmount=parse_amount(form.monthlyAmount),
        annualRate=parse_rate(form.annualRate),
        durationYears=parse_years(form.durationYears),
    )
    logger.debug("form %r parsed into %r", form.model_dump(), params.model_dump())
    return params


__all__ = [
    "MAX_AMOUNT_DIGITS",
    "RATE_PRESETS",
    "format_amount",
    "normalize_amount_text",
    "params_from_form",
    "parse_amount",
    "parse_rate",
    "parse_years",
    "to_halfwidth",
]
