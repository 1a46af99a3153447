"""Amortizing bond construction public API."""

from .amortizing import AmortizingFixedRateBond, TypeMismatchError, initial_notional
from .base import Bond, EmptyCashFlowError
from .sinking import (
    IncompatibleFrequencyError,
    sinking_notionals,
    sinking_redemptions,
    sinking_schedule,
)

__all__ = [
    "AmortizingFixedRateBond",
    "Bond",
    "EmptyCashFlowError",
    "IncompatibleFrequencyError",
    "TypeMismatchError",
    "initial_notional",
    "sinking_notionals",
    "sinking_redemptions",
    "sinking_schedule",
]
