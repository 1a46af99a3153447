from .core import CashFlow, CashFlowKind, FixedRateCoupon, Redemption
from .leg import Leg, build_fixed_rate_leg

__all__ = [
    "CashFlow",
    "CashFlowKind",
    "FixedRateCoupon",
    "Redemption",
    "Leg",
    "build_fixed_rate_leg",
]
