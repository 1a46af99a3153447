from __future__ import annotations

import bisect
import logging
import math
from datetime import date, datetime
from typing import List, Optional, Sequence, Tuple, Union

import pandas as pd

from amortlib import config
from amortlib.cashflows import CashFlow, CashFlowKind, FixedRateCoupon, Redemption
from amortlib.conventions.calendars import Calendar
from amortlib.utils.date import to_date

logger = logging.getLogger(__name__)


class EmptyCashFlowError(ValueError):
    """Raised when a bond would be built without any cash flows."""


class Bond:
    """Cash-flow container shared by the bond constructors.

    Subclasses populate ``_cashflows`` with coupons, then call
    ``_add_redemptions`` and ``_ensure_cashflows``. Once built the leg is
    exposed read-only.
    """

    def __init__(
        self,
        settlement_days: int = config.DEFAULT_SETTLEMENT_DAYS,
        calendar: Optional[Calendar] = None,
        issue_date: Union[date, datetime, str, None] = None,
    ):
        if settlement_days < 0:
            raise ValueError("Settlement days must be non-negative")
        self.settlement_days = int(settlement_days)
        self.calendar = calendar if calendar is not None else config.get_default_calendar()
        self.issue_date = to_date(issue_date) if issue_date is not None else None
        self.maturity_date: Optional[date] = None

        self._cashflows: List[CashFlow] = []
        self._notionals: List[float] = []
        self._notional_schedule: List[Optional[date]] = []

    # Cash flows
    @property
    def cashflows(self) -> Tuple[CashFlow, ...]:
        return tuple(self._cashflows)

    @property
    def coupons(self) -> Tuple[FixedRateCoupon, ...]:
        return tuple(cf for cf in self._cashflows if cf.kind == CashFlowKind.COUPON)

    @property
    def redemptions(self) -> Tuple[Redemption, ...]:
        return tuple(cf for cf in self._cashflows if cf.kind == CashFlowKind.REDEMPTION)

    def redemption(self) -> Redemption:
        """Final principal repayment."""
        redemptions = self.redemptions
        if not redemptions:
            raise EmptyCashFlowError("bond has no redemptions")
        return redemptions[-1]

    # Notionals
    @property
    def notionals(self) -> Tuple[float, ...]:
        """Distinct outstanding notionals over the life of the bond, ending at zero."""
        return tuple(self._notionals)

    @property
    def notional_schedule(self) -> Tuple[Optional[date], ...]:
        """Dates on which the notional changes; the first entry is None (issue)."""
        return tuple(self._notional_schedule)

    def notional(self, as_of: Union[date, datetime, str]) -> float:
        """Outstanding notional on ``as_of``, after any redemption paid that day."""
        as_of = to_date(as_of)
        if as_of > self._notional_schedule[-1]:
            return 0.0
        dates = self._notional_schedule[1:]
        index = bisect.bisect_left(dates, as_of) + 1
        if as_of < self._notional_schedule[index]:
            return self._notionals[index - 1]
        return self._notionals[index]

    # Settlement
    def settlement_date(self, trade_date: Union[date, datetime, str]) -> date:
        """Trade date plus settlement lag, never before issue."""
        settlement = self.calendar.add_business_days(to_date(trade_date), self.settlement_days)
        if self.issue_date is not None:
            return max(settlement, self.issue_date)
        return settlement

    # Reporting
    def cashflow_table(self) -> pd.DataFrame:
        """One row per cash flow, in payment order."""
        rows = []
        for cf in self._cashflows:
            row = {"date": cf.payment_date, "kind": cf.kind.value, "amount": cf.amount}
            if cf.kind == CashFlowKind.COUPON:
                row.update(
                    nominal=cf.nominal,
                    rate=cf.rate,
                    accrual_start=cf.accrual_start,
                    accrual_end=cf.accrual_end,
                    accrual_period=cf.accrual_period,
                )
            rows.append(row)
        columns = [
            "date", "kind", "nominal", "rate",
            "accrual_start", "accrual_end", "accrual_period", "amount",
        ]
        return pd.DataFrame(rows, columns=columns)

    def payment_table(self) -> pd.DataFrame:
        """Interest, principal and total debt service per payment date."""
        flows = self.cashflow_table()
        table = flows.pivot_table(
            index="date", columns="kind", values="amount", aggfunc="sum", fill_value=0.0
        )
        table = table.reindex(
            columns=[CashFlowKind.COUPON.value, CashFlowKind.REDEMPTION.value], fill_value=0.0
        ).rename(
            columns={CashFlowKind.COUPON.value: "interest", CashFlowKind.REDEMPTION.value: "principal"}
        )
        table.columns.name = None
        table["total"] = table["interest"] + table["principal"]
        return table

    # Construction helpers
    def _calculate_notionals_from_cashflows(self) -> None:
        notionals: List[float] = []
        schedule: List[Optional[date]] = [None]
        last_payment: Optional[date] = None

        for cf in self._cashflows:
            if cf.kind != CashFlowKind.COUPON:
                continue
            if not notionals:
                notionals.append(cf.nominal)
            elif not math.isclose(cf.nominal, notionals[-1], rel_tol=config.NOTIONAL_TOLERANCE):
                # The previous notional is redeemed with the last coupon paid on it
                notionals.append(cf.nominal)
                schedule.append(last_payment)
            last_payment = cf.payment_date

        if not notionals:
            raise EmptyCashFlowError("no coupons provided")

        notionals.append(0.0)
        schedule.append(last_payment)
        self._notionals = notionals
        self._notional_schedule = schedule

    def _add_redemptions(self, amounts: Sequence[float]) -> None:
        """Append one redemption per notional step and restore date order."""
        steps = self._notional_schedule[1:]
        if len(amounts) != len(steps):
            raise ValueError(
                f"Expected {len(steps)} redemptions, one per notional step, got {len(amounts)}"
            )
        for when, amount in zip(steps, amounts):
            self._cashflows.append(Redemption(payment_date=when, amount=float(amount)))
        # Stable sort keeps redemptions after coupons paid on the same date
        self._cashflows.sort(key=lambda cf: cf.payment_date)

    def _ensure_cashflows(self) -> None:
        if not self._cashflows:
            raise EmptyCashFlowError("bond with no cashflows!")
