"""
Report Service - Party-wise payments, outstanding balances and totals

All reports are read-only aggregates over the current state of the store.
Month windows are half-open: a payment dated on the 1st belongs to the month
that starts that day.
"""
from typing import List, Optional, Tuple
from datetime import date
from sqlalchemy import select, func, case

from mktrading.core.database import Store
from mktrading.models import Party, Challan, Payment

parties = Party.__table__
challans = Challan.__table__
payments = Payment.__table__

MONTH_WINDOWS = ("current", "last")


def add_months(day: date, months: int) -> date:
    """Shift the first day of a month by a number of months"""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_window(which: str, today: date) -> Tuple[date, date]:
    """Return [start, end) bounds of the current or last calendar month"""
    month_start = today.replace(day=1)
    if which == "current":
        return month_start, add_months(month_start, 1)
    if which == "last":
        return add_months(month_start, -1), month_start
    raise ValueError(f"Unknown month window: {which}")


class ReportService:
    def __init__(self, store: Store, today: Optional[date] = None):
        self.store = store
        self.today = today

    def _today(self) -> date:
        return self.today or date.today()

    def _payments_by_party(self, which: str) -> List[dict]:
        start, end = month_window(which, self._today())
        total_payment = func.coalesce(func.sum(payments.c.amount), 0).label("total_payment")

        query = select(
            parties.c.id.label("party_id"),
            parties.c.name.label("party_name"),
            total_payment,
        ).select_from(
            parties.join(payments, payments.c.party_id == parties.c.id)
        ).where(
            payments.c.payment_date >= start,
            payments.c.payment_date < end
        ).group_by(
            parties.c.id, parties.c.name
        ).having(
            func.sum(payments.c.amount) > 0
        ).order_by(
            total_payment.desc(), parties.c.name
        )

        return self.store.execute(query)

    def current_month_payments(self) -> List[dict]:
        """Payments received per party since the 1st of this month"""
        return self._payments_by_party("current")

    def last_month_payments(self) -> List[dict]:
        """Payments received per party during the previous calendar month"""
        return self._payments_by_party("last")

    def outstanding(self) -> List[dict]:
        """Billed minus paid for every party that has been billed"""
        challan_totals = select(
            challans.c.party_id,
            func.sum(challans.c.amount).label("total_challan")
        ).group_by(challans.c.party_id).cte("challan_totals")

        payment_totals = select(
            payments.c.party_id,
            func.sum(payments.c.amount).label("total_paid")
        ).group_by(payments.c.party_id).cte("payment_totals")

        total_challan = func.coalesce(challan_totals.c.total_challan, 0)
        total_paid = func.coalesce(payment_totals.c.total_paid, 0)
        balance = total_challan - total_paid
        outstanding = case((balance > 0, balance), else_=0).label("outstanding")

        query = select(
            parties.c.id.label("party_id"),
            parties.c.name.label("party_name"),
            total_challan.label("total_challan"),
            total_paid.label("total_paid"),
            outstanding,
        ).select_from(
            parties
            .outerjoin(challan_totals, challan_totals.c.party_id == parties.c.id)
            .outerjoin(payment_totals, payment_totals.c.party_id == parties.c.id)
        ).where(
            total_challan > 0
        ).order_by(
            outstanding.desc(), parties.c.name
        )

        return self.store.execute(query)

    def total_incoming(self, month: Optional[str] = "all") -> dict:
        """Sum of payments for month=current|last; any other value means all time"""
        if month not in MONTH_WINDOWS:
            month = "all"
        query = select(func.coalesce(func.sum(payments.c.amount), 0).label("total_incoming"))

        if month != "all":
            start, end = month_window(month, self._today())
            query = query.where(
                payments.c.payment_date >= start,
                payments.c.payment_date < end
            )

        row = self.store.first(query)
        return {"total_incoming": float(row["total_incoming"] or 0), "month": month}
