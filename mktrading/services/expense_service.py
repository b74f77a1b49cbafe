"""
Office Expense Service
"""
from typing import List
from sqlalchemy import select, insert, update, delete

from mktrading.core.database import Store, row_to_dict
from mktrading.core.exceptions import ValidationError, NotFoundError
from mktrading.models import OfficeExpense
from mktrading.schemas import OfficeExpenseCreate, OfficeExpenseUpdate

office_expenses = OfficeExpense.__table__


class OfficeExpenseService:
    def __init__(self, store: Store):
        self.store = store

    def _values(self, expense_data) -> dict:
        if expense_data.amount is None:
            raise ValidationError("amount required")
        return {
            "category": expense_data.category or None,
            "description": expense_data.description or None,
            "amount": expense_data.amount,
            "date": expense_data.date,
        }

    def list(self) -> List[dict]:
        return self.store.execute(
            select(office_expenses).order_by(office_expenses.c.date.desc(), office_expenses.c.id.desc())
        )

    def get(self, expense_id: int) -> dict:
        expense = self.store.first(select(office_expenses).where(office_expenses.c.id == expense_id))
        if not expense:
            raise NotFoundError("Expense not found")
        return expense

    def create(self, expense_data: OfficeExpenseCreate) -> dict:
        values = self._values(expense_data)
        row = self.store.first(insert(office_expenses).values(**values).returning(office_expenses.c.id))
        return row_to_dict({"id": row["id"], **values})

    def update(self, expense_id: int, expense_data: OfficeExpenseUpdate) -> dict:
        values = self._values(expense_data)
        row = self.store.first(
            update(office_expenses)
            .where(office_expenses.c.id == expense_id)
            .values(**values)
            .returning(office_expenses.c.id)
        )
        if not row:
            raise NotFoundError("Expense not found")
        return row_to_dict({"id": expense_id, **values})

    def delete(self, expense_id: int) -> None:
        self.store.execute(delete(office_expenses).where(office_expenses.c.id == expense_id))
