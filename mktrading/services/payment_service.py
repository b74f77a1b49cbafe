"""
Payment Service - Money received from parties
"""
from typing import List
from sqlalchemy import select, insert, update, delete

from mktrading.core.database import Store, row_to_dict
from mktrading.core.exceptions import ValidationError, NotFoundError
from mktrading.models import Payment, Party
from mktrading.schemas import PaymentCreate, PaymentUpdate

payments = Payment.__table__
parties = Party.__table__


class PaymentService:
    def __init__(self, store: Store):
        self.store = store

    def _values(self, payment_data) -> dict:
        if not payment_data.party_id or payment_data.amount is None:
            raise ValidationError("party_id and amount required")
        return {
            "party_id": payment_data.party_id,
            "amount": payment_data.amount,
            "payment_date": payment_data.payment_date,
            "notes": payment_data.notes or None,
        }

    def _with_party(self):
        return select(
            payments,
            parties.c.name.label("party_name"),
        ).select_from(
            payments.outerjoin(parties, parties.c.id == payments.c.party_id)
        )

    def list(self) -> List[dict]:
        return self.store.execute(
            self._with_party().order_by(
                payments.c.payment_date.desc(), payments.c.created_at.desc(), payments.c.id.desc()
            )
        )

    def get(self, payment_id: int) -> dict:
        payment = self.store.first(self._with_party().where(payments.c.id == payment_id))
        if not payment:
            raise NotFoundError("Payment not found")
        return payment

    def create(self, payment_data: PaymentCreate) -> dict:
        values = self._values(payment_data)
        row = self.store.first(insert(payments).values(**values).returning(payments.c.id))
        return row_to_dict({"id": row["id"], **values})

    def update(self, payment_id: int, payment_data: PaymentUpdate) -> dict:
        values = self._values(payment_data)
        row = self.store.first(
            update(payments).where(payments.c.id == payment_id).values(**values).returning(payments.c.id)
        )
        if not row:
            raise NotFoundError("Payment not found")
        return row_to_dict({"id": payment_id, **values})

    def delete(self, payment_id: int) -> None:
        self.store.execute(delete(payments).where(payments.c.id == payment_id))
