"""
Party Service - Customers/vendors and lookups by challan
"""
from typing import List, Optional
from sqlalchemy import select, insert, update, delete

from mktrading.core.database import Store, row_to_dict
from mktrading.core.exceptions import ValidationError, NotFoundError
from mktrading.models import Party, Challan
from mktrading.schemas import PartyCreate, PartyUpdate

parties = Party.__table__
challans = Challan.__table__


class PartyService:
    def __init__(self, store: Store):
        self.store = store

    def _values(self, party_data) -> dict:
        if not party_data.name or not party_data.name.strip():
            raise ValidationError("Party name required")
        return {
            "name": party_data.name.strip(),
            "contact": party_data.contact or None,
            "address": party_data.address or None,
            "gstin": party_data.gstin or None,
        }

    def list(self) -> List[dict]:
        return self.store.execute(
            select(parties).order_by(parties.c.name, parties.c.id)
        )

    def get(self, party_id: int) -> dict:
        party = self.store.first(select(parties).where(parties.c.id == party_id))
        if not party:
            raise NotFoundError("Party not found")
        return party

    def create(self, party_data: PartyCreate) -> dict:
        values = self._values(party_data)
        row = self.store.first(insert(parties).values(**values).returning(parties.c.id))
        return row_to_dict({"id": row["id"], **values})

    def update(self, party_id: int, party_data: PartyUpdate) -> dict:
        values = self._values(party_data)
        row = self.store.first(
            update(parties).where(parties.c.id == party_id).values(**values).returning(parties.c.id)
        )
        if not row:
            raise NotFoundError("Party not found")
        return row_to_dict({"id": party_id, **values})

    def delete(self, party_id: int) -> None:
        self.store.execute(delete(parties).where(parties.c.id == party_id))

    def search_by_challan_number(self, challan_number: Optional[str]) -> dict:
        """Find the party a challan was issued to"""
        challan_number = (challan_number or "").strip()
        if not challan_number:
            raise ValidationError("challanNumber required")

        query = select(
            parties,
            challans.c.challan_number,
            challans.c.date.label("challan_date"),
            challans.c.amount.label("challan_amount"),
            challans.c.description,
        ).select_from(
            challans.join(parties, parties.c.id == challans.c.party_id)
        ).where(
            challans.c.challan_number == challan_number
        )

        row = self.store.first(query)
        if not row:
            raise NotFoundError("No party found for this challan number")
        return row
