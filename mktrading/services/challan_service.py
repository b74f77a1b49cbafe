"""
Challan Service - Delivery notes issued against parties
"""
from typing import List, Optional
from decimal import Decimal
from sqlalchemy import select, insert, update, delete

from mktrading.core.database import Store, row_to_dict
from mktrading.core.exceptions import ValidationError, NotFoundError
from mktrading.models import Challan, Party
from mktrading.schemas import ChallanCreate, ChallanUpdate

challans = Challan.__table__
parties = Party.__table__


class ChallanService:
    def __init__(self, store: Store):
        self.store = store

    def _values(self, challan_data) -> dict:
        challan_number = (challan_data.challan_number or "").strip()
        if not challan_number or not challan_data.party_id:
            raise ValidationError("challan_number and party_id required")
        return {
            "challan_number": challan_number,
            "party_id": challan_data.party_id,
            "date": challan_data.date,
            "amount": challan_data.amount if challan_data.amount is not None else Decimal("0.00"),
            "description": challan_data.description or None,
        }

    def _with_party(self):
        return select(
            challans,
            parties.c.name.label("party_name"),
            parties.c.contact.label("party_contact"),
        ).select_from(
            challans.outerjoin(parties, parties.c.id == challans.c.party_id)
        )

    def list(self) -> List[dict]:
        return self.store.execute(
            self._with_party().order_by(challans.c.created_at.desc(), challans.c.id.desc())
        )

    def get(self, challan_id: int) -> dict:
        challan = self.store.first(self._with_party().where(challans.c.id == challan_id))
        if not challan:
            raise NotFoundError("Challan not found")
        return challan

    def create(self, challan_data: ChallanCreate) -> dict:
        values = self._values(challan_data)
        row = self.store.first(insert(challans).values(**values).returning(challans.c.id))
        return row_to_dict({"id": row["id"], **values})

    def update(self, challan_id: int, challan_data: ChallanUpdate) -> dict:
        values = self._values(challan_data)
        row = self.store.first(
            update(challans).where(challans.c.id == challan_id).values(**values).returning(challans.c.id)
        )
        if not row:
            raise NotFoundError("Challan not found")
        return row_to_dict({"id": challan_id, **values})

    def delete(self, challan_id: int) -> None:
        self.store.execute(delete(challans).where(challans.c.id == challan_id))

    def search_by_party(self, party_id: Optional[str] = None, party_name: Optional[str] = None) -> List[dict]:
        """Challans of one party, by exact id or by a fragment of its name"""
        party_id = (party_id or "").strip()
        party_name = (party_name or "").strip()
        if bool(party_id) == bool(party_name):
            raise ValidationError("Provide exactly one of partyId or partyName")

        query = self._with_party()

        if party_id:
            try:
                party_id = int(party_id)
            except ValueError:
                raise ValidationError("partyId must be an integer")
            query = query.where(challans.c.party_id == party_id)
        else:
            # Wildcards in the name are matched literally
            query = query.where(parties.c.name.icontains(party_name, autoescape=True))

        return self.store.execute(query.order_by(challans.c.date.desc(), challans.c.id.desc()))
