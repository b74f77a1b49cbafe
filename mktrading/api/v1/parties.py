"""
Party API Routes
"""
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from mktrading.core.database import Store, get_store
from mktrading.core.security import get_current_user
from mktrading.schemas import (
    PartyCreate, PartyUpdate, PartyResponse, PartyChallanResponse, OkResponse
)
from mktrading.services.party_service import PartyService

router = APIRouter(prefix="/parties", tags=["Parties"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[PartyResponse])
async def list_parties(store: Store = Depends(get_store)):
    """List all parties by name"""
    return PartyService(store).list()


@router.post("", response_model=PartyResponse, status_code=status.HTTP_201_CREATED)
async def create_party(party_data: PartyCreate, store: Store = Depends(get_store)):
    """Create a new party"""
    return PartyService(store).create(party_data)


@router.get("/search-by-challan", response_model=PartyChallanResponse)
async def search_party_by_challan(
    challan_number: Optional[str] = Query(None, alias="challanNumber"),
    store: Store = Depends(get_store)
):
    """Find the party a challan number was issued to"""
    return PartyService(store).search_by_challan_number(challan_number)


@router.get("/{party_id}", response_model=PartyResponse)
async def get_party(party_id: int, store: Store = Depends(get_store)):
    return PartyService(store).get(party_id)


@router.put("/{party_id}", response_model=OkResponse)
async def update_party(party_id: int, party_data: PartyUpdate, store: Store = Depends(get_store)):
    """Replace all fields of a party"""
    PartyService(store).update(party_id, party_data)
    return {"ok": True}


@router.delete("/{party_id}", response_model=OkResponse)
async def delete_party(party_id: int, store: Store = Depends(get_store)):
    PartyService(store).delete(party_id)
    return {"ok": True}
