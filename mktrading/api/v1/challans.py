"""
Challan API Routes
"""
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from mktrading.core.database import Store, get_store
from mktrading.core.security import get_current_user
from mktrading.schemas import ChallanCreate, ChallanUpdate, ChallanResponse, OkResponse
from mktrading.services.challan_service import ChallanService

router = APIRouter(prefix="/challans", tags=["Challans"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[ChallanResponse])
async def list_challans(store: Store = Depends(get_store)):
    """List all challans, newest first, with party details"""
    return ChallanService(store).list()


@router.post("", response_model=ChallanResponse, status_code=status.HTTP_201_CREATED)
async def create_challan(challan_data: ChallanCreate, store: Store = Depends(get_store)):
    """Create a new challan"""
    return ChallanService(store).create(challan_data)


@router.get("/search-by-party", response_model=List[ChallanResponse])
async def search_challans_by_party(
    party_id: Optional[str] = Query(None, alias="partyId"),
    party_name: Optional[str] = Query(None, alias="partyName"),
    store: Store = Depends(get_store)
):
    """Challans of a party, by id or by part of its name"""
    return ChallanService(store).search_by_party(party_id=party_id, party_name=party_name)


@router.get("/{challan_id}", response_model=ChallanResponse)
async def get_challan(challan_id: int, store: Store = Depends(get_store)):
    return ChallanService(store).get(challan_id)


@router.put("/{challan_id}", response_model=OkResponse)
async def update_challan(challan_id: int, challan_data: ChallanUpdate, store: Store = Depends(get_store)):
    """Replace all fields of a challan"""
    ChallanService(store).update(challan_id, challan_data)
    return {"ok": True}


@router.delete("/{challan_id}", response_model=OkResponse)
async def delete_challan(challan_id: int, store: Store = Depends(get_store)):
    ChallanService(store).delete(challan_id)
    return {"ok": True}
