"""
Office Expenses API Routes
"""
from fastapi import APIRouter, Depends, status
from typing import List

from mktrading.core.database import Store, get_store
from mktrading.core.security import get_current_user
from mktrading.schemas import (
    OfficeExpenseCreate, OfficeExpenseUpdate, OfficeExpenseResponse, OkResponse
)
from mktrading.services.expense_service import OfficeExpenseService

router = APIRouter(prefix="/office-expenses", tags=["Office Expenses"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[OfficeExpenseResponse])
async def list_office_expenses(store: Store = Depends(get_store)):
    """List all office expenses, latest first"""
    return OfficeExpenseService(store).list()


@router.post("", response_model=OfficeExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_office_expense(expense_data: OfficeExpenseCreate, store: Store = Depends(get_store)):
    """Create a new office expense"""
    return OfficeExpenseService(store).create(expense_data)


@router.get("/{expense_id}", response_model=OfficeExpenseResponse)
async def get_office_expense(expense_id: int, store: Store = Depends(get_store)):
    return OfficeExpenseService(store).get(expense_id)


@router.put("/{expense_id}", response_model=OkResponse)
async def update_office_expense(expense_id: int, expense_data: OfficeExpenseUpdate, store: Store = Depends(get_store)):
    OfficeExpenseService(store).update(expense_id, expense_data)
    return {"ok": True}


@router.delete("/{expense_id}", response_model=OkResponse)
async def delete_office_expense(expense_id: int, store: Store = Depends(get_store)):
    OfficeExpenseService(store).delete(expense_id)
    return {"ok": True}
