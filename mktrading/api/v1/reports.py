"""
Reports API Routes - Party-wise payments, outstanding and total incoming
"""
from fastapi import APIRouter, Depends
from typing import List, Optional

from mktrading.core.database import Store, get_store
from mktrading.core.security import get_current_user
from mktrading.schemas import PartyPaymentTotal, OutstandingRow, TotalIncomingResponse
from mktrading.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["Reports"], dependencies=[Depends(get_current_user)])


@router.get("/last-month-payments", response_model=List[PartyPaymentTotal])
async def get_last_month_payments(store: Store = Depends(get_store)):
    """Payments per party during the previous calendar month"""
    return ReportService(store).last_month_payments()


@router.get("/current-month-payments", response_model=List[PartyPaymentTotal])
async def get_current_month_payments(store: Store = Depends(get_store)):
    """Payments per party during the current calendar month"""
    return ReportService(store).current_month_payments()


@router.get("/outstanding", response_model=List[OutstandingRow])
async def get_outstanding(store: Store = Depends(get_store)):
    """Challan total minus payments for every billed party"""
    return ReportService(store).outstanding()


@router.get("/total-incoming", response_model=TotalIncomingResponse)
async def get_total_incoming(month: Optional[str] = None, store: Store = Depends(get_store)):
    """Sum of payments; month=current|last, anything else means all time"""
    return ReportService(store).total_incoming(month)
