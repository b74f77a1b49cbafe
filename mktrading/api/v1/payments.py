"""
Payments API Routes
"""
from fastapi import APIRouter, Depends, status
from typing import List

from mktrading.core.database import Store, get_store
from mktrading.core.security import get_current_user
from mktrading.schemas import PaymentCreate, PaymentUpdate, PaymentResponse, OkResponse
from mktrading.services.payment_service import PaymentService

router = APIRouter(prefix="/payments", tags=["Payments"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[PaymentResponse])
async def list_payments(store: Store = Depends(get_store)):
    """List all payments, latest first, with party name"""
    return PaymentService(store).list()


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(payment_data: PaymentCreate, store: Store = Depends(get_store)):
    """Record a payment received from a party"""
    return PaymentService(store).create(payment_data)


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(payment_id: int, store: Store = Depends(get_store)):
    return PaymentService(store).get(payment_id)


@router.put("/{payment_id}", response_model=OkResponse)
async def update_payment(payment_id: int, payment_data: PaymentUpdate, store: Store = Depends(get_store)):
    PaymentService(store).update(payment_id, payment_data)
    return {"ok": True}


@router.delete("/{payment_id}", response_model=OkResponse)
async def delete_payment(payment_id: int, store: Store = Depends(get_store)):
    PaymentService(store).delete(payment_id)
    return {"ok": True}
