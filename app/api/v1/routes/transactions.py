# app/api/v1/routes/transactions.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.schemas.common import Message
from app.schemas.transaction import (
    TransactionCreate,
    TransactionCreated,
    TransactionRead,
    TransactionUpdate,
    TransactionUpdated,
)
from app.services import transactions as transaction_service
from app.core.config import Settings
from app.core.database import get_async_session
from app.core.security import CurrentUser
from app.api.deps import get_current_user, get_settings

router = APIRouter(tags=["transactions"])

@router.post("/expense", response_model=TransactionCreated, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    tx_in: TransactionCreate,
    db: AsyncSession = Depends(get_async_session),
    user: CurrentUser = Depends(get_current_user),
):
    tx = await transaction_service.create(db, user, tx_in)
    return {"message": "Expense recorded successfully", "id": tx.id}

@router.get("/expenses", response_model=List[TransactionRead])
async def read_transactions(
    db: AsyncSession = Depends(get_async_session),
    user: CurrentUser = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    """Most recent transactions of the caller, newest date first."""
    return await transaction_service.list_recent(db, user, limit=settings.TRANSACTION_LIST_LIMIT)

@router.patch("/expense/{transaction_id}", response_model=TransactionUpdated)
async def update_transaction(
    transaction_id: str,
    tx_in: TransactionUpdate,
    db: AsyncSession = Depends(get_async_session),
    user: CurrentUser = Depends(get_current_user),
):
    tx = await transaction_service.update(db, user, transaction_id, tx_in)
    return {"message": "Expense updated successfully", "expense": tx}

@router.delete("/expense/{transaction_id}", response_model=Message)
async def delete_transaction(
    transaction_id: str,
    db: AsyncSession = Depends(get_async_session),
    user: CurrentUser = Depends(get_current_user),
):
    await transaction_service.delete(db, user, transaction_id)
    return {"message": "Expense deleted successfully"}
