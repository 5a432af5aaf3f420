# app/crud/transaction.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import desc
from app.models.transaction import Transaction, TransactionType
from typing import Any, Dict, List, Optional
import uuid

async def get_transactions_for_user(user_id: uuid.UUID, db: AsyncSession) -> List[Transaction]:
    result = await db.execute(select(Transaction).where(Transaction.user_id == user_id))
    return list(result.scalars().all())

async def get_recent_transactions(db: AsyncSession, user_id: uuid.UUID, limit: int = 100) -> List[Transaction]:
    """Get the most recent transactions for a user, newest date first"""
    result = await db.execute(
        select(Transaction)
        .where(Transaction.user_id == user_id)
        .order_by(desc(Transaction.date), desc(Transaction.created_at))
        .limit(limit)
    )
    return list(result.scalars().all())

async def get_transaction_by_id(transaction_id: uuid.UUID, user_id: uuid.UUID, db: AsyncSession) -> Optional[Transaction]:
    result = await db.execute(
        select(Transaction).where(Transaction.id == transaction_id, Transaction.user_id == user_id)
    )
    return result.scalar_one_or_none()

async def create_transaction_for_user(
    user_id: uuid.UUID,
    values: Dict[str, Any],
    tx_type: TransactionType,
    db: AsyncSession,
) -> Transaction:
    new_tx = Transaction(**values, type=tx_type, user_id=user_id)
    db.add(new_tx)
    await db.commit()
    await db.refresh(new_tx)
    return new_tx

async def update_transaction(tx: Transaction, values: Dict[str, Any], db: AsyncSession) -> Transaction:
    for field, value in values.items():
        setattr(tx, field, value)
    db.add(tx)
    await db.commit()
    await db.refresh(tx)
    return tx

async def delete_transaction(tx: Transaction, db: AsyncSession) -> None:
    await db.delete(tx)
    await db.commit()
