# app/services/transactions.py
"""
Transaction operations scoped to the authenticated owner.

Every lookup filters on both id and owner, so a record that belongs to
someone else is indistinguishable from one that does not exist.
"""
import logging
import uuid
from typing import List, Union

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from app.core.security import CurrentUser
from app.crud.transaction import (
    create_transaction_for_user,
    delete_transaction,
    get_recent_transactions,
    get_transaction_by_id,
    update_transaction,
)
from app.models.transaction import Transaction, TransactionType
from app.schemas.transaction import TransactionCreate, TransactionUpdate

logger = logging.getLogger(__name__)

INVALID_TYPE_MESSAGE = 'Invalid type. Must be "earn" or "expense"'


def parse_type(value: str) -> TransactionType:
    try:
        return TransactionType(value)
    except ValueError:
        raise ValidationError(INVALID_TYPE_MESSAGE)


def parse_id(value: Union[str, uuid.UUID]) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(value)
    except ValueError:
        raise NotFoundError()


async def create(db: AsyncSession, owner: CurrentUser, data: TransactionCreate) -> Transaction:
    tx_type = parse_type(data.type)
    values = data.model_dump(include={"date", "details", "amount"})
    tx = await create_transaction_for_user(owner.id, values, tx_type, db)
    logger.info(f"Transaction {tx.id} recorded for user {owner.id}")
    return tx


async def list_recent(db: AsyncSession, owner: CurrentUser, limit: int = 100) -> List[Transaction]:
    return await get_recent_transactions(db, owner.id, limit=limit)


async def update(
    db: AsyncSession,
    owner: CurrentUser,
    transaction_id: Union[str, uuid.UUID],
    data: TransactionUpdate,
) -> Transaction:
    # Reject a bad type before touching the store
    tx_type = parse_type(data.type)
    tx = await get_transaction_by_id(parse_id(transaction_id), owner.id, db)
    if not tx:
        raise NotFoundError()

    values = {
        field: value
        for field, value in data.model_dump(include={"date", "details", "amount"}).items()
        if value is not None
    }
    values["type"] = tx_type
    tx = await update_transaction(tx, values, db)
    logger.info(f"Transaction {tx.id} updated by user {owner.id}")
    return tx


async def delete(db: AsyncSession, owner: CurrentUser, transaction_id: Union[str, uuid.UUID]) -> None:
    tx = await get_transaction_by_id(parse_id(transaction_id), owner.id, db)
    if not tx:
        raise NotFoundError()
    await delete_transaction(tx, db)
    logger.info(f"Transaction {transaction_id} deleted by user {owner.id}")
