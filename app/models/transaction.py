# app/models/transaction.py
import uuid
import enum
from datetime import datetime, timezone
from sqlalchemy import Column, Text, ForeignKey, Float, Date, DateTime, Enum, Index, Uuid
from app.core.database import Base

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

class TransactionType(str, enum.Enum):
    earn = "earn"
    expense = "expense"

class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_user_id_date", "user_id", "date"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    date = Column(Date, nullable=False)
    details = Column(Text, nullable=False)
    amount = Column(Float, nullable=False)
    type = Column(Enum(TransactionType, name="transaction_type"), nullable=False)

    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    def __repr__(self):
        return f"<Transaction type={self.type} amount={self.amount} date={self.date} user_id={self.user_id}>"
