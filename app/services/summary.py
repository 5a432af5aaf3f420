# app/services/summary.py
import calendar
from datetime import date
from typing import Iterable, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import CurrentUser
from app.crud.transaction import get_transactions_for_user
from app.models.transaction import Transaction, TransactionType
from app.schemas.summary import FinancialSummary


# ────────────────────────────────────────────────────────────────────────────────
# MAIN ENTRY
# ────────────────────────────────────────────────────────────────────────────────
async def summarize(db: AsyncSession, owner: CurrentUser, today: date) -> FinancialSummary:
    """
    All-time and current-month totals for the owner's transactions.
    `today` decides which calendar month counts as "this month".
    """
    transactions = await get_transactions_for_user(owner.id, db)
    return compute_summary(transactions, today)


# ────────────────────────────────────────────────────────────────────────────────
# HELPERS
# ────────────────────────────────────────────────────────────────────────────────
def month_bounds(today: date) -> Tuple[date, date]:
    """First and last calendar day of the month containing `today`."""
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)


def _total(transactions: Iterable[Transaction], tx_type: TransactionType) -> float:
    return sum(tx.amount for tx in transactions if tx.type == tx_type)


def compute_summary(transactions: Iterable[Transaction], today: date) -> FinancialSummary:
    transactions = list(transactions)
    start, end = month_bounds(today)
    this_month = [tx for tx in transactions if start <= tx.date <= end]

    total_earn = _total(transactions, TransactionType.earn)
    total_expense = _total(transactions, TransactionType.expense)

    return FinancialSummary(
        totalEarn=total_earn,
        totalExpense=total_expense,
        thisMonthEarn=_total(this_month, TransactionType.earn),
        thisMonthExpense=_total(this_month, TransactionType.expense),
        balance=total_earn - total_expense,
    )
