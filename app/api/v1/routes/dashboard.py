# app/api/v1/routes/dashboard.py
from datetime import date
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, get_today
from app.core.database import get_async_session
from app.core.security import CurrentUser
from app.schemas.common import Message
from app.schemas.summary import FinancialSummary
from app.services.summary import summarize

router = APIRouter(tags=["dashboard"])

@router.get("/financial-summary", response_model=FinancialSummary)
async def get_financial_summary(
    db: AsyncSession = Depends(get_async_session),
    user: CurrentUser = Depends(get_current_user),
    today: date = Depends(get_today),
):
    """
    Returns all-time totals plus the totals of the current calendar month:
    totalEarn, totalExpense, thisMonthEarn, thisMonthExpense and balance.
    """
    return await summarize(db, user, today)

# Mounted at the application root, outside /api/v1
welcome_router = APIRouter(tags=["dashboard"])

@welcome_router.get("/dashboard", response_model=Message)
async def dashboard(user: CurrentUser = Depends(get_current_user)):
    return {"message": f"Welcome, {user.email}"}
