# app/schemas/summary.py
from pydantic import BaseModel

class FinancialSummary(BaseModel):
    totalEarn: float = 0
    totalExpense: float = 0
    thisMonthEarn: float = 0
    thisMonthExpense: float = 0
    balance: float = 0
