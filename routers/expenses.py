from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from db.database import get_db
from models.expense import Expense
from schemas.expense import ExpenseCreate, ExpenseResponse
from schemas.common import CreatedResponse
from typing import List

router = APIRouter(prefix="/api/expenses", tags=["Expenses"])


@router.get("", response_model=List[ExpenseResponse])
def get_expenses(db: Session = Depends(get_db)):
    return db.query(Expense).order_by(Expense.date.desc(), Expense.id.desc()).all()


@router.post("", response_model=CreatedResponse)
def create_expense(data: ExpenseCreate, db: Session = Depends(get_db)):
    expense = Expense(
        plant_id=data.plant_id,
        type=data.type,
        amount=data.amount,
        description=data.description,
    )
    db.add(expense)
    db.commit()
    return {"id": expense.id}
