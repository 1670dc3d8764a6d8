"""GET /api/v1/savingGoals - Savings goals with their simulated balances"""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from balance_gateway.api.v1.schemas import SavingsGoalItem
from balance_gateway.api.dependencies import get_request_id, get_session_id
from balance_gateway.infrastructure.database.session import get_db
from balance_gateway.infrastructure.database.repositories import TransactionRepository, SavingsGoalRepository
from balance_gateway.domain.ledger import Ledger
from balance_gateway.domain.savings import project_savings
from balance_gateway.domain.exceptions import DataIntegrityError
from balance_gateway.infrastructure.observability.metrics import data_integrity_fault_counter

router = APIRouter()


@router.get("/savingGoals", response_model=List[SavingsGoalItem])
def get_savings_goals(
    request: Request,
    session_id: str = Depends(get_session_id),
    db: Session = Depends(get_db),
):
    """
    List the session's savings goals.

    `balance` is what each goal has accumulated when the savings simulation is
    replayed over the full transaction history.
    """
    request_id = get_request_id(request)

    try:
        ledger = Ledger(TransactionRepository(db).list_for_session(session_id))
        goals = SavingsGoalRepository(db).list_for_session(session_id)
        projection = project_savings(ledger, goals)
    except DataIntegrityError as e:
        data_integrity_fault_counter.labels(endpoint="savings_goals").inc()
        logging.error(f"Data integrity fault: {e}", extra={"request_id": request_id, "session_id": session_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    return [
        SavingsGoalItem.from_goal(goal, state.accumulated_cents)
        for goal, state in zip(goals, projection.goal_states)
    ]
