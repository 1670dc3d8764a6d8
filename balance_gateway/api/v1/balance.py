"""GET /api/v1/balance/history - Candlestick history of the account balance"""

import time
import logging
from datetime import datetime, timezone
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from balance_gateway.api.v1.schemas import HistoryItem
from balance_gateway.api.dependencies import get_request_id, get_session_id
from balance_gateway.config import settings
from balance_gateway.infrastructure.database.session import get_db
from balance_gateway.infrastructure.database.repositories import TransactionRepository, SavingsGoalRepository
from balance_gateway.domain.history import compute_history
from balance_gateway.domain.intervals import parse_interval, validate_count
from balance_gateway.domain.exceptions import InvalidIntervalError, DataIntegrityError
from balance_gateway.infrastructure.observability.metrics import (
    record_history,
    history_rejected_counter,
    data_integrity_fault_counter,
)
from balance_gateway.infrastructure.observability.logging import log_history

router = APIRouter()


@router.get("/balance/history", response_model=List[HistoryItem])
def get_balance_history(
    request: Request,
    interval: str = Query(settings.history_default_interval, description="hour | day | week | month | year"),
    intervals: int = Query(settings.history_default_intervals, description="Number of buckets, 1 to 200"),
    session_id: str = Depends(get_session_id),
    db: Session = Depends(get_db),
):
    """
    Reconstruct the balance history of the session, most recent bucket first.

    Flow:
    1. Validate interval unit and bucket count
    2. Fetch the session's transactions and savings goals
    3. Simulate savings contributions and bucket the running balance
    4. Return one OHLV item per bucket
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        # 1. Reject bad input before touching storage
        parse_interval(interval)
        validate_count(intervals)

        # 2. Fetch ledger snapshot
        transactions = TransactionRepository(db).list_for_session(session_id)
        goals = SavingsGoalRepository(db).list_for_session(session_id)

        # 3. Compute
        buckets = compute_history(
            transactions,
            goals,
            interval,
            intervals,
            now=datetime.now(timezone.utc),
        )

    except InvalidIntervalError as e:
        history_rejected_counter.labels(reason="invalid_interval").inc()
        logging.warning(f"Invalid history request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=405, detail=str(e))

    except DataIntegrityError as e:
        data_integrity_fault_counter.labels(endpoint="balance_history").inc()
        logging.error(f"Data integrity fault: {e}", extra={"request_id": request_id, "session_id": session_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration = time.time() - start_time
    record_history(interval, duration)
    log_history(request_id, session_id, interval, intervals, len(transactions), duration * 1000)

    return [HistoryItem.from_bucket(bucket) for bucket in buckets]
