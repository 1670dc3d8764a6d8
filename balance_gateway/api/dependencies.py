"""Dependency injection for FastAPI endpoints"""

from typing import Optional
from fastapi import Depends, Header, HTTPException, Query, Request
from sqlalchemy.orm import Session

from balance_gateway.infrastructure.database.session import get_db
from balance_gateway.infrastructure.database.repositories import SessionRepository
from balance_gateway.infrastructure.observability.metrics import history_rejected_counter


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_session_id(
    header_session_id: Optional[str] = Header(None, alias="X-session-ID"),
    query_session_id: Optional[str] = Query(None, alias="session_id"),
    db: Session = Depends(get_db),
) -> str:
    """
    Resolve the caller's session from the X-session-ID header or the
    session_id query parameter (header wins).

    Raises:
        HTTPException: 401 when no session is given or it was never issued
    """
    session_id = header_session_id or query_session_id
    if not session_id or not SessionRepository(db).exists(session_id):
        history_rejected_counter.labels(reason="invalid_session").inc()
        raise HTTPException(status_code=401, detail="Session ID is missing or invalid")
    return session_id
