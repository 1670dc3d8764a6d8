"""Data access layer for session-scoped ledger data"""

from typing import List
from sqlalchemy.orm import Session
from balance_gateway.infrastructure.database.models import SessionRecord, TransactionRecord, SavingsGoalRecord
from balance_gateway.domain.models import Transaction, SavingsGoal
from balance_gateway.domain.exceptions import DataIntegrityError
from balance_gateway.utils.date_utils import parse_timestamp


class SessionRepository:
    """Repository for session lookups"""

    def __init__(self, db: Session):
        self.db = db

    def exists(self, session_id: str) -> bool:
        """Whether the session id has been issued"""
        return self.db.get(SessionRecord, session_id) is not None


class TransactionRepository:
    """Repository for ledger transactions"""

    def __init__(self, db: Session):
        self.db = db

    def list_for_session(self, session_id: str) -> List[Transaction]:
        """
        Fetch all transactions of a session as domain objects (unordered).

        Raises:
            DataIntegrityError: If a stored date or type cannot be interpreted
        """
        records = (
            self.db.query(TransactionRecord)
            .filter(TransactionRecord.session_id == session_id)
            .all()
        )
        return [self._to_domain(record) for record in records]

    @staticmethod
    def _to_domain(record: TransactionRecord) -> Transaction:
        if record.type not in ("deposit", "withdrawal"):
            raise DataIntegrityError(
                f"Transaction {record.transaction_id} has unknown type {record.type!r}"
            )
        if record.amount is None or record.amount < 0:
            raise DataIntegrityError(
                f"Transaction {record.transaction_id} has invalid amount {record.amount!r}"
            )
        return Transaction(
            transaction_id=str(record.transaction_id),
            timestamp=parse_timestamp(record.date),
            amount_cents=record.amount,
            type=record.type,
        )


class SavingsGoalRepository:
    """Repository for savings goals"""

    def __init__(self, db: Session):
        self.db = db

    def list_for_session(self, session_id: str) -> List[SavingsGoal]:
        """
        Fetch a session's savings goals in listing (creation) order.

        The order is significant: earlier goals draw on the balance first.
        """
        records = (
            self.db.query(SavingsGoalRecord)
            .filter(SavingsGoalRecord.session_id == session_id)
            .order_by(SavingsGoalRecord.id.asc())
            .all()
        )
        return [self._to_domain(record) for record in records]

    @staticmethod
    def _to_domain(record: SavingsGoalRecord) -> SavingsGoal:
        if record.goal is None or record.goal <= 0:
            raise DataIntegrityError(f"Savings goal {record.id} has invalid goal {record.goal!r}")
        if record.save_per_month is None or record.save_per_month <= 0:
            raise DataIntegrityError(
                f"Savings goal {record.id} has invalid monthly saving {record.save_per_month!r}"
            )
        if record.min_balance_required is None or record.min_balance_required < 0:
            raise DataIntegrityError(
                f"Savings goal {record.id} has invalid minimum balance {record.min_balance_required!r}"
            )
        return SavingsGoal(
            goal_id=str(record.id),
            name=record.name,
            goal_cents=record.goal,
            save_per_month_cents=record.save_per_month,
            min_balance_required_cents=record.min_balance_required,
            start_timestamp=parse_timestamp(record.date),
        )
