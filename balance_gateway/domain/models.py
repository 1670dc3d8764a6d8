"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Tuple


DEPOSIT = "deposit"
WITHDRAWAL = "withdrawal"


@dataclass(frozen=True)
class Transaction:
    """Ledger transaction belonging to one session"""

    transaction_id: str
    timestamp: datetime
    amount_cents: int
    type: str  # "deposit" or "withdrawal"


@dataclass(frozen=True)
class SavingsGoal:
    """Savings goal definition as stored for a session"""

    goal_id: str
    name: str
    goal_cents: int
    save_per_month_cents: int
    min_balance_required_cents: int
    start_timestamp: datetime


@dataclass(frozen=True)
class GoalState:
    """Amount a goal has accumulated so far within one simulation run"""

    goal_id: str
    accumulated_cents: int = 0


@dataclass(frozen=True)
class ProjectedTransaction:
    """Transaction annotated with the simulated running balance around it"""

    transaction: Transaction
    previous_balance_cents: int
    balance_cents: int
    extra_volume_cents: int = 0


@dataclass(frozen=True)
class SavingsProjection:
    """Output of the savings simulation over an ascending ledger"""

    entries: Tuple[ProjectedTransaction, ...]
    goal_states: Tuple[GoalState, ...]
    extra_volume: Dict[str, int] = field(default_factory=dict)
    final_balance_cents: int = 0


@dataclass(frozen=True)
class BucketWindow:
    """Half-open time window (start, end] covered by one history bucket"""

    start: datetime
    end: datetime


@dataclass
class HistoryBucket:
    """Candlestick-style balance aggregate over one interval"""

    open_cents: int
    close_cents: int
    high_cents: int
    low_cents: int
    volume_cents: int
    timestamp: datetime

    @classmethod
    def flat(cls, balance_cents: int, timestamp: datetime) -> "HistoryBucket":
        """Bucket with no movement at the given balance"""
        return cls(
            open_cents=balance_cents,
            close_cents=balance_cents,
            high_cents=balance_cents,
            low_cents=balance_cents,
            volume_cents=0,
            timestamp=timestamp,
        )

