"""Balance history engine - candlestick reconstruction of the account balance"""

from datetime import datetime
from typing import List, Sequence

from balance_gateway.domain.intervals import bucket_windows, parse_interval, validate_count
from balance_gateway.domain.ledger import Ledger
from balance_gateway.domain.models import (
    BucketWindow,
    HistoryBucket,
    SavingsGoal,
    SavingsProjection,
    Transaction,
)
from balance_gateway.domain.savings import project_savings


def assemble_history(
    projection: SavingsProjection,
    windows: Sequence[BucketWindow],
) -> List[HistoryBucket]:
    """
    Fold projected transactions, newest first, into one bucket per window.

    Requirements:
    - Bucket 0 closes at the final running balance
    - A bucket's close is fixed when it is opened; its open moves back in time
      as older transactions are folded in
    - Balances are continuous: each bucket closes where the newer one opened
    - Volume counts transaction amounts plus savings debits, unsigned
    - Transactions older than the last window are ignored
    - Windows left without transactions are flat at the last known balance
    """
    count = len(windows)
    buckets: List[HistoryBucket] = []
    current = HistoryBucket.flat(projection.final_balance_cents, windows[0].end)

    for entry in reversed(projection.entries):
        timestamp = entry.transaction.timestamp

        # Move into the window that contains this transaction
        while timestamp <= windows[len(buckets)].start:
            buckets.append(current)
            if len(buckets) == count:
                return buckets
            current = HistoryBucket.flat(current.open_cents, windows[len(buckets)].end)

        current.open_cents = entry.previous_balance_cents
        current.high_cents = max(current.high_cents, current.open_cents)
        current.low_cents = min(current.low_cents, current.open_cents)
        current.volume_cents += entry.transaction.amount_cents + entry.extra_volume_cents

    buckets.append(current)

    # Pad with flat buckets once the history runs out
    while len(buckets) < count:
        buckets.append(HistoryBucket.flat(current.open_cents, windows[len(buckets)].end))

    return buckets


def compute_history(
    transactions: Sequence[Transaction],
    goals: Sequence[SavingsGoal],
    interval: str,
    count: int,
    now: datetime,
) -> List[HistoryBucket]:
    """
    Main entry point: reconstruct `count` history buckets of the given interval.

    The buckets are anchored at the most recent transaction (or `now` for an
    empty ledger) and returned most recent first.

    Raises:
        InvalidIntervalError: Unknown interval token or count outside [1, 200]
        DataIntegrityError: A transaction carries an unknown type
    """
    unit = parse_interval(interval)
    validate_count(count)

    ledger = Ledger(transactions)
    projection = project_savings(ledger, goals)
    windows = bucket_windows(ledger.last_timestamp(now), unit, count)

    return assemble_history(projection, windows)
