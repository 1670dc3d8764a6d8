"""Ordered view over a session's transactions"""

from datetime import datetime
from typing import Iterable, List, Tuple

from balance_gateway.domain.models import DEPOSIT, WITHDRAWAL, Transaction
from balance_gateway.domain.exceptions import DataIntegrityError


def _sort_key(transaction: Transaction) -> Tuple[datetime, int, int, str]:
    # Numeric ids (database keys) order by value and ahead of any non-numeric ids
    transaction_id = transaction.transaction_id
    if transaction_id.isdecimal():
        return transaction.timestamp, 0, int(transaction_id), ""
    return transaction.timestamp, 1, 0, transaction_id


class Ledger:
    """
    Immutable, time-ordered collection of one session's transactions.

    Transactions may be supplied in any order; ties on timestamp are broken by
    transaction id so the ordering is total and repeatable.
    """

    def __init__(self, transactions: Iterable[Transaction]):
        self._ascending: Tuple[Transaction, ...] = tuple(sorted(transactions, key=_sort_key))

    def __len__(self) -> int:
        return len(self._ascending)

    def __bool__(self) -> bool:
        return bool(self._ascending)

    def ascending(self) -> List[Transaction]:
        """Oldest first"""
        return list(self._ascending)

    def descending(self) -> List[Transaction]:
        """Most recent first"""
        return list(reversed(self._ascending))

    @staticmethod
    def delta(transaction: Transaction) -> int:
        """Signed balance change caused by a transaction"""
        if transaction.type == DEPOSIT:
            return transaction.amount_cents
        if transaction.type == WITHDRAWAL:
            return -transaction.amount_cents
        raise DataIntegrityError(
            f"Transaction {transaction.transaction_id} has unknown type {transaction.type!r}"
        )

    def last_timestamp(self, now: datetime) -> datetime:
        """Timestamp of the most recent transaction, or `now` for an empty ledger"""
        if not self._ascending:
            return now
        return self._ascending[-1].timestamp

    def balance_cents(self) -> int:
        """Plain sum of all deltas, ignoring savings contributions"""
        return sum(self.delta(t) for t in self._ascending)
