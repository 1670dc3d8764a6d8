"""Retroactive savings-goal simulation over the transaction history"""

from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Sequence, Tuple

from balance_gateway.domain.ledger import Ledger
from balance_gateway.domain.models import (
    GoalState,
    ProjectedTransaction,
    SavingsGoal,
    SavingsProjection,
)
from balance_gateway.utils.date_utils import months_between


def contribute(
    balance_cents: int,
    goal: SavingsGoal,
    state: GoalState,
    as_of: datetime,
) -> Tuple[int, GoalState, int]:
    """
    Apply one monthly contribution of a single goal.

    Returns (new balance, new goal state, extra volume moved). The goal is
    skipped while `as_of` precedes its start, once it is complete, or when the
    balance is below its minimum. A contribution that overshoots the goal is
    capped and the excess is refunded to the balance.
    """
    if as_of < goal.start_timestamp:
        return balance_cents, state, 0
    if state.accumulated_cents >= goal.goal_cents:
        return balance_cents, state, 0
    if balance_cents < goal.min_balance_required_cents:
        return balance_cents, state, 0

    balance_cents -= goal.save_per_month_cents
    accumulated = state.accumulated_cents + goal.save_per_month_cents
    moved = goal.save_per_month_cents

    if accumulated > goal.goal_cents:
        # Overflow is taken before the accumulation is capped
        overflow = accumulated - goal.goal_cents
        balance_cents += overflow
        accumulated = goal.goal_cents
        moved -= overflow

    return balance_cents, replace(state, accumulated_cents=accumulated), moved


def simulate_months(
    balance_cents: int,
    goals: Sequence[SavingsGoal],
    states: Tuple[GoalState, ...],
    months: int,
    as_of: datetime,
) -> Tuple[int, Tuple[GoalState, ...], int]:
    """
    Run `months` monthly ticks over every goal in listing order.

    Goals share the balance, so earlier goals are served first within a tick.
    """
    extra_volume = 0
    for _ in range(months):
        next_states: List[GoalState] = []
        for goal, state in zip(goals, states):
            balance_cents, state, moved = contribute(balance_cents, goal, state, as_of)
            extra_volume += moved
            next_states.append(state)
        states = tuple(next_states)
    return balance_cents, states, extra_volume


def project_savings(ledger: Ledger, goals: Sequence[SavingsGoal]) -> SavingsProjection:
    """
    Walk the ledger oldest first, debiting savings goals for every calendar month
    that passes between consecutive transactions.

    Contributions made between t[i] and t[i+1] are attributed to t[i+1] as extra
    volume. Month distance is the difference of calendar month indices, not an
    elapsed-day count. Nothing passed in is mutated; goal accumulation starts at
    zero on every call.
    """
    balance = 0
    states: Tuple[GoalState, ...] = tuple(GoalState(goal_id=goal.goal_id) for goal in goals)
    entries: List[ProjectedTransaction] = []
    extra_volume: Dict[str, int] = {}
    previous = None

    for transaction in ledger.ascending():
        moved = 0
        if previous is not None:
            months = months_between(previous.timestamp, transaction.timestamp)
            balance, states, moved = simulate_months(
                balance, goals, states, months, previous.timestamp
            )
            previous_balance = entries[-1].balance_cents
        else:
            previous_balance = 0

        extra_volume[transaction.transaction_id] = moved
        balance += ledger.delta(transaction)
        entries.append(
            ProjectedTransaction(
                transaction=transaction,
                previous_balance_cents=previous_balance,
                balance_cents=balance,
                extra_volume_cents=moved,
            )
        )
        previous = transaction

    return SavingsProjection(
        entries=tuple(entries),
        goal_states=states,
        extra_volume=extra_volume,
        final_balance_cents=balance,
    )
