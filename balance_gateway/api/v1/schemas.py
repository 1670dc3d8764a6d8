"""Pydantic schemas for API responses"""

from pydantic import BaseModel, ConfigDict, Field

from balance_gateway.domain.models import HistoryBucket, SavingsGoal
from balance_gateway.utils.date_utils import to_epoch_seconds


def cents_to_amount(cents: int) -> float:
    """Integer cents to the decimal amount exposed by the API"""
    return cents / 100


class HistoryItem(BaseModel):
    """Single candlestick in GET /api/v1/balance/history"""

    open: float
    close: float
    high: float
    low: float
    volume: float
    timestamp: int = Field(..., description="Bucket end as epoch seconds")

    @classmethod
    def from_bucket(cls, bucket: HistoryBucket) -> "HistoryItem":
        return cls(
            open=cents_to_amount(bucket.open_cents),
            close=cents_to_amount(bucket.close_cents),
            high=cents_to_amount(bucket.high_cents),
            low=cents_to_amount(bucket.low_cents),
            volume=cents_to_amount(bucket.volume_cents),
            timestamp=to_epoch_seconds(bucket.timestamp),
        )


class SavingsGoalItem(BaseModel):
    """Savings goal with its simulated accumulated balance"""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    goal: float
    save_per_month: float = Field(..., alias="savePerMonth")
    min_balance_required: float = Field(..., alias="minBalanceRequired")
    balance: float

    @classmethod
    def from_goal(cls, goal: SavingsGoal, accumulated_cents: int) -> "SavingsGoalItem":
        return cls(
            id=int(goal.goal_id),
            name=goal.name,
            goal=cents_to_amount(goal.goal_cents),
            save_per_month=cents_to_amount(goal.save_per_month_cents),
            min_balance_required=cents_to_amount(goal.min_balance_required_cents),
            balance=cents_to_amount(accumulated_cents),
        )
