"""SQLAlchemy ORM models for sessions, transactions and savings goals"""

from sqlalchemy import Column, String, BigInteger, Integer, ForeignKey, Text
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class SessionRecord(Base):
    """Opaque session scoping all of a user's data"""

    __tablename__ = "sessions"

    session_id = Column(String(64), primary_key=True)

    transactions = relationship("TransactionRecord", back_populates="session", cascade="all, delete-orphan")
    savings_goals = relationship("SavingsGoalRecord", back_populates="session", cascade="all, delete-orphan")


class TransactionRecord(Base):
    """Ledger entry; `date` keeps the stored text form, e.g. 2018-04-13T08:06:10.000Z"""

    __tablename__ = "transactions"

    transaction_id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(String(64), ForeignKey("sessions.session_id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Text, nullable=False)
    amount = Column(BigInteger, nullable=False)  # cents
    type = Column(Text, nullable=False)  # deposit | withdrawal
    description = Column(Text, nullable=True)
    external_iban = Column(Text, nullable=True)

    session = relationship("SessionRecord", back_populates="transactions")


class SavingsGoalRecord(Base):
    """Savings goal; accumulated balance is derived, never stored"""

    __tablename__ = "savings_goals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(String(64), ForeignKey("sessions.session_id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(Text, nullable=False)
    goal = Column(BigInteger, nullable=False)  # cents
    save_per_month = Column(BigInteger, nullable=False)  # cents
    min_balance_required = Column(BigInteger, nullable=False, default=0)  # cents
    date = Column(Text, nullable=False)  # goal becomes active from this instant

    session = relationship("SessionRecord", back_populates="savings_goals")
