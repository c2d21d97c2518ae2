"""
Expense model for tracking payments.
"""
from sqlalchemy import Column, String, BigInteger, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from splittrip.db.base import BaseModel


class Expense(BaseModel):
    """Expense model representing a single payment. Immutable once created."""
    __tablename__ = "expenses"

    trip_id = Column(String(36), ForeignKey("trips.id"), nullable=False, index=True)
    paid_by = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    amount = Column(BigInteger, nullable=False)  # Minor currency units (paise/cents)
    description = Column(Text, nullable=True)
    created_by = Column(String(36), ForeignKey("users.id"), nullable=True)

    # Relationships
    trip = relationship("Trip", back_populates="expenses")
    payer = relationship("User", foreign_keys=[paid_by])
    splits = relationship(
        "ExpenseSplit",
        back_populates="expense",
        cascade="all, delete-orphan",
        order_by="ExpenseSplit.position"
    )

    @property
    def split_between(self) -> list:
        """Member ids sharing this expense, in split order."""
        return [split.user_id for split in self.splits]


class ExpenseSplit(BaseModel):
    """One member in an expense's split list. Position keeps list order."""
    __tablename__ = "expense_splits"
    __table_args__ = (
        UniqueConstraint("expense_id", "user_id", name="uq_expense_split_member"),
    )

    expense_id = Column(String(36), ForeignKey("expenses.id"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)

    # Relationships
    expense = relationship("Expense", back_populates="splits")
    user = relationship("User")
