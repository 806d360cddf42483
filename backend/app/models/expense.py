"""
Expense model for tracking spending.
"""
from sqlalchemy import Column, String, Numeric, DateTime, ForeignKey, Integer, Text, Index
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Expense(BaseModel):
    """A single spending event owned by one user."""
    __tablename__ = "expenses"
    __table_args__ = (
        Index("ix_expenses_user_id_date", "user_id", "date"),
    )

    # Null only on legacy rows recorded before ownership was required
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    description = Column(Text, nullable=False, default="")
    category = Column(String(50), nullable=False)
    date = Column(String(10), nullable=False)  # YYYY-MM-DD
    # Null only on legacy rows; filled by the timestamp backfill
    created_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    owner = relationship("User", back_populates="expenses")
