"""
User model for Google-authenticated accounts.
"""
from sqlalchemy import Column, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class User(BaseModel):
    """
    User resolved from an external identity.

    `name` and `provider` are nullable because accounts created before Google
    sign-in existed lack them until the legacy user backfill runs.
    """
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=True)
    picture = Column(String(1024), nullable=True)
    is_verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    provider = Column(String(20), nullable=True)  # "google" or "legacy"
    google_id = Column(String(64), unique=True, nullable=True, index=True)

    # Relationships
    expenses = relationship("Expense", back_populates="owner")
