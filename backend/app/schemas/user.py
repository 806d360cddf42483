"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime
from email_validator import validate_email, EmailNotValidError


class GoogleIdentity(BaseModel):
    """Profile fields received from Google after a successful sign-in."""
    email: str
    name: str
    picture: Optional[str] = None
    google_id: str

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        # Validate only; stored rows are matched on the address exactly as Google sends it
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"invalid email address: {e}")
        return v


class UserResponse(BaseModel):
    """Schema for user response."""
    id: int
    email: str
    name: Optional[str] = None
    picture: Optional[str] = None
    is_verified: bool
    provider: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
