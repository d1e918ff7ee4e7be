from datetime import datetime
from typing import Optional
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, field_validator


def check_email_address(value: Optional[str]) -> Optional[str]:
    """
    Reject malformed addresses but return the value exactly as sent.

    EmailStr would store the normalized form (lowercased domain), which then
    no longer matches the exact-match lookup done at login.
    """
    if value is None:
        return value
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(str(e))
    return value


class UserUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None

    @field_validator('email')
    @classmethod
    def validate_email_format(cls, value: Optional[str]):
        return check_email_address(value)


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    deleted_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
