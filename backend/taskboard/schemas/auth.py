from typing import Optional
from pydantic import BaseModel, field_validator
from taskboard.schemas.user import check_email_address


# Fields are optional at the schema level so that a missing field is
# reported by the service as a 400 rather than by FastAPI as a 422
class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator('email')
    @classmethod
    def validate_email_format(cls, value: Optional[str]):
        return check_email_address(value)


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
