from dataclasses import dataclass
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from taskboard.core.database import get_db
from taskboard.core.errors import AuthenticationError
from taskboard.core.security import decode_access_token
from taskboard.services.auth_service import AuthService
from taskboard.services.priority_service import PriorityService
from taskboard.services.task_service import TaskService
from taskboard.services.user_service import UserService

# Extracts the token from "Authorization: Bearer <token>"
# auto_error=False so a missing header goes through our own 401 below
bearer_scheme = HTTPBearer(auto_error=False)

CREDENTIALS_MESSAGE = "Could not validate credentials"


@dataclass(frozen=True)
class Identity:
    """Caller resolved from a verified token"""
    user_id: int
    email: str


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Identity:
    """
    Resolve the caller from the bearer token.

    Tokens are verified statelessly: signature and expiry only, no database
    lookup. Any failure raises a 401 before the route handler runs.
    """
    if credentials is None:
        raise AuthenticationError(CREDENTIALS_MESSAGE)

    # Returns None if token is invalid, expired, or tampered with
    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise AuthenticationError(CREDENTIALS_MESSAGE)

    user_id_str = payload.get("sub")
    if user_id_str is None:
        raise AuthenticationError(CREDENTIALS_MESSAGE)

    # Token stores the id as string, database uses integer
    try:
        user_id: int = int(user_id_str)
    except (ValueError, TypeError):
        raise AuthenticationError(CREDENTIALS_MESSAGE)

    return Identity(user_id=user_id, email=payload.get("email", ""))


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)


def get_priority_service(db: Session = Depends(get_db)) -> PriorityService:
    return PriorityService(db)


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(db, PriorityService(db))


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)
