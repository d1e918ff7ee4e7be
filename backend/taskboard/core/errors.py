"""
Domain errors raised by the service layer.

Services raise these instead of HTTPException so they stay usable outside a
request. The handler registered in main.py turns each one into a JSON
response using the class-level status_code.
"""

from fastapi import status


class TaskboardError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    headers: dict[str, str] | None = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TaskboardError):
    """Missing or malformed input"""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(TaskboardError):
    """Bad credentials or bad token. Message never says which factor failed."""
    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}


class NotFoundError(TaskboardError):
    """Resource is absent, soft-deleted, or owned by someone else"""
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(TaskboardError):
    """Current state precludes the operation"""
    status_code = status.HTTP_409_CONFLICT


class PriorityInUseError(ConflictError):
    # Reported as 400 to API clients
    status_code = status.HTTP_400_BAD_REQUEST
