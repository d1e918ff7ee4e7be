import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from taskboard.core.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError
from taskboard.core.security import create_access_token, get_password_hash, verify_password
from taskboard.models.user import User

logger = logging.getLogger(__name__)

EMAIL_TAKEN_MESSAGE = "Email already registered"
# Same message for unknown email and wrong password to prevent email enumeration
INVALID_CREDENTIALS_MESSAGE = "Incorrect email or password"


class AuthService:
    """Registration, login and token issuing."""

    def __init__(self, db: Session):
        self.db = db

    def register(self, name: str | None, email: str | None, password: str | None) -> str:
        """Create a user and return an access token for it"""
        if not name or not name.strip() or not email or not password:
            raise ValidationError("Name, email and password are required")

        # Soft-deleted users keep their email, so they block re-registration too
        existing_user = self.db.query(User).filter(User.email == email).first()
        if existing_user:
            raise ConflictError(EMAIL_TAKEN_MESSAGE)

        user = User(
            name=name,
            email=email,
            password_hash=get_password_hash(password)
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Two requests registering the same email at once: the explicit
            # check passes for both, the unique constraint catches the second
            self.db.rollback()
            raise ConflictError(EMAIL_TAKEN_MESSAGE)
        self.db.refresh(user)

        logger.info(f"Registered user {user.id}")
        return self.issue_token(user.id, user.email)

    def login(self, email: str | None, password: str | None) -> str:
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = self.db.query(User).filter(
            User.email == email,
            User.deleted_at.is_(None)
        ).first()

        if not user or not verify_password(password, user.password_hash):
            logger.warning("Rejected login attempt")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        return self.issue_token(user.id, user.email)

    @staticmethod
    def issue_token(user_id: int, email: str) -> str:
        # JWT requires 'sub' to be a string
        return create_access_token(data={"sub": str(user_id), "email": email})

    def get_user(self, user_id: int) -> User:
        user = self.db.query(User).filter(
            User.id == user_id,
            User.deleted_at.is_(None)
        ).first()
        if user is None:
            raise NotFoundError("User not found")
        return user
