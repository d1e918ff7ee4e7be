from fastapi import APIRouter, Depends, status
from taskboard.api.dependencies import Identity, get_auth_service, get_current_identity
from taskboard.schemas.auth import LoginRequest, RegisterRequest, Token
from taskboard.schemas.user import UserResponse
from taskboard.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Register a new user and log them in"""
    access_token = auth_service.register(
        user_data.name, user_data.email, user_data.password)
    return {"access_token": access_token, "token_type": "bearer"}


@router.post("/login", response_model=Token)
async def login(
    credentials: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Login and get access token"""
    access_token = auth_service.login(credentials.email, credentials.password)
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    identity: Identity = Depends(get_current_identity),
    auth_service: AuthService = Depends(get_auth_service)
):
    """Get current user information"""
    return auth_service.get_user(identity.user_id)
