"""Authentication endpoints: signup, login, token refresh."""

from fastapi import APIRouter, Depends

from portfolio_tracker.api.deps import get_auth_service, get_bearer_token
from portfolio_tracker.api.schemas import LoginRequest, SignupRequest, TokenResponse
from portfolio_tracker.services import AuthService

router = APIRouter(prefix="/api/user", tags=["auth"])


@router.post("/signup", response_model=TokenResponse, status_code=201)
def signup(
    data: SignupRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Register a user and return a bearer token."""
    token = auth_service.signup(data.name, data.email, data.password)
    return TokenResponse(message="User created successfully", token=token)


@router.post("/login", response_model=TokenResponse)
def login(
    data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Exchange credentials for a bearer token."""
    token = auth_service.login(data.email, data.password)
    return TokenResponse(message="Login successful", token=token)


@router.post("/refresh", response_model=TokenResponse)
def refresh(
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Exchange a still-valid token for a fresh one."""
    return TokenResponse(message="Token refreshed", token=auth_service.refresh(token))
