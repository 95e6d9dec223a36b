from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from maintrack.adapters.auth.crypto import JWTAuthAdapter
from maintrack.adapters.clock import SystemClock
from maintrack.adapters.sqlite.repos import SQLiteUserRepo
from maintrack.api.deps import (
    get_auth_adapter,
    get_clock,
    get_current_user,
    get_rules,
    get_user_repo,
)
from maintrack.api.schemas import SignupRequest, Token, UserResponse
from maintrack.components.auth import LoginInput, SignupInput, run_login, run_signup
from maintrack.domain.entities import User
from maintrack.rules.models import Rules

router = APIRouter()


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def signup(
    req: SignupRequest,
    user_repo: SQLiteUserRepo = Depends(get_user_repo),
    auth_adapter: JWTAuthAdapter = Depends(get_auth_adapter),
    rules: Rules = Depends(get_rules),
    clock: SystemClock = Depends(get_clock),
) -> UserResponse:
    """Self-service registration with the default role."""
    result = run_signup(
        SignupInput(email=req.email, password=req.password, display_name=req.display_name),
        user_repo=user_repo,
        auth_adapter=auth_adapter,
        rules=rules.auth,
        time=clock,
    )
    if not result.success:
        if result.error == "Signup is disabled":
            raise HTTPException(status_code=403, detail=result.error)
        if result.error == "Email already in use":
            raise HTTPException(status_code=409, detail=result.error)
        raise HTTPException(status_code=400, detail=result.error)

    return result.user  # type: ignore


@router.post("/login", response_model=Token)
def login_for_access_token(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    user_repo: SQLiteUserRepo = Depends(get_user_repo),
    auth_adapter: JWTAuthAdapter = Depends(get_auth_adapter),
    rules: Rules = Depends(get_rules),
) -> Token:
    """Authenticate user and return a bearer token."""
    result = run_login(
        LoginInput(email=form_data.username, password=form_data.password),
        user_repo=user_repo,
        auth_adapter=auth_adapter,
        rules=rules.auth,
    )
    if not result.success or not result.token_raw:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=result.error or "Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return Token(access_token=result.token_raw, token_type="bearer")


@router.get("/me")
def read_users_me(
    current_user: User = Depends(get_current_user),
) -> dict[str, Any]:
    """Get current user info."""
    return {
        "id": str(current_user.id),
        "email": current_user.email,
        "display_name": current_user.display_name,
        "roles": current_user.roles,
    }
