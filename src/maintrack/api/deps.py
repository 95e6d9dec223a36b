import logging
import os
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from maintrack.adapters.ai.dev_suggester import DevSuggester
from maintrack.adapters.ai.openai_suggester import OpenAISuggester
from maintrack.adapters.auth.crypto import DEV_SECRET_KEY, JWTAuthAdapter
from maintrack.adapters.clock import SystemClock
from maintrack.adapters.sqlite.repos import (
    SQLiteEquipmentRepo,
    SQLiteMaintenanceRepo,
    SQLitePeripheralRepo,
    SQLiteTicketRepo,
    SQLiteUserRepo,
)
from maintrack.components.suggestions import SuggesterPort
from maintrack.domain.entities import User
from maintrack.domain.policy import PolicyEngine
from maintrack.rules.loader import load_rules
from maintrack.rules.models import Rules

logger = logging.getLogger(__name__)


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("MAINT_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "maintrack.db")
        self.rules_path = Path(os.environ.get("MAINT_RULES_PATH", self.base_dir / "rules.yaml"))
        self.openai_api_key = os.environ.get("OPENAI_API_KEY") or None
        self.openai_base_url = os.environ.get("OPENAI_BASE_URL") or None
        self.ai_model = os.environ.get("MAINT_AI_MODEL") or None
        self.secret_key = os.environ.get("MAINT_SECRET_KEY", DEV_SECRET_KEY)


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_rules_cached(path: Path) -> Rules:
    return load_rules(path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules_cached(settings.rules_path)


# --- Repos ---
def get_user_repo(settings: Settings = Depends(get_settings)) -> SQLiteUserRepo:
    return SQLiteUserRepo(settings.db_path)


def get_equipment_repo(settings: Settings = Depends(get_settings)) -> SQLiteEquipmentRepo:
    return SQLiteEquipmentRepo(settings.db_path)


def get_peripheral_repo(settings: Settings = Depends(get_settings)) -> SQLitePeripheralRepo:
    return SQLitePeripheralRepo(settings.db_path)


def get_maintenance_repo(settings: Settings = Depends(get_settings)) -> SQLiteMaintenanceRepo:
    return SQLiteMaintenanceRepo(settings.db_path)


def get_ticket_repo(settings: Settings = Depends(get_settings)) -> SQLiteTicketRepo:
    return SQLiteTicketRepo(settings.db_path)


# --- Services ---
def get_policy(rules: Rules = Depends(get_rules)) -> PolicyEngine:
    return PolicyEngine(rules)


# Adapters needed for component injection
def get_auth_adapter(settings: Settings = Depends(get_settings)) -> JWTAuthAdapter:
    return JWTAuthAdapter(settings.secret_key)


# Time adapter for deterministic time operations
_clock_instance: SystemClock | None = None


def get_clock() -> SystemClock:
    """Get clock singleton."""
    global _clock_instance
    if _clock_instance is None:
        _clock_instance = SystemClock()
    return _clock_instance


# Suggester singleton: one HTTP client for the process
_suggester_instance: SuggesterPort | None = None


def get_suggester(
    settings: Settings = Depends(get_settings),
    rules: Rules = Depends(get_rules),
) -> SuggesterPort:
    """OpenAI-backed suggester when OPENAI_API_KEY is set, offline dev suggester otherwise."""
    global _suggester_instance
    if _suggester_instance is None:
        if settings.openai_api_key:
            cfg = rules.suggestions
            _suggester_instance = OpenAISuggester(
                settings.openai_api_key,
                model=settings.ai_model or cfg.model,
                base_url=settings.openai_base_url,
                timeout_seconds=cfg.timeout_seconds,
                max_tokens=cfg.max_tokens,
                temperature=cfg.temperature,
            )
        else:
            logger.warning("OPENAI_API_KEY not set, using the offline dev suggester")
            _suggester_instance = DevSuggester()
    return _suggester_instance


# --- Auth ---
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_repo: SQLiteUserRepo = Depends(get_user_repo),
    auth_adapter: JWTAuthAdapter = Depends(get_auth_adapter),
) -> User:
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = auth_adapter.validate_token(token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user = user_repo.get_by_id(UUID(user_id))
    except ValueError:
        user = None
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if user.status != "active":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Inactive user",
        )

    return user


def require_permission(action: str) -> Callable[..., User]:
    """Dependency factory: the current user, or 403 if the role lacks ``action``."""

    def _check(
        current_user: User = Depends(get_current_user),
        policy: PolicyEngine = Depends(get_policy),
    ) -> User:
        if not policy.can(current_user, action):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
        return current_user

    return _check
