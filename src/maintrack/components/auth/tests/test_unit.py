"""
Auth component unit tests.

Tests for signup, login and user administration.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from uuid import UUID, uuid4

import pytest

from maintrack.components.auth import (
    CreateUserInput,
    ListUsersInput,
    LoginInput,
    SignupInput,
    UpdateUserInput,
    run_create_user,
    run_list_users,
    run_login,
    run_signup,
    run_update_user,
)
from maintrack.domain.entities import User
from maintrack.domain.policy import PolicyEngine
from maintrack.rules.loader import load_rules
from maintrack.rules.models import AuthRules

# --- Mock Implementations ---


class MockUserRepo:
    """In-memory user repository for testing."""

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}
        self._by_email: dict[str, User] = {}

    def get_by_email(self, email: str) -> User | None:
        return self._by_email.get(email)

    def get_by_id(self, user_id: object) -> User | None:
        if isinstance(user_id, UUID):
            return self._users.get(user_id)
        try:
            return self._users.get(UUID(str(user_id)))
        except (ValueError, TypeError):
            return None

    def save(self, user: User) -> User:
        self._users[user.id] = user
        self._by_email[user.email] = user
        return user

    def list_all(self) -> list[User]:
        return list(self._users.values())


class MockAuthAdapter:
    """Mock auth adapter: the hash is "hashed_" + plain."""

    def verify_password(self, plain: str, hashed: str) -> bool:
        return hashed == f"hashed_{plain}"

    def hash_password(self, plain: str) -> str:
        return f"hashed_{plain}"

    def create_token(self, user_id: object, ttl_minutes: int) -> str:
        return f"token_{user_id}_{ttl_minutes}"


class MockTimePort:
    def __init__(self, fixed_time: datetime | None = None) -> None:
        self._time = fixed_time or datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)

    def now_utc(self) -> datetime:
        return self._time


# --- Fixtures ---


@pytest.fixture
def user_repo() -> MockUserRepo:
    return MockUserRepo()


@pytest.fixture
def auth_adapter() -> MockAuthAdapter:
    return MockAuthAdapter()


@pytest.fixture
def time_port() -> MockTimePort:
    return MockTimePort()


@pytest.fixture
def policy() -> PolicyEngine:
    rules_path = Path("rules.yaml").resolve()
    rules = load_rules(rules_path)
    return PolicyEngine(rules)


@pytest.fixture
def auth_rules() -> AuthRules:
    return AuthRules()


def _make_user(repo: MockUserRepo, email: str, roles: list[str], status: str = "active") -> User:
    user = User(
        id=uuid4(),
        email=email,
        display_name=email.split("@")[0],
        password_hash=f"hashed_{email.split('@')[0]}-pass",
        roles=roles,  # type: ignore[arg-type]
        status=status,  # type: ignore[arg-type]
    )
    return repo.save(user)


@pytest.fixture
def admin_user(user_repo: MockUserRepo) -> User:
    return _make_user(user_repo, "admin@example.com", ["admin"])


@pytest.fixture
def technician(user_repo: MockUserRepo) -> User:
    return _make_user(user_repo, "tech@example.com", ["technician"])


# --- Signup Tests ---


class TestSignup:
    def test_signup_creates_user_with_default_role(
        self,
        user_repo: MockUserRepo,
        auth_adapter: MockAuthAdapter,
        auth_rules: AuthRules,
        time_port: MockTimePort,
    ) -> None:
        inp = SignupInput(email="New@Example.com ", password="longenough")
        result = run_signup(inp, user_repo, auth_adapter, auth_rules, time_port)

        assert result.success is True
        assert result.user is not None
        assert result.user.email == "new@example.com"
        assert result.user.roles == ["technician"]
        assert result.user.password_hash == "hashed_longenough"
        assert user_repo.get_by_email("new@example.com") is not None

    def test_signup_rejects_short_password(
        self,
        user_repo: MockUserRepo,
        auth_adapter: MockAuthAdapter,
        auth_rules: AuthRules,
        time_port: MockTimePort,
    ) -> None:
        inp = SignupInput(email="a@example.com", password="short")
        result = run_signup(inp, user_repo, auth_adapter, auth_rules, time_port)

        assert result.success is False
        assert result.error == "Password must be at least 8 characters"

    def test_signup_rejects_invalid_email(
        self,
        user_repo: MockUserRepo,
        auth_adapter: MockAuthAdapter,
        auth_rules: AuthRules,
        time_port: MockTimePort,
    ) -> None:
        inp = SignupInput(email="not-an-email", password="longenough")
        result = run_signup(inp, user_repo, auth_adapter, auth_rules, time_port)

        assert result.success is False
        assert result.error == "Invalid email address"

    def test_signup_rejects_duplicate_email(
        self,
        admin_user: User,
        user_repo: MockUserRepo,
        auth_adapter: MockAuthAdapter,
        auth_rules: AuthRules,
        time_port: MockTimePort,
    ) -> None:
        inp = SignupInput(email="ADMIN@example.com", password="longenough")
        result = run_signup(inp, user_repo, auth_adapter, auth_rules, time_port)

        assert result.success is False
        assert result.error == "Email already in use"

    def test_signup_disabled(
        self,
        user_repo: MockUserRepo,
        auth_adapter: MockAuthAdapter,
        time_port: MockTimePort,
    ) -> None:
        rules = AuthRules(signup_enabled=False)
        inp = SignupInput(email="a@example.com", password="longenough")
        result = run_signup(inp, user_repo, auth_adapter, rules, time_port)

        assert result.success is False
        assert result.error == "Signup is disabled"
        assert user_repo.list_all() == []


# --- Login Tests ---


class TestLogin:
    def test_login_success_returns_token(
        self,
        admin_user: User,
        user_repo: MockUserRepo,
        auth_adapter: MockAuthAdapter,
        auth_rules: AuthRules,
    ) -> None:
        inp = LoginInput(email="admin@example.com", password="admin-pass")
        result = run_login(inp, user_repo, auth_adapter, auth_rules)

        assert result.success is True
        assert result.user == admin_user
        assert result.token_raw == f"token_{admin_user.id}_1440"

    def test_login_unknown_email(
        self,
        user_repo: MockUserRepo,
        auth_adapter: MockAuthAdapter,
        auth_rules: AuthRules,
    ) -> None:
        inp = LoginInput(email="nobody@example.com", password="whatever1")
        result = run_login(inp, user_repo, auth_adapter, auth_rules)

        assert result.success is False
        assert result.error == "Invalid credentials"

    def test_login_wrong_password(
        self,
        admin_user: User,
        user_repo: MockUserRepo,
        auth_adapter: MockAuthAdapter,
        auth_rules: AuthRules,
    ) -> None:
        inp = LoginInput(email="admin@example.com", password="wrong")
        result = run_login(inp, user_repo, auth_adapter, auth_rules)

        assert result.success is False
        assert result.error == "Invalid credentials"

    def test_login_disabled_user(
        self,
        user_repo: MockUserRepo,
        auth_adapter: MockAuthAdapter,
        auth_rules: AuthRules,
    ) -> None:
        _make_user(user_repo, "gone@example.com", ["viewer"], status="disabled")
        inp = LoginInput(email="gone@example.com", password="gone-pass")
        result = run_login(inp, user_repo, auth_adapter, auth_rules)

        assert result.success is False
        assert result.error == "User account is disabled"


# --- Admin Tests ---


class TestUserAdministration:
    def test_admin_creates_user(
        self,
        admin_user: User,
        user_repo: MockUserRepo,
        auth_adapter: MockAuthAdapter,
        policy: PolicyEngine,
        time_port: MockTimePort,
    ) -> None:
        inp = CreateUserInput(
            actor=admin_user,
            email="viewer@example.com",
            password="password123",
            roles=["viewer"],
        )
        result = run_create_user(inp, user_repo, auth_adapter, policy, time_port)

        assert result.success is True
        assert result.user is not None
        assert result.user.roles == ["viewer"]
        assert result.user.created_at == time_port.now_utc()

    def test_technician_cannot_create_user(
        self,
        technician: User,
        user_repo: MockUserRepo,
        auth_adapter: MockAuthAdapter,
        policy: PolicyEngine,
        time_port: MockTimePort,
    ) -> None:
        inp = CreateUserInput(
            actor=technician,
            email="x@example.com",
            password="password123",
            roles=["viewer"],
        )
        result = run_create_user(inp, user_repo, auth_adapter, policy, time_port)

        assert result.success is False
        assert result.error == "Access denied"

    def test_create_user_unknown_role(
        self,
        admin_user: User,
        user_repo: MockUserRepo,
        auth_adapter: MockAuthAdapter,
        policy: PolicyEngine,
        time_port: MockTimePort,
    ) -> None:
        inp = CreateUserInput(
            actor=admin_user,
            email="x@example.com",
            password="password123",
            roles=["editor"],
        )
        result = run_create_user(inp, user_repo, auth_adapter, policy, time_port)

        assert result.success is False
        assert result.error == "Unknown roles: editor"

    def test_update_user_roles_and_status(
        self,
        admin_user: User,
        technician: User,
        user_repo: MockUserRepo,
        policy: PolicyEngine,
        time_port: MockTimePort,
    ) -> None:
        inp = UpdateUserInput(
            actor=admin_user,
            target_id=str(technician.id),
            new_roles=["viewer"],
            new_status="disabled",
        )
        result = run_update_user(inp, user_repo, policy, time_port)

        assert result.success is True
        stored = user_repo.get_by_id(technician.id)
        assert stored is not None
        assert stored.roles == ["viewer"]
        assert stored.status == "disabled"

    def test_admin_cannot_demote_self(
        self,
        admin_user: User,
        user_repo: MockUserRepo,
        policy: PolicyEngine,
        time_port: MockTimePort,
    ) -> None:
        inp = UpdateUserInput(
            actor=admin_user, target_id=str(admin_user.id), new_roles=["technician"]
        )
        result = run_update_user(inp, user_repo, policy, time_port)

        assert result.success is False
        assert result.error == "Cannot remove admin role from yourself"

    def test_admin_cannot_disable_self(
        self,
        admin_user: User,
        user_repo: MockUserRepo,
        policy: PolicyEngine,
        time_port: MockTimePort,
    ) -> None:
        inp = UpdateUserInput(
            actor=admin_user, target_id=str(admin_user.id), new_status="disabled"
        )
        result = run_update_user(inp, user_repo, policy, time_port)

        assert result.success is False
        assert result.error == "Cannot disable yourself"

    def test_update_unknown_user(
        self,
        admin_user: User,
        user_repo: MockUserRepo,
        policy: PolicyEngine,
        time_port: MockTimePort,
    ) -> None:
        inp = UpdateUserInput(actor=admin_user, target_id=str(uuid4()), new_status="active")
        result = run_update_user(inp, user_repo, policy, time_port)

        assert result.success is False
        assert result.error == "User not found"

    def test_list_users_requires_admin(
        self,
        admin_user: User,
        technician: User,
        user_repo: MockUserRepo,
        policy: PolicyEngine,
    ) -> None:
        allowed = run_list_users(ListUsersInput(actor=admin_user), user_repo, policy)
        denied = run_list_users(ListUsersInput(actor=technician), user_repo, policy)

        assert allowed.success is True
        assert len(allowed.users) == 2
        assert denied.success is False
        assert denied.users == []
