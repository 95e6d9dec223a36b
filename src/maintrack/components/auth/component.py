import logging
import re
from typing import Literal, cast
from uuid import UUID, uuid4

from maintrack.domain.entities import RoleType, User
from maintrack.domain.policy import PolicyEngine
from maintrack.rules.models import AuthRules

from .models import (
    AuthOutput,
    CreateUserInput,
    ListUsersInput,
    LoginInput,
    SignupInput,
    UpdateUserInput,
    UserListOutput,
    UserOutput,
)
from .ports import AuthAdapterPort, TimePort, UserRepoPort

logger = logging.getLogger(__name__)

VALID_ROLES: tuple[str, ...] = ("admin", "technician", "viewer")
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _check_new_account(
    email: str, password: str, user_repo: UserRepoPort, rules: AuthRules
) -> str | None:
    if not _EMAIL_RE.match(email):
        return "Invalid email address"
    if len(password) < rules.password_min_length:
        return f"Password must be at least {rules.password_min_length} characters"
    if user_repo.get_by_email(email):
        return "Email already in use"
    return None


def _new_user(
    email: str,
    display_name: str | None,
    password_hash: str,
    roles: list[str],
    time: TimePort,
) -> User:
    now = time.now_utc()
    return User(
        id=uuid4(),
        email=email,
        display_name=display_name or email.split("@")[0],
        password_hash=password_hash,
        roles=cast(list[RoleType], roles),
        status="active",
        created_at=now,
        updated_at=now,
    )


def run_signup(
    inp: SignupInput,
    user_repo: UserRepoPort,
    auth_adapter: AuthAdapterPort,
    rules: AuthRules,
    time: TimePort,
) -> UserOutput:
    if not rules.signup_enabled:
        return UserOutput(success=False, error="Signup is disabled")

    email = inp.email.strip().lower()
    error = _check_new_account(email, inp.password, user_repo, rules)
    if error:
        return UserOutput(success=False, error=error)

    user = _new_user(
        email,
        inp.display_name,
        auth_adapter.hash_password(inp.password),
        [rules.signup_default_role],
        time,
    )
    user_repo.save(user)
    logger.info("New account registered: %s", email)
    return UserOutput(user=user, success=True)


def run_login(
    inp: LoginInput,
    user_repo: UserRepoPort,
    auth_adapter: AuthAdapterPort,
    rules: AuthRules,
) -> AuthOutput:
    user = user_repo.get_by_email(inp.email.strip().lower())
    if not user:
        return AuthOutput(success=False, error="Invalid credentials")

    if not auth_adapter.verify_password(inp.password, user.password_hash):
        return AuthOutput(success=False, error="Invalid credentials")

    if user.status != "active":
        return AuthOutput(success=False, error="User account is disabled")

    token = auth_adapter.create_token(user.id, rules.access_token_ttl_minutes)
    return AuthOutput(user=user, token_raw=token, success=True)


def run_create_user(
    inp: CreateUserInput,
    user_repo: UserRepoPort,
    auth_adapter: AuthAdapterPort,
    policy: PolicyEngine,
    time: TimePort,
) -> UserOutput:
    if not policy.can_manage_users(inp.actor):
        return UserOutput(success=False, error="Access denied")

    unknown = [r for r in inp.roles if r not in VALID_ROLES]
    if unknown:
        return UserOutput(success=False, error=f"Unknown roles: {', '.join(unknown)}")

    email = inp.email.strip().lower()
    error = _check_new_account(email, inp.password, user_repo, policy.rules.auth)
    if error:
        return UserOutput(success=False, error=error)

    new_user = _new_user(
        email, inp.display_name, auth_adapter.hash_password(inp.password), inp.roles, time
    )
    user_repo.save(new_user)
    return UserOutput(user=new_user, success=True)


def run_update_user(
    inp: UpdateUserInput,
    user_repo: UserRepoPort,
    policy: PolicyEngine,
    time: TimePort,
) -> UserOutput:
    if not policy.can_manage_users(inp.actor):
        return UserOutput(success=False, error="Access denied")

    try:
        uid = UUID(str(inp.target_id))
    except (ValueError, TypeError):
        return UserOutput(success=False, error="Invalid user ID format")

    target = user_repo.get_by_id(uid)
    if not target:
        return UserOutput(success=False, error="User not found")

    if inp.new_roles is not None:
        unknown = [r for r in inp.new_roles if r not in VALID_ROLES]
        if unknown:
            return UserOutput(success=False, error=f"Unknown roles: {', '.join(unknown)}")

    if inp.new_status is not None and inp.new_status not in ("active", "disabled"):
        return UserOutput(success=False, error=f"Unknown status: {inp.new_status}")

    # Self-lockout check
    if str(target.id) == str(inp.actor.id):
        is_removing_admin = (
            inp.new_roles is not None and "admin" in target.roles and "admin" not in inp.new_roles
        )
        if is_removing_admin:
            return UserOutput(success=False, error="Cannot remove admin role from yourself")
        if inp.new_status is not None and inp.new_status != "active":
            return UserOutput(success=False, error="Cannot disable yourself")

    if inp.new_roles is not None:
        target.roles = cast(list[RoleType], inp.new_roles)
    if inp.new_status is not None:
        target.status = cast(Literal["active", "disabled"], inp.new_status)

    target.updated_at = time.now_utc()
    user_repo.save(target)
    return UserOutput(user=target, success=True)


def run_list_users(
    inp: ListUsersInput, user_repo: UserRepoPort, policy: PolicyEngine
) -> UserListOutput:
    if not policy.can_manage_users(inp.actor):
        return UserListOutput(users=[], success=False, error="Access denied")

    return UserListOutput(users=user_repo.list_all(), success=True)
