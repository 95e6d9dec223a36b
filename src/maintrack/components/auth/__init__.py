"""
Auth component - Authentication and user management.

Handles signup, login (JWT issue), and user administration.
"""

from .component import (
    run_create_user,
    run_list_users,
    run_login,
    run_signup,
    run_update_user,
)
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

__all__ = [
    # Entry points
    "run_create_user",
    "run_list_users",
    "run_login",
    "run_signup",
    "run_update_user",
    # Models
    "AuthOutput",
    "CreateUserInput",
    "ListUsersInput",
    "LoginInput",
    "SignupInput",
    "UpdateUserInput",
    "UserListOutput",
    "UserOutput",
    # Ports
    "AuthAdapterPort",
    "TimePort",
    "UserRepoPort",
]
