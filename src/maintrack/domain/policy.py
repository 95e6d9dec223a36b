from collections.abc import Sequence

from maintrack.domain.entities import User
from maintrack.rules.models import Rules


class PolicyEngine:
    def __init__(self, rules: Rules):
        self.rules = rules

    def check_permission(
        self,
        user: User | None,
        user_roles: Sequence[str],
        action: str,
    ) -> bool:
        """
        Check if the user/role is allowed to perform the action.

        Order of precedence:
        1. Public Permissions (Global)
        2. Role-Based Access Control (RBAC)
        """
        if action in self.rules.rbac.public_permissions:
            return True

        if not user or user.status != "active":
            return False

        for role in user_roles:
            allowed_actions = self.rules.rbac.roles.get(role, [])
            if "*" in allowed_actions:
                return True
            if action in allowed_actions:
                return True

            # Scoped wildcards ("tickets:*" matches "tickets:write")
            if ":" in action:
                scope = action.split(":")[0]
                if f"{scope}:*" in allowed_actions:
                    return True

        return False

    def can(self, user: User, action: str) -> bool:
        return self.check_permission(user, user.roles, action)

    def can_manage_users(self, user: User) -> bool:
        return self.check_permission(user, user.roles, "users:manage")
