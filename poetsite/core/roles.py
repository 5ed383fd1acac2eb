"""User roles, the administrative role set and the role hierarchy."""

from enum import Enum


class Role(str, Enum):
    """Account role. USER is the only non-administrative role."""

    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    EDITOR = "EDITOR"
    USER = "USER"


ADMIN_ROLES = frozenset({Role.SUPER_ADMIN, Role.ADMIN, Role.EDITOR, Role.MANAGER})

# Roles allowed to moderate submissions and manage other accounts.
MODERATOR_ROLES = frozenset({Role.SUPER_ADMIN, Role.ADMIN})

ROLE_LEVELS: dict[Role, int] = {
    Role.SUPER_ADMIN: 4,
    Role.ADMIN: 3,
    Role.MANAGER: 2,
    Role.EDITOR: 1,
    Role.USER: 0,
}

# Badge labels shown next to a user in the back-office.
ROLE_LABELS: dict[Role, str] = {
    Role.SUPER_ADMIN: "সুপার অ্যাডমিন",
    Role.ADMIN: "অ্যাডমিন",
    Role.EDITOR: "এডিটর",
    Role.MANAGER: "ম্যানেজার",
    Role.USER: "সদস্য",
}


def parse_role(role: str | Role | None) -> Role | None:
    """Return the Role for a stored or claimed value, or None if unknown."""
    if role is None:
        return None
    if isinstance(role, Role):
        return role
    try:
        return Role(role)
    except ValueError:
        return None


def is_administrative(role: str | Role | None) -> bool:
    """True if the role may enter the admin back-office."""
    return parse_role(role) in ADMIN_ROLES


def can_moderate(role: str | Role | None) -> bool:
    """True if the role may approve/reject submissions and change roles."""
    return parse_role(role) in MODERATOR_ROLES


def role_level(role: str | Role | None) -> int:
    """Hierarchy level; unknown roles rank with USER."""
    parsed = parse_role(role)
    return ROLE_LEVELS[parsed] if parsed is not None else 0


def role_label(role: str | Role | None) -> str:
    parsed = parse_role(role)
    return ROLE_LABELS[parsed] if parsed is not None else ROLE_LABELS[Role.USER]
