"""
Team roles and capabilities.

Every role-gated decision (rotating the invite code, renaming the team,
seeing the invite code on the dashboard) goes through has_capability() so
the matrix below is the only place that knows what a role may do.
"""

from enum import Enum
from typing import Dict, FrozenSet, List, Union


class Role(str, Enum):
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class Capability(str, Enum):
    ROTATE_INVITE = "team:rotate_invite"
    RENAME_TEAM = "team:rename"
    VIEW_INVITE_CODE = "team:view_invite"


ROLE_CAPABILITIES: Dict[Role, FrozenSet[Capability]] = {
    Role.ADMIN: frozenset(Capability),
    Role.MEMBER: frozenset(),
}


def has_capability(role: Union[Role, str, None], capability: Capability) -> bool:
    """True if the role grants the capability. Unknown roles grant nothing."""
    try:
        resolved = Role(role)
    except ValueError:
        return False
    return capability in ROLE_CAPABILITIES[resolved]


def capabilities_for(role: Union[Role, str, None]) -> List[str]:
    """Capability names held by the role, sorted (used by the /me payload)."""
    return sorted(c.value for c in Capability if has_capability(role, c))
