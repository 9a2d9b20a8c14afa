"""Verified caller identity."""

from blog.domain.value.common import ValueObject
from blog.domain.value.identifiers import UserId
from blog.domain.value.types import ROLE_CAPABILITIES, Capability, Role


class Identity(ValueObject):
    """Who is calling, as resolved from a verified credential."""

    user_id: UserId
    role: Role

    def can(self, capability: Capability) -> bool:
        """Check whether this identity's role grants a capability."""
        return capability in ROLE_CAPABILITIES.get(self.role, frozenset())
