"""User entity.

Users are managed by the external identity provider. The blog keeps a small
directory record so posts and comments can show who wrote them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import Role, UserId


class User(DomainModel):
    """Author directory entry."""

    id: UserId
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255)
    avatar_url: Optional[str] = None
    role: Role = Role.USER
    created_at: datetime = Field(default_factory=datetime.now)
