"""Comment entity.

Comments live inside their post and are only ever appended.
"""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, UserId


class Comment(DomainModel):
    """Comment embedded in a post."""

    id: CommentId
    user_id: UserId
    content: str = Field(min_length=1, max_length=2000)
    created_at: datetime = Field(default_factory=datetime.now)
