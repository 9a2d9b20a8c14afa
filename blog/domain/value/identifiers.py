"""Strongly typed identifiers for blog entities.

Identifiers are 24-character lower-case hex strings: a 4-byte big-endian
creation timestamp followed by 8 random bytes. Anything else arriving in a
path segment is treated as a slug.
"""

import re
import secrets
import time
from typing import NewType, Union

from blog.domain.value.common import ValueObject

UserId = NewType("UserId", str)
CategoryId = NewType("CategoryId", str)
PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)

_OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def new_object_id() -> str:
    """Generate a new 24-hex identifier."""
    timestamp = int(time.time()).to_bytes(4, "big")
    return (timestamp + secrets.token_bytes(8)).hex()


def is_object_id(value: str) -> bool:
    """Check whether a string has the shape of an identifier."""
    return bool(_OBJECT_ID_PATTERN.match(value))


class ById(ValueObject):
    """Lookup by store identifier."""

    id: str


class BySlug(ValueObject):
    """Lookup by slug."""

    slug: str


Identifier = Union[ById, BySlug]


def parse_identifier(raw: str) -> Identifier:
    """Decide whether a path segment is an identifier or a slug.

    Args:
        raw: Value taken from the request path

    Returns:
        ``ById`` for 24 hex characters, ``BySlug`` otherwise
    """
    if is_object_id(raw):
        return ById(id=raw.lower())
    return BySlug(slug=raw)
