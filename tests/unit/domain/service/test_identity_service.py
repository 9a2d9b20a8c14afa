"""Unit tests for IdentityService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from blog.config import AuthSettings
from blog.domain.service import IdentityService
from blog.domain.value import Capability, Identity, Role, UserId
from blog.util.jwt import JWTError, create_token

SETTINGS = AuthSettings(jwt_secret="test-secret")


@pytest.fixture
def identity_service():
    return IdentityService(auth_settings=SETTINGS)


class TestResolve:
    """Tests for resolve."""

    def test_valid_token(self, identity_service):
        token = create_token("abc123", "admin", SETTINGS)

        identity = identity_service.resolve(token)

        assert identity == Identity(user_id=UserId("abc123"), role=Role.ADMIN)

    def test_wrong_secret(self, identity_service):
        token = create_token("abc123", "user", AuthSettings(jwt_secret="other"))

        with pytest.raises(JWTError):
            identity_service.resolve(token)

    def test_expired(self, identity_service):
        token = jwt.encode(
            {
                "user_id": "abc123",
                "role": "user",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            identity_service.resolve(token)

    def test_unknown_role(self, identity_service):
        token = create_token("abc123", "superuser", SETTINGS)

        with pytest.raises(JWTError):
            identity_service.resolve(token)

    def test_missing_claims(self, identity_service):
        token = jwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError):
            identity_service.resolve(token)


class TestAuthorize:
    """Tests for authorize."""

    @pytest.mark.parametrize(
        "role, capability, allowed",
        [
            (Role.ADMIN, Capability.MANAGE_CATEGORIES, True),
            (Role.USER, Capability.MANAGE_CATEGORIES, False),
            (Role.USER, Capability.WRITE_POSTS, True),
            (Role.USER, Capability.COMMENT, True),
            (Role.ADMIN, Capability.COMMENT, True),
        ],
    )
    def test_role_capabilities(self, role, capability, allowed):
        identity = Identity(user_id=UserId("abc123"), role=role)
        assert IdentityService.authorize(identity, capability) is allowed
