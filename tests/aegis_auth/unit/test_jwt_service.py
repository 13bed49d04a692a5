"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from aegis_auth import InvalidTokenError, JWTService

TEST_SECRET = "unit-test-secret-key-with-32-bytes!"
TEST_EMAIL = "test@example.com"


class TestJWTService:
    def setup_method(self):
        self.service = JWTService(secret_key=TEST_SECRET)
        self.user_id = uuid4()

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")

    def test_expire_seconds_default_one_hour(self):
        assert self.service.access_token_expire_seconds == 3600

    def test_create_and_verify_carries_claims(self):
        token = self.service.create_access_token(
            self.user_id,
            TEST_EMAIL,
            roles=["admin", "user"],
            permissions=["users:read", "profile:read"],
        )

        payload = self.service.verify_token(token)

        assert payload.user_id == self.user_id
        assert payload.email == TEST_EMAIL
        assert payload.roles == ("admin", "user")
        assert payload.permissions == ("users:read", "profile:read")

    def test_token_without_claims_has_empty_tuples(self):
        token = self.service.create_access_token(self.user_id, TEST_EMAIL)

        payload = self.service.verify_token(token)

        assert payload.roles == ()
        assert payload.permissions == ()

    def test_expired_token_rejected(self):
        token = self.service.create_access_token(
            self.user_id,
            TEST_EMAIL,
            expires_delta=timedelta(seconds=-10),
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_token_signed_with_other_key_rejected(self):
        other = JWTService(secret_key="another-secret-key-with-32-bytes!!")
        token = other.create_access_token(self.user_id, TEST_EMAIL)

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_garbage_rejected(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("not-a-jwt")

    def test_missing_subject_rejected(self):
        token = jwt.encode(
            {"email": TEST_EMAIL, "exp": 9999999999},
            TEST_SECRET,
            algorithm=JWTService.ALGORITHM,
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)

    def test_non_list_permissions_claim_rejected(self):
        token = jwt.encode(
            {
                "sub": str(self.user_id),
                "email": TEST_EMAIL,
                "exp": 9999999999,
                "permissions": "users:read",
            },
            TEST_SECRET,
            algorithm=JWTService.ALGORITHM,
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)
