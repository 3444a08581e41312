"""Tests for the token codec and header parsing."""

import uuid
from datetime import timedelta

import pytest
from jose import jwt

from matty.core.exceptions import InvalidToken
from matty.core.security import (
    create_access_token,
    decode_access_token,
    extract_token_from_header,
    get_password_hash,
    verify_password,
)


class TestTokenCodec:
    def test_decode_returns_subject(self, settings):
        owner = uuid.uuid4()
        token = create_access_token(owner, settings)

        assert decode_access_token(token, settings) == owner

    def test_expired_token_rejected(self, settings):
        token = create_access_token(uuid.uuid4(), settings, expires_delta=timedelta(seconds=-5))

        with pytest.raises(InvalidToken):
            decode_access_token(token, settings)

    def test_wrong_secret_rejected(self, settings):
        other = settings.model_copy(update={"jwt_secret": "another-secret"})
        token = create_access_token(uuid.uuid4(), other)

        with pytest.raises(InvalidToken):
            decode_access_token(token, settings)

    def test_garbage_rejected(self, settings):
        with pytest.raises(InvalidToken):
            decode_access_token("not-a-jwt", settings)

    def test_token_without_expiry_rejected(self, settings):
        token = jwt.encode({"sub": str(uuid.uuid4())}, settings.jwt_secret, algorithm="HS256")

        with pytest.raises(InvalidToken):
            decode_access_token(token, settings)

    def test_non_uuid_subject_rejected(self, settings):
        token = jwt.encode(
            {"sub": "42", "exp": 4102444800},
            settings.jwt_secret,
            algorithm="HS256",
        )

        with pytest.raises(InvalidToken):
            decode_access_token(token, settings)


class TestExtractToken:
    @pytest.mark.parametrize(
        "header",
        [None, "", "Bearer", "Token abc", "Bearer a b", "abc"],
    )
    def test_unparsable(self, header):
        assert extract_token_from_header(header) is None

    def test_bearer(self):
        assert extract_token_from_header("Bearer abc.def") == "abc.def"
        assert extract_token_from_header("bearer abc.def") == "abc.def"


def test_password_hash_roundtrip():
    hashed = get_password_hash("Secret123")

    assert hashed != "Secret123"
    assert verify_password("Secret123", hashed)
    assert not verify_password("secret123", hashed)
