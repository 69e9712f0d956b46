import time

import jwt
import pytest

from shopmesh.auth import AuthError, authorize

SECRET = "secret"


def _bearer(claims, key=SECRET, algorithm="HS256"):
    return "Bearer " + jwt.encode(claims, key, algorithm=algorithm)


def test_missing_header_is_rejected():
    with pytest.raises(AuthError, match="Authorization header required"):
        authorize("", SECRET)


def test_none_header_is_rejected():
    with pytest.raises(AuthError, match="Authorization header required"):
        authorize(None, SECRET)


@pytest.mark.parametrize(
    "header",
    ["Basic token", "Bearer", "Bearer token extra", "bearer token", "Bearer  token"],
)
def test_malformed_header_is_rejected(header):
    with pytest.raises(AuthError, match="Invalid authorization header"):
        authorize(header, SECRET)


def test_valid_token_returns_claims():
    claims = {"sub": "user", "role": "admin"}
    assert authorize(_bearer(claims), SECRET) == claims


@pytest.mark.parametrize("algorithm", ["HS256", "HS384", "HS512"])
def test_every_hmac_algorithm_is_accepted(algorithm):
    claims = {"sub": "user"}
    assert authorize(_bearer(claims, algorithm=algorithm), SECRET) == claims


def test_token_signed_with_other_key_is_rejected():
    with pytest.raises(AuthError, match="Invalid or expired token"):
        authorize(_bearer({"sub": "user"}, key="placeholder"), SECRET)


def test_expired_token_is_rejected():
    header = _bearer({"sub": "user", "exp": int(time.time()) - 60})
    with pytest.raises(AuthError, match="Invalid or expired token"):
        authorize(header, SECRET)


def test_unexpired_token_is_accepted():
    claims = {"sub": "user", "exp": int(time.time()) + 600}
    assert authorize(_bearer(claims), SECRET) == claims


def test_unsigned_token_is_rejected():
    unsigned = jwt.encode({"sub": "user"}, None, algorithm="none")
    with pytest.raises(AuthError, match="Invalid or expired token"):
        authorize("Bearer " + unsigned, SECRET)


def test_garbage_token_is_rejected():
    with pytest.raises(AuthError, match="Invalid or expired token"):
        authorize("Bearer token", SECRET)


def test_empty_token_is_rejected():
    with pytest.raises(AuthError, match="Invalid or expired token"):
        authorize("Bearer ", SECRET)