from datetime import timedelta

import jwt
import pytest

from ligas_backend.core import config
from ligas_backend.core.exceptions import Unauthorized
from ligas_backend.core.security import is_expired, issue_token, verify_token


def test_issued_token_round_trips_identity_and_roles():
    token = issue_token("coach@club.mx", [config.ROLE_USER, config.ROLE_ADMIN])

    claims = verify_token(token)

    assert claims.subject == "coach@club.mx"
    assert claims.has_role(config.ROLE_ADMIN)
    assert not is_expired(token)


def test_token_signed_with_other_secret_is_rejected():
    forged = jwt.encode({"sub": "intruso@club.mx", "roles": [config.ROLE_ADMIN], "exp": 9999999999},
                        "some-other-secret-that-is-long-enough", algorithm="HS256")

    with pytest.raises(Unauthorized) as exc:
        verify_token(forged)
    assert exc.value.message == "invalid token"

    with pytest.raises(Unauthorized):
        is_expired(forged)


def test_tampered_token_is_rejected():
    token = issue_token("user@club.mx", [config.ROLE_USER])
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    with pytest.raises(Unauthorized):
        verify_token(tampered)


def test_garbage_is_rejected():
    with pytest.raises(Unauthorized):
        verify_token("not-a-token")


def test_expired_token():
    token = issue_token("user@club.mx", [config.ROLE_USER], expires_in=timedelta(minutes=-5))

    assert is_expired(token) is True
    with pytest.raises(Unauthorized) as exc:
        verify_token(token)
    assert exc.value.message == "token expired"
