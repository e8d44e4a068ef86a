# security.py
# Token gateway: issues and verifies signed bearer tokens (HS256 JWT) and
# exposes FastAPI dependencies for the current identity and role checks.
# The match engine never calls into this module; authorization happens at
# the route boundary before any service runs.

from datetime import datetime, timedelta, timezone
from typing import List, Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from ligas_backend.core import config
from ligas_backend.core.exceptions import Forbidden, Unauthorized

bearer_scheme = HTTPBearer(auto_error=False)


class TokenClaims(BaseModel):
    """Identity extracted from a verified token."""
    subject: str
    roles: List[str] = []
    expires_at: datetime

    def has_role(self, role: str) -> bool:
        return role in self.roles


# ============================
# 📌 Token issuance / checks
# ============================
def issue_token(identity: str, roles: List[str], expires_in: Optional[timedelta] = None) -> str:
    """
    Creates a signed token carrying:
    - sub: the identity (user email)
    - roles: list of role names
    - iat / exp: issue and expiry instants
    """
    now = datetime.now(timezone.utc)
    if expires_in is None:
        expires_in = timedelta(minutes=config.JWT_EXPIRATION_MINUTES)

    payload = {
        "sub": identity,
        "roles": list(roles),
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def _decode(token: str, verify_exp: bool = True) -> dict:
    try:
        return jwt.decode(
            token,
            config.JWT_SECRET,
            algorithms=[config.JWT_ALGORITHM],
            options={"verify_exp": verify_exp, "require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise Unauthorized("token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise Unauthorized("invalid token") from exc


def verify_token(token: str) -> TokenClaims:
    """
    Verifies signature and expiry and returns the claims.

    Raises:
        Unauthorized: bad signature, malformed token or expired token.
    """
    payload = _decode(token)
    roles = payload.get("roles") or []
    if not isinstance(roles, list):
        roles = []
    return TokenClaims(
        subject=payload["sub"],
        roles=[str(role) for role in roles],
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )


def is_expired(token: str) -> bool:
    """
    True when a correctly signed token is past its expiry.

    Raises:
        Unauthorized: the token is malformed or its signature does not match.
    """
    payload = _decode(token, verify_exp=False)
    expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
    return expires_at <= datetime.now(timezone.utc)


# ============================
# 📌 FastAPI dependencies
# ============================
def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenClaims:
    """Reads 'Authorization: Bearer <token>' and returns the verified claims."""
    if credentials is None or not credentials.credentials:
        raise Unauthorized("missing bearer token")
    return verify_token(credentials.credentials)


def require_role(role: str):
    """Builds a dependency that lets the request through only when the caller holds `role`."""

    def _checker(user: TokenClaims = Depends(get_current_user)) -> TokenClaims:
        if not user.has_role(role):
            raise Forbidden("you do not have permission for this operation")
        return user

    return _checker
