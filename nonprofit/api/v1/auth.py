"""JWT login and auth dependencies (get_current_user, require_owner)."""

import logging
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from nonprofit.core.config import settings
from nonprofit.core.database import get_db
from nonprofit.core.security import create_access_token, decode_access_token
from nonprofit.schemas.auth import CurrentUser, LoginRequest, TokenResponse
from nonprofit.services.users import authenticate

logger = logging.getLogger(__name__)
router = APIRouter()
# Raw header so a wrong scheme or empty token is told apart from no header at all.
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a JWT valid for one hour.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = authenticate(db, body.username, body.password)
    if user is None:
        logger.info("Login failed: username=%s", body.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return TokenResponse(token=create_access_token(user.username))


def _bearer_token(authorization: str) -> str | None:
    """Token from "Bearer <token>", or None for any other scheme or an empty token."""
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def get_current_user(
    authorization: Annotated[str | None, Depends(authorization_header)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the identity it carries.

    Only a missing Authorization header is 401. A header that is present but
    unusable (wrong scheme, no token, malformed, badly signed or expired) is
    403. Verification is stateless: the users table is not consulted.
    """
    if authorization is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    invalid_token = HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Invalid or expired token",
    )
    token = _bearer_token(authorization)
    if token is None:
        raise invalid_token
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError:
        raise invalid_token
    username = payload.get("username") or payload.get("sub")
    if not username or not isinstance(username, str):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token payload",
        )
    return CurrentUser(username=username)


def require_owner(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require the authenticated identity to be the owner. Raises 403 otherwise."""
    if current_user.username != settings.OWNER_USERNAME:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the owner can perform this action.",
        )
    return current_user
