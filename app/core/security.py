import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext
from starlette.requests import HTTPConnection
from starlette.responses import Response

from app.core import config

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["argon2"],
    default="argon2",
    deprecated="auto",
)


def hash_password(plain_password: str) -> str:
    """Hash a password; argon2 generates a fresh salt for every hash"""
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed JWT access token.

    Args:
        data: claims to embed, at least "sub" and "role"
        expires_delta: lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        Encoded token string
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_token(token: str) -> Optional[dict]:
    """Decode a token, returning None when it is invalid or expired"""
    try:
        return jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired access token")
        return None
    except jwt.InvalidTokenError:
        logger.warning("Rejected invalid access token")
        return None


def is_access_token(payload: Optional[dict]) -> bool:
    return bool(payload) and payload.get("type") == "access" and payload.get("sub") is not None


def get_token_from_connection(connection: HTTPConnection) -> Optional[str]:
    """Read the token from the auth cookie, falling back to a bearer header"""
    token = connection.cookies.get(config.ACCESS_TOKEN_COOKIE)
    if token:
        return token

    authorization = connection.headers.get("authorization")
    if authorization and authorization.lower().startswith("bearer "):
        return authorization[7:].strip() or None
    return None


def set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=config.ACCESS_TOKEN_COOKIE,
        value=token,
        domain=config.DOMAIN,
        httponly=True,
        secure=config.COOKIE_SECURE,
        samesite="lax",
        max_age=config.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(
        key=config.ACCESS_TOKEN_COOKIE,
        domain=config.DOMAIN,
        httponly=True,
        secure=config.COOKIE_SECURE,
        samesite="lax",
    )


def issue_auth_cookie(response: Optional[Response], account) -> str:
    """Create a token for an admin or customer record and set it as the auth cookie"""
    token = create_access_token({"sub": str(account.id), "email": account.email, "role": account.role})
    if response is not None:
        set_auth_cookie(response, token)
    return token
