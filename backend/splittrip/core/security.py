"""
Password hashing and bearer tokens.

A token's subject is the user id; it is the only identity a request carries.
Guest users have no password hash and can never log in with a password.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import hashlib
import bcrypt
from jose import JWTError, jwt
from splittrip.core.config import settings


def _password_digest(password: str) -> bytes:
    # bcrypt ignores input past 72 bytes; a SHA256 digest is always 32
    return hashlib.sha256(password.encode("utf-8")).digest()


def hash_password(password: str) -> str:
    """bcrypt hash of the password, as text for the users table."""
    return bcrypt.hashpw(_password_digest(password), bcrypt.gensalt()).decode("utf-8")


def check_password(password: str, hashed_password: Optional[str]) -> bool:
    """True if password matches; always False for accounts without a password."""
    if not hashed_password:
        return False
    return bcrypt.checkpw(_password_digest(password), hashed_password.encode("utf-8"))


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Signed token whose subject is the user id."""
    if expires_delta is None:
        expires_delta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    claims = {"sub": user_id, "exp": datetime.now(timezone.utc) + expires_delta}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def read_token_subject(token: str) -> Optional[str]:
    """User id from a valid, unexpired token, or None."""
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    return claims.get("sub") or None
