"""
Password hashing and owner tokens.

An owner token is an HS256 JWT whose `user_id` claim identifies the ledger
owner; `sub` carries the username for display only.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import hashlib
import bcrypt
from jose import JWTError, jwt
from tripwallet.core.config import settings

OWNER_CLAIM = "user_id"


def _sha256(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes
    return hashlib.sha256(password.encode('utf-8')).digest()


def hash_password(password: str) -> str:
    """Hash a password for storage."""
    return bcrypt.hashpw(_sha256(password), bcrypt.gensalt()).decode('utf-8')


def check_password(password: str, stored_hash: str) -> bool:
    """Check a login password against the stored hash."""
    return bcrypt.checkpw(_sha256(password), stored_hash.encode('utf-8'))


def create_owner_token(user, lifetime: Optional[timedelta] = None) -> str:
    """Issue a token naming `user` as the owner for every ledger call."""
    lifetime = lifetime or timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    claims = {
        "sub": user.username,
        OWNER_CLAIM: user.id,
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_owner_id(token: str) -> Optional[int]:
    """Return the owner id from a valid token, or None if it is bad or expired."""
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    owner_id = claims.get(OWNER_CLAIM)
    if not isinstance(owner_id, int) or isinstance(owner_id, bool):
        return None
    return owner_id
