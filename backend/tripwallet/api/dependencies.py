"""
Shared route dependencies.
"""
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from tripwallet.core.security import decode_owner_id
from tripwallet.db.session import get_db
from tripwallet.models.user import User

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"}
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the bearer token to its owning user."""
    if credentials is None:
        raise _unauthorized("Unauthorized")
    
    owner_id = decode_owner_id(credentials.credentials)
    if owner_id is None:
        raise _unauthorized("Invalid token")
    
    user = db.query(User).filter(User.id == owner_id).first()
    if not user:
        raise _unauthorized("Invalid token")
    return user
