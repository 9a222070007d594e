"""
Authentication routes for registration and login.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from tripwallet.db.session import get_db
from tripwallet.schemas.user import UserCreate, UserLogin, Token
from tripwallet.models.user import User
from tripwallet.core.security import check_password, hash_password, create_owner_token
from tripwallet.services.parameter_service import create_default_parameters

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _issue_token(user: User) -> dict:
    return {"access_token": create_owner_token(user), "token_type": "bearer", "username": user.username}


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user with zeroed fixed parameters."""
    existing_user = db.query(User).filter(User.username == user_data.username).first()
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists"
        )
    
    new_user = User(
        username=user_data.username,
        hashed_password=hash_password(user_data.password)
    )
    db.add(new_user)
    db.flush()
    create_default_parameters(new_user.id, db)
    db.commit()
    db.refresh(new_user)
    logger.info(f"Registered user '{new_user.username}' (id={new_user.id})")
    
    return _issue_token(new_user)


@router.post("/login", response_model=Token)
async def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login and get JWT token."""
    user = db.query(User).filter(User.username == credentials.username).first()
    
    if not user or not check_password(credentials.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )
    
    return _issue_token(user)
