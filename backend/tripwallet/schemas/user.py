"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, Field


class UserBase(BaseModel):
    """Base user schema."""
    username: str = Field(min_length=1, max_length=50)


class UserCreate(UserBase):
    """Schema for user registration."""
    password: str = Field(min_length=1)


class UserLogin(BaseModel):
    """Schema for user login."""
    username: str
    password: str


class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"
    username: str
