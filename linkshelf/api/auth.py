"""
Authentication API endpoints
User registration and API key issue
"""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
from pydantic import BaseModel, EmailStr, Field
from typing import Optional
import logging

from linkshelf.database import get_db
from linkshelf.models.user import User
from linkshelf.models.api_key import APIKey
from linkshelf.core.security import generate_api_key
from linkshelf.core.exceptions import http_400_bad_request
from linkshelf.middleware.rate_limiter import auth_rate_limit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])


class RegisterRequest(BaseModel):
    """Request schema for user registration"""
    email: EmailStr = Field(..., description="User email address")
    name: Optional[str] = Field(None, max_length=100, description="Public display name")


class RegisterResponse(BaseModel):
    """Response schema for user registration"""
    user_id: str
    email: str
    api_key: str = Field(..., description="API key (save this - only shown once!)")


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
@auth_rate_limit()
async def register(
    request: Request,
    payload: RegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new user and generate API key

    **Important**: The API key is only returned once. Save it securely!

    Raises:
        HTTPException: 400 if email already registered
    """
    existing_user = db.query(User).filter(User.email == payload.email).first()

    if existing_user:
        raise http_400_bad_request(f"Email '{payload.email}' is already registered")

    user = User(email=payload.email, name=payload.name, is_active=True)
    db.add(user)
    db.flush()

    api_key, key_hash = generate_api_key()

    db.add(APIKey(
        user_id=user.id,
        key_hash=key_hash,
        key_prefix=api_key[:10],
        name="Default API Key",
    ))
    db.commit()

    logger.info(f"Registered user {user.id}")

    return RegisterResponse(
        user_id=user.id,
        email=user.email,
        api_key=api_key  # Only returned once!
    )
