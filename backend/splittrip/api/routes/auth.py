"""
Authentication routes for guest signup, email signup, login and logout.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from splittrip.api.dependencies import bearer_scheme
from splittrip.db.session import get_db
from splittrip.schemas.user import GuestCreate, UserCreate, UserLogin, Token, UserResponse
from splittrip.models.user import User, AuthProvider
from splittrip.core.security import check_password, hash_password, create_access_token, read_token_subject

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/guest", response_model=Token, status_code=status.HTTP_201_CREATED)
async def guest_signup(guest_data: GuestCreate, db: Session = Depends(get_db)):
    """Create a guest identity and return its token."""
    user = User(display_name=guest_data.display_name, auth_provider=AuthProvider.GUEST)
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Guest user {user.id} created")
    return {"access_token": create_access_token(user.id), "token_type": "bearer", "user_id": user.id}


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def signup(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new email user."""
    email = user_data.email.lower()
    existing_email = db.query(User).filter(User.email == email).first()
    if existing_email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already exists"
        )

    new_user = User(
        display_name=user_data.display_name,
        email=email,
        auth_provider=AuthProvider.EMAIL,
        hashed_password=hash_password(user_data.password)
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    logger.info(f"Email user {new_user.id} registered")
    return new_user


@router.post("/login", response_model=Token)
async def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login and get JWT token."""
    user = db.query(User).filter(User.email == credentials.email.lower()).first()

    if not user or not check_password(credentials.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password"
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is inactive"
        )

    return {"access_token": create_access_token(user.id), "token_type": "bearer", "user_id": user.id}


@router.post("/logout")
async def logout(credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme)):
    """Logout (client-side token removal); the token must still be valid."""
    if credentials is None or not read_token_subject(credentials.credentials):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )
    return {"message": "Logged out successfully"}
