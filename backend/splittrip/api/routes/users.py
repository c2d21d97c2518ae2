"""
User management routes.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from splittrip.core.security import hash_password
from splittrip.db.session import get_db
from splittrip.schemas.user import EmailUpgrade, UserResponse, UserUpdate
from splittrip.models.user import User, AuthProvider
from splittrip.api.dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user information."""
    return current_user


@router.put("/me", response_model=UserResponse)
async def update_current_user(
    update: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update the current user's display name."""
    current_user.display_name = update.display_name
    db.commit()
    db.refresh(current_user)
    return current_user


@router.post("/me/upgrade/email", response_model=UserResponse)
async def upgrade_to_email(
    upgrade: EmailUpgrade,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Turn a guest account into an email account.
    The user id is unchanged, so trips and expenses stay with the user.
    """
    if not current_user.is_guest:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Account already has an email login"
        )

    email = upgrade.email.lower()
    taken = db.query(User.id).filter(User.email == email, User.id != current_user.id).first()
    if taken:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already exists"
        )

    current_user.email = email
    current_user.hashed_password = hash_password(upgrade.password)
    current_user.auth_provider = AuthProvider.EMAIL
    db.commit()
    db.refresh(current_user)

    logger.info(f"Guest user {current_user.id} upgraded to email login")
    return current_user


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get user by ID."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user
