from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
import logging

from userhub.db.database import get_db
from userhub.crud.user import user_crud
from userhub.schemas.user import UserCreate, UserResponse, UserList
from userhub.core.security import require_bearer_token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=UserList)
async def get_users(
    token: str = Depends(require_bearer_token),
    db: AsyncSession = Depends(get_db)
):
    """
    List all users
    """
    users = await user_crud.get_all(db)
    return {"users": users}


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_in: UserCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a new user
    """
    existing = await user_crud.get_by_username_or_email(
        db, username=user_in.username, email=user_in.email
    )
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this username or email already exists"
        )

    try:
        user = await user_crud.create(db, obj_in=user_in)
    except IntegrityError:
        # Lost a race with a concurrent insert of the same username/email
        await db.rollback()
        logger.warning(f"Duplicate user rejected on insert: {user_in.username}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this username or email already exists"
        )

    logger.info(f"Created user {user.id} ({user.username})")
    return user
