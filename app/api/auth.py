"""
Authentication API router.

Credentials are handled by the identity provider in front of the API; this
router only exposes who the caller is.
"""

import logging

from fastapi import APIRouter, Depends

from app.core.dependencies import get_current_user
from app.database.schemas import UserDBModel
from app.pydantic_models.user import UserPydModel

router = APIRouter(
    prefix="/api/v1/auth",
    tags=["Auth"],
)

logger = logging.getLogger(__name__)


@router.get("/user", response_model=UserPydModel)
async def get_authenticated_user(user: UserDBModel = Depends(get_current_user)):
    """Get the authenticated user."""
    return user
