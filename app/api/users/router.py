from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.auth.dependencies import get_current_active_user
from app.api.users.models import User
from app.api.users.schemas import UserSummary
from app.api.users.service import UserService
from app.database.database import get_db

router = APIRouter(prefix="/api/v1/users", tags=["users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


@router.get("/", response_model=List[UserSummary])
async def list_users_endpoint(
        search: Optional[str] = None,
        current_user: User = Depends(get_current_active_user),
        user_service: UserService = Depends(get_user_service)
):
    return user_service.list_users(current_user.id, search)
