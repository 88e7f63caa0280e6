from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.auth.dependencies import get_current_active_user
from app.api.friends.repository import FriendRepository
from app.api.friends.schemas import (
    FriendRequestActionResponse,
    FriendRequestCreate,
    FriendRequestResolve,
    FriendRequestResponse,
    ResolveDecision,
)
from app.api.friends.service import FriendRequestService, FriendshipStore
from app.api.users.models import User
from app.api.users.schemas import UserSummary
from app.database.database import get_db

router = APIRouter(prefix="/api/v1/friends", tags=["friends"])


def get_friend_repository(db: Session = Depends(get_db)) -> FriendRepository:
    return FriendRepository(db)


def get_friend_request_service(
        repository: FriendRepository = Depends(get_friend_repository)
) -> FriendRequestService:
    return FriendRequestService(repository)


def get_friendship_store(
        repository: FriendRepository = Depends(get_friend_repository)
) -> FriendshipStore:
    return FriendshipStore(repository)


@router.get("/", response_model=List[UserSummary])
async def get_friends(
        current_user: User = Depends(get_current_active_user),
        friendship_store: FriendshipStore = Depends(get_friendship_store)
):
    return friendship_store.list_friends(current_user.id)


@router.post("/requests", response_model=FriendRequestActionResponse, status_code=status.HTTP_201_CREATED)
async def send_friend_request(
        data: FriendRequestCreate,
        current_user: User = Depends(get_current_active_user),
        request_service: FriendRequestService = Depends(get_friend_request_service)
):
    friend_request = request_service.send_request(current_user.id, data.target_user_id)
    return {"message": "Friend request sent", "request": friend_request}


@router.get("/requests", response_model=List[FriendRequestResponse])
async def get_incoming_requests(
        current_user: User = Depends(get_current_active_user),
        request_service: FriendRequestService = Depends(get_friend_request_service)
):
    return request_service.list_incoming(current_user.id)


@router.get("/requests/sent", response_model=List[FriendRequestResponse])
async def get_outgoing_requests(
        current_user: User = Depends(get_current_active_user),
        request_service: FriendRequestService = Depends(get_friend_request_service)
):
    return request_service.list_outgoing(current_user.id)


@router.put("/requests/{request_id}", response_model=FriendRequestActionResponse)
async def resolve_friend_request(
        request_id: int,
        data: FriendRequestResolve,
        current_user: User = Depends(get_current_active_user),
        request_service: FriendRequestService = Depends(get_friend_request_service)
):
    friend_request = request_service.resolve_request(request_id, current_user.id, data.status)
    verb = "accepted" if data.status is ResolveDecision.ACCEPTED else "rejected"
    return {"message": f"Friend request {verb}", "request": friend_request}
