import logging
from typing import List

from sqlalchemy.exc import IntegrityError

from app.api.friends.models import FriendRequest
from app.api.friends.repository import FriendRepository
from app.api.friends.schemas import FriendRequestStatus, ResolveDecision
from app.api.users.models import User
from app.core.exceptions import ConflictError, ForbiddenError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class FriendRequestService:
    def __init__(self, repository: FriendRepository):
        self.repository = repository

    def send_request(self, sender_id: int, target_id: int) -> FriendRequest:
        if sender_id == target_id:
            raise ValidationError("You cannot add yourself as a friend")
        if self.repository.find_user_by_id(target_id) is None:
            raise NotFoundError("Target user not found")
        if self.repository.find_edge_between(sender_id, target_id):
            raise ConflictError("You are already friends")
        if self.repository.find_pending_request(sender_id, target_id):
            raise ConflictError("Friend request already sent, wait for a response")

        try:
            with self.repository.transaction():
                friend_request = self.repository.add_request(sender_id, target_id)
        except IntegrityError:
            # only a concurrent request for the same pair is a conflict
            if self.repository.find_pending_request(sender_id, target_id) is None:
                raise
            raise ConflictError("Friend request already sent, wait for a response")

        logger.info("Friend request %s sent: %s -> %s", friend_request.id, sender_id, target_id)
        return friend_request

    def list_incoming(self, user_id: int) -> List[FriendRequest]:
        return self.repository.find_requests(
            FriendRequest.receiver_id == user_id,
            FriendRequest.status == FriendRequestStatus.PENDING.value
        )

    def list_outgoing(self, user_id: int) -> List[FriendRequest]:
        return self.repository.find_requests(
            FriendRequest.sender_id == user_id,
            FriendRequest.status == FriendRequestStatus.PENDING.value
        )

    def resolve_request(self, request_id: int, acting_user_id: int,
                        decision: ResolveDecision) -> FriendRequest:
        friend_request = self.repository.find_request_by_id(request_id)
        if friend_request is None:
            raise NotFoundError("Friend request not found")
        if friend_request.receiver_id != acting_user_id:
            raise ForbiddenError("You are not allowed to handle this friend request")
        if friend_request.status != FriendRequestStatus.PENDING.value:
            raise ConflictError(f"Friend request already {friend_request.status}")

        decision = ResolveDecision(decision)
        with self.repository.transaction():
            friend_request.status = decision.value
            if decision is ResolveDecision.ACCEPTED:
                self.repository.ensure_edge(friend_request.sender_id, friend_request.receiver_id)
                self.repository.ensure_edge(friend_request.receiver_id, friend_request.sender_id)

        logger.info("Friend request %s %s by user %s", request_id, decision.value, acting_user_id)
        return friend_request


class FriendshipStore:
    def __init__(self, repository: FriendRepository):
        self.repository = repository

    def list_friends(self, user_id: int) -> List[User]:
        return self.repository.list_friend_users(user_id)
