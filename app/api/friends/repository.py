import logging
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional

from sqlalchemy import and_, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.friends.models import FriendRequest, Friendship
from app.api.users.models import User

logger = logging.getLogger(__name__)


class FriendRepository:
    """
    Storage access for requests and friendship edges.
    Writers only stage changes; callers commit through transaction().
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        try:
            yield self.db
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def find_user_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def find_request_by_id(self, request_id: int) -> Optional[FriendRequest]:
        return self.db.query(FriendRequest).filter(FriendRequest.id == request_id).first()

    def find_requests(self, *criteria) -> List[FriendRequest]:
        return (
            self.db.query(FriendRequest)
            .filter(*criteria)
            .order_by(FriendRequest.created_at, FriendRequest.id)
            .all()
        )

    def find_pending_request(self, sender_id: int, receiver_id: int) -> Optional[FriendRequest]:
        return self.db.query(FriendRequest).filter(
            FriendRequest.sender_id == sender_id,
            FriendRequest.receiver_id == receiver_id,
            FriendRequest.status == "pending"
        ).first()

    def find_edge_between(self, user_a: int, user_b: int,
                          statuses: Iterable[str] = ("accepted", "pending")) -> Optional[Friendship]:
        return self.db.query(Friendship).filter(
            or_(
                and_(Friendship.user_id == user_a, Friendship.friend_id == user_b),
                and_(Friendship.user_id == user_b, Friendship.friend_id == user_a)
            ),
            Friendship.status.in_(list(statuses))
        ).first()

    def list_friend_users(self, user_id: int) -> List[User]:
        # inner join drops edges whose friend row is gone
        return (
            self.db.query(User)
            .join(Friendship, Friendship.friend_id == User.id)
            .filter(Friendship.user_id == user_id, Friendship.status == "accepted")
            .order_by(User.id)
            .all()
        )

    def add_request(self, sender_id: int, receiver_id: int) -> FriendRequest:
        friend_request = FriendRequest(sender_id=sender_id, receiver_id=receiver_id, status="pending")
        self.db.add(friend_request)
        self.db.flush()
        return friend_request

    def ensure_edge(self, user_id: int, friend_id: int) -> Friendship:
        edge = self.db.query(Friendship).filter(
            Friendship.user_id == user_id,
            Friendship.friend_id == friend_id
        ).first()
        if edge is None:
            edge = Friendship(user_id=user_id, friend_id=friend_id, status="accepted")
            self.db.add(edge)
        elif edge.status != "accepted":
            logger.debug("Promoting friendship edge %s -> %s to accepted", user_id, friend_id)
            edge.status = "accepted"
        self.db.flush()
        return edge
