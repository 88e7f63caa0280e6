from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel

from app.api.users.schemas import UserSummary


class FriendRequestStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class ResolveDecision(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class FriendRequestCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    target_user_id: int = Field(..., description="ID of the user to befriend")


class FriendRequestResolve(BaseModel):
    status: ResolveDecision


class FriendRequestResponse(BaseModel):
    id: int = Field(gt=0)
    sender_id: int
    receiver_id: int
    status: FriendRequestStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    sender: Optional[UserSummary] = None
    receiver: Optional[UserSummary] = None

    model_config = ConfigDict(from_attributes=True)


class FriendRequestActionResponse(BaseModel):
    message: str
    request: FriendRequestResponse
