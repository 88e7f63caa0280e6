from pydantic import BaseModel, ConfigDict, Field


class UserSummary(BaseModel):
    """Public profile fields of a user."""
    id: int = Field(gt=0)
    username: str = Field(min_length=1)
    display_name: str
    status: str | None = None

    model_config = ConfigDict(from_attributes=True)
