from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.api.users.models import User


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def list_users(self, requester_id: int, search: Optional[str] = None) -> List[User]:
        query = self.db.query(User).filter(User.id != requester_id)
        if search:
            search_pattern = f"%{search.lower()}%"
            query = query.filter(
                or_(
                    func.lower(User.username).like(search_pattern),
                    func.lower(User.display_name).like(search_pattern)
                )
            )
        return query.order_by(User.id).all()
