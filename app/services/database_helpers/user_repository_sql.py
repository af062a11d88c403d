# /app/services/database_helpers/user_repository_sql.py

from typing import Dict, Optional

from sqlalchemy.orm import Session

from app.db.models.user_model import User


class UserRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def add_user(self, record: Dict) -> User:
        new_user = User(**record)
        self.db.add(new_user)
        self.db.commit()
        self.db.refresh(new_user)
        return new_user

    def update_user(self, user_id: str, data: Dict) -> Optional[User]:
        user = self.get_user_by_id(user_id)
        if not user:
            return None
        for key, value in data.items():
            setattr(user, key, value)
        self.db.commit()
        self.db.refresh(user)
        return user
