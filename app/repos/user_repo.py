from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.user import UserModel


def prepare_user_for_save(user: UserModel) -> UserModel:
    """Normalizacja przed kazdym zapisem (email lowercase, trim)."""
    if user.email:
        user.email = user.email.strip().lower()
    if user.name:
        user.name = user.name.strip()
    return user


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.email == email.strip().lower())
        ).scalar_one_or_none()

    def list_users(self) -> list[UserModel]:
        return list(self.db.execute(select(UserModel).order_by(UserModel.id)).scalars())

    def save(self, user: UserModel) -> UserModel:
        prepare_user_for_save(user)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def delete(self, user: UserModel) -> None:
        self.db.delete(user)
        self.db.commit()

    def rollback(self):
        self.db.rollback()
