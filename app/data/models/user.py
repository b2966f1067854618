from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from app.data.database import Base


ADDRESS_FIELDS = ("street", "city", "state", "country", "zip_code")


def _utcnow():
    return datetime.now(timezone.utc)


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False, index=True)
    email = Column(String(255), nullable=False, unique=True)
    # hash bcrypt, nigdy nie wychodzi na zewnatrz
    password = Column(String(255), nullable=False)

    street = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(100), nullable=True)
    country = Column(String(100), nullable=True)
    zip_code = Column(String(20), nullable=True)

    phone_number = Column(String(32), nullable=True, index=True)
    avatar = Column(String(1024), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    cart = relationship(
        "CartModel",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )

    @property
    def address(self) -> dict | None:
        fields = {name: getattr(self, name) for name in ADDRESS_FIELDS}
        if all(v is None for v in fields.values()):
            return None
        return fields
