# app/services/user_service.py
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.data.models.user import UserModel, ADDRESS_FIELDS
from app.domain.exceptions import AlreadyExistsError, AuthenticationError, NotFoundError
from app.domain.schemas import UserCreate, UserUpdate, UserRead, AuthOut
from app.repos.user_repo import UserRepo
from app.services.order_client import OrderClient
from app.utils.rest_client import RemoteServiceError
from app.utils.security import hash_password, verify_password, create_access_token
from app.utils.logging import get_logger

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def _apply_address(user: UserModel, address: dict | None) -> None:
    address = address or {}
    for field in ADDRESS_FIELDS:
        setattr(user, field, address.get(field))


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def _save(self, user: UserModel) -> UserModel:
        # unikalnosc emaila pilnuje tez baza (wyscig dwoch rejestracji)
        try:
            return self.repo.save(user)
        except IntegrityError as e:
            self.repo.rollback()
            raise AlreadyExistsError("User already exists") from e

    #auth
    def register(self, payload: UserCreate) -> AuthOut:
        if self.repo.get_by_email(payload.email):
            raise AlreadyExistsError("User already exists")

        user = UserModel(
            name=payload.name,
            email=payload.email,
            password=hash_password(payload.password),
            phone_number=payload.phone_number,
            avatar=payload.avatar,
        )
        _apply_address(user, payload.address.model_dump() if payload.address else None)

        created = self._save(user)
        logger.info(f"Zarejestrowano usera {created.id}")

        return AuthOut(user=UserRead.model_validate(created), token=create_access_token(created.id))

    def login(self, email: str, password: str) -> AuthOut:
        user = self.repo.get_by_email(email)

        # ten sam komunikat dla nieznanego emaila i zlego hasla
        if not user or not verify_password(password, user.password):
            raise AuthenticationError(INVALID_CREDENTIALS)

        return AuthOut(user=UserRead.model_validate(user), token=create_access_token(user.id))

    #query
    def list_users(self) -> list[UserRead]:
        return [UserRead.model_validate(u) for u in self.repo.list_users()]

    def get_user(self, user_id: int) -> UserRead:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return UserRead.model_validate(user)

    #commands
    def update_user(self, user_id: int, payload: UserUpdate) -> UserRead:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")

        changes = payload.model_dump(exclude_unset=True)

        if changes.get("email") and changes["email"] != user.email:
            other = self.repo.get_by_email(changes["email"])
            if other and other.id != user.id:
                raise AlreadyExistsError("User already exists")

        if "address" in changes:
            _apply_address(user, changes.pop("address"))

        password = changes.pop("password", None)
        if password:
            user.password = hash_password(password)

        for field, value in changes.items():
            # name/email sa wymagane, null w patchu ignorujemy
            if value is None and field in ("name", "email"):
                continue
            setattr(user, field, value)

        updated = self._save(user)
        logger.info(f"Zaktualizowano usera {user_id}")
        return UserRead.model_validate(updated)

    def delete_user(self, user_id: int, order_client: OrderClient) -> None:
        """
        Use Case: Usuniecie usera (saga w dwoch krokach).

        1. Usuwa zamowienia usera w order-service - blad tylko logujemy
        2. Usuwa usera (i jego koszyk) - tylko ten krok moze zwrocic blad
        """
        try:
            order_client.delete_user_orders(user_id)
        except RemoteServiceError as e:
            logger.warning(f"Nie udalo sie usunac zamowien usera {user_id}: {e.message}")

        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")

        self.repo.delete(user)
        logger.info(f"Usunieto usera {user_id}")
