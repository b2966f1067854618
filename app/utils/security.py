# app/utils/security.py
from datetime import datetime, timedelta, timezone

import jwt
from passlib.context import CryptContext

from app.utils.settings import JWT_SECRET, JWT_ALGORITHM, JWT_EXPIRES_HOURS

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(candidate: str | None, password_hash: str | None) -> bool:
    # brak hasla to po prostu False, nie blad
    if not candidate or not password_hash:
        return False
    return pwd_context.verify(candidate, password_hash)


def create_access_token(user_id: int) -> str:
    now = datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(hours=JWT_EXPIRES_HOURS),
    }
    return jwt.encode(claims, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> int:
    """Zwraca id usera z tokena, rzuca jwt.InvalidTokenError gdy token jest zly/wygasl."""
    claims = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    try:
        return int(claims["sub"])
    except (KeyError, TypeError, ValueError) as e:
        raise jwt.InvalidTokenError("Token has no valid subject") from e
