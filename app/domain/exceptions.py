# app/domain/exceptions.py


class NotFoundError(ValueError):
    """Brak rekordu (user, koszyk, pozycja w koszyku, produkt)."""


class AlreadyExistsError(ValueError):
    """Naruszenie unikalnosci, np. email juz zajety."""


class AuthenticationError(ValueError):
    """Zle dane logowania albo niepoprawny token."""
