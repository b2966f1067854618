# app/data/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from app.utils.settings import DATABASE_URL


class Base(DeclarativeBase):
    pass


def _make_engine(url: str):
    # sqlite w pamieci (testy) - jedno wspoldzielone polaczenie
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, pool_pre_ping=True)


engine = _make_engine(DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    # modele musza byc zaimportowane przed create_all
    import app.data.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
