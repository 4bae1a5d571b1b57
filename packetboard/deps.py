from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from .settings import settings

# libpq 스타일 URL -> SQLAlchemy psycopg 드라이버
_LIBPQ_SCHEMES = ("postgres://", "postgresql://")

def normalize_db_url(url: str) -> str:
    for scheme in _LIBPQ_SCHEMES:
        if url.startswith(scheme):
            return "postgresql+psycopg://" + url[len(scheme):]
    return url

engine = create_engine(normalize_db_url(settings.DB_URL), pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def ping(bind: Engine) -> None:
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))
