from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from Security.security_config import SETTINGS

DATABASE_URL = SETTINGS["DATABASE_URL"]


def is_sqlite_database(url):
    return url is not None and url.startswith("sqlite")


def engine_options(url) -> dict:
    if is_sqlite_database(url):
        # FastAPI runs sync endpoints in a threadpool.
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


engine = create_engine(DATABASE_URL, **engine_options(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
