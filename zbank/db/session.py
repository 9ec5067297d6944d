from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from zbank.config import Config

engine = create_engine(Config.DATABASE_URL, echo=Config.SQLALCHEMY_ECHO, future=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)


def get_session():
    return SessionLocal()
