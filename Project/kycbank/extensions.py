from contextlib import contextmanager

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

"""create uninitialized extension objects to avoid circular imports"""
Base = declarative_base()
engine = None
SessionLocal = None
limiter = Limiter(key_func=get_remote_address)


def init_db(app: Flask):
    """Initialize SQLAlchemy engine & sessionmaker"""
    global engine, SessionLocal
    database_url = app.config.get("SQLALCHEMY_DATABASE_URI", "sqlite:///./dev.db")

    engine_kwargs = {"echo": app.config.get("SQLALCHEMY_ECHO", False), "future": True}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        # one shared connection, otherwise every session sees an empty database
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        engine_kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, **engine_kwargs)
    SessionLocal = sessionmaker(
        autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
    )

    from kycbank.Database.kyc_application import KycApplication  # noqa: F401
    from kycbank.Database.verification_record import VerificationRecord  # noqa: F401

    Base.metadata.create_all(bind=engine)
    return engine, SessionLocal


def get_session():
    if SessionLocal is None:
        raise RuntimeError("Database not initialized. Call init_db(app) first.")
    return SessionLocal()


@contextmanager
def session_scope():
    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_limiter(app: Flask):
    """Attach flask-limiter using the RATELIMIT_* config keys."""
    limiter.init_app(app)
    return limiter
