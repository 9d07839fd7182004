"""DB models and connection helpers for the Telegram Payment Tracker."""

from sqlalchemy import JSON, Column, DateTime, Float, Integer, Text, create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from payment_tracker.core.settings import Settings
from payment_tracker.core.utils import utcnow

Base = declarative_base()


class Payment(Base):
    """A payment extracted from a chat message. Rows are only ever appended."""

    __tablename__ = "payments"
    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
    value = Column(Float, nullable=False)
    description = Column(Text, nullable=True)
    payed_at = Column(DateTime(timezone=True), nullable=False)
    category = Column(Text, nullable=True)
    data = Column(JSON, nullable=True)


def get_engine(settings: Settings) -> Engine:
    """Create a SQLAlchemy engine, injecting the access key as the password when set."""
    url = make_url(settings.database_url)
    if settings.database_key:
        url = url.set(password=settings.database_key)
    return create_engine(url, pool_pre_ping=True)


def get_session_factory(engine: Engine) -> sessionmaker:
    """Build the session factory used by the payment repository."""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def create_tables(engine: Engine) -> None:
    """Create the payments table if it does not exist yet."""
    Base.metadata.create_all(engine)
