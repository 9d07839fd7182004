"""Persistence of extracted payments."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from payment_tracker.core.db import Payment
from payment_tracker.core.errors import PersistenceError
from payment_tracker.core.models import ExtractionResult
from payment_tracker.core.utils import get_logger, utcnow

logger = get_logger("payment-tracker.repository")


class PaymentRepository:
    """Append-only writer for the payments table.

    Each call opens its own session, so the repository can be shared by concurrently handled
    messages and called from worker threads.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        """Initialize the repository with a SQLAlchemy session factory."""
        self.session_factory = session_factory

    def save(self, result: ExtractionResult) -> Payment:
        """Insert one row for a qualifying result, defaulting payed_at to now."""
        if not result.has_payment:
            msg = "Refusing to store a result without a value"
            raise ValueError(msg)
        payment = Payment(
            value=result.value,
            description=result.description,
            category=result.category,
            payed_at=result.payed_at or utcnow(),
            data=result.data,
        )
        session: Session = self.session_factory()
        try:
            session.add(payment)
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            msg = f"Failed to insert payment: {exc}"
            logger.exception(msg)
            raise PersistenceError(msg) from exc
        finally:
            session.close()
        logger.info(f"Stored payment id={payment.id} value={payment.value} category={payment.category}")
        return payment
