"""Core package: provides models, database helpers, settings, errors, and shared utilities."""

from .db import Payment, get_engine  # noqa: F401
from .errors import ExtractionError, PersistenceError, ResultParseError  # noqa: F401
from .models import ExtractionResult, InboundMessage, Outcome  # noqa: F401
from .settings import Settings  # noqa: F401
from .utils import get_logger  # noqa: F401
