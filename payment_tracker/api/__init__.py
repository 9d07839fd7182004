"""API package: provides the Telegram transport, pipeline dependencies, and HTTP routes."""

from .dependencies import get_agent, get_processor, get_repository  # noqa: F401
from .routes import router  # noqa: F401
