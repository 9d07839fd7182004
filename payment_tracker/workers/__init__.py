"""Workers package: per-message pipeline orchestration."""

from .message_processor import MessageProcessor  # noqa: F401
