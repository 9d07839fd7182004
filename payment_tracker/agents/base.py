"""Base agent abstraction for payment extraction agents.

This module defines the abstract base class for all extraction agents, enforcing a standard interface for turning a normalized chat message into the raw text returned by the LLM.
"""

from abc import ABC, abstractmethod

from payment_tracker.core.models import ExtractionRequest


class BaseAgent(ABC):
    """Abstract base class for all agents."""

    @abstractmethod
    async def extract(self, request: ExtractionRequest) -> str:
        """Send the request to the LLM once and return its raw text output."""
