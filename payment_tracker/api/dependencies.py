"""Construction of the long-lived pipeline handles (agent, repository, processor).

This module wires the LLM client, database session factory, HTTP client, and transport into a
MessageProcessor, so tests and the application build the pipeline the same way.
"""

import httpx
from groq import AsyncGroq

from payment_tracker.agents.base import BaseAgent
from payment_tracker.agents.registry import AgentRegistry
from payment_tracker.core.db import create_tables, get_engine, get_session_factory
from payment_tracker.core.models import Transport
from payment_tracker.core.settings import Settings
from payment_tracker.services.content_normalizer import ContentNormalizer
from payment_tracker.services.payment_repository import PaymentRepository
from payment_tracker.workers.message_processor import MessageProcessor


def get_agent(settings: Settings) -> BaseAgent:
    """Provide the extraction agent selected by the configured variant."""
    agent_cls = AgentRegistry.get(settings.extraction_variant)
    client = AsyncGroq(api_key=settings.groq_api_key)
    return agent_cls(client, settings)


def get_repository(settings: Settings) -> PaymentRepository:
    """Provide a payment repository, creating the payments table if needed."""
    engine = get_engine(settings)
    create_tables(engine)
    return PaymentRepository(get_session_factory(engine))


def get_http_client(settings: Settings) -> httpx.AsyncClient:
    """Provide the shared HTTP client used to download photos."""
    return httpx.AsyncClient(timeout=settings.http_timeout_seconds, follow_redirects=True)


def get_processor(
    settings: Settings,
    transport: Transport,
    http_client: httpx.AsyncClient,
    agent: BaseAgent | None = None,
    repository: PaymentRepository | None = None,
) -> MessageProcessor:
    """Provide a MessageProcessor wired to the given transport."""
    normalizer = ContentNormalizer(transport, http_client, mime_type=settings.image_mime_type)
    return MessageProcessor(
        normalizer=normalizer,
        agent=agent or get_agent(settings),
        repository=repository or get_repository(settings),
        transport=transport,
    )
