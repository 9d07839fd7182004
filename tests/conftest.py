"""Shared pytest fixtures: in-memory SQLite repository, fake transport, fake agent and LLM client."""

from types import SimpleNamespace

import httpx
import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from payment_tracker.agents.base import BaseAgent
from payment_tracker.core.db import create_tables, get_session_factory
from payment_tracker.core.models import ExtractionRequest
from payment_tracker.core.settings import Settings
from payment_tracker.services.content_normalizer import ContentNormalizer
from payment_tracker.services.payment_repository import PaymentRepository
from payment_tracker.workers.message_processor import MessageProcessor

PHOTO_BYTES = b"\xff\xd8\xff\xe0fake-jpeg-bytes"


class FakeTransport:
    """Records replies and file resolutions instead of talking to Telegram."""

    def __init__(self, resolve_error: Exception | None = None) -> None:
        self.sent: list[tuple[int, str]] = []
        self.resolved: list[str] = []
        self.resolve_error = resolve_error

    async def resolve_file_url(self, file_id: str) -> str:
        self.resolved.append(file_id)
        if self.resolve_error is not None:
            raise self.resolve_error
        return f"https://files.test/{file_id}.jpg"

    async def send_message(self, chat_id: int, text: str) -> None:
        self.sent.append((chat_id, text))


class FakeAgent(BaseAgent):
    """Returns a canned LLM output, or raises, and records the requests it saw."""

    def __init__(self, raw_output: str = "", error: Exception | None = None) -> None:
        self.raw_output = raw_output
        self.error = error
        self.requests: list[ExtractionRequest] = []

    async def extract(self, request: ExtractionRequest) -> str:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.raw_output


class FakeCompletions:
    """Stand-in for ``AsyncGroq().chat.completions``."""

    def __init__(self, content: str | None = None, error: Exception | None = None, chunks: list[str] | None = None):
        self.content = content
        self.error = error
        self.chunks = chunks
        self.calls: list[dict] = []

    async def create(self, **kwargs: object) -> object:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.chunks is not None:
            return self._stream()
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=self.content))])

    async def _stream(self):  # noqa: ANN202
        for text in self.chunks:
            yield SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=text))])


def fake_llm_client(**kwargs: object) -> SimpleNamespace:
    """Build an object shaped like an AsyncGroq client."""
    return SimpleNamespace(chat=SimpleNamespace(completions=FakeCompletions(**kwargs)))


@pytest.fixture()
def settings() -> Settings:
    return Settings(telegram_bot_token="123456:TEST", groq_api_key="test-key", database_url="sqlite://")


@pytest.fixture()
def session_factory():  # noqa: ANN201
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    create_tables(engine)
    yield get_session_factory(engine)
    engine.dispose()


@pytest.fixture()
def repository(session_factory) -> PaymentRepository:  # noqa: ANN001
    return PaymentRepository(session_factory)


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def http_requests() -> list[httpx.Request]:
    return []


@pytest.fixture()
def http_client(http_requests) -> httpx.AsyncClient:  # noqa: ANN001
    def handler(request: httpx.Request) -> httpx.Response:
        http_requests.append(request)
        return httpx.Response(200, content=PHOTO_BYTES)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture()
def normalizer(transport, http_client) -> ContentNormalizer:  # noqa: ANN001
    return ContentNormalizer(transport, http_client)


def make_processor(normalizer: ContentNormalizer, agent: BaseAgent, repository: PaymentRepository, transport: object):
    """Build a MessageProcessor around test doubles."""
    return MessageProcessor(normalizer=normalizer, agent=agent, repository=repository, transport=transport)
