"""Per-message orchestration: normalize, extract, parse, store, reply."""

import asyncio

from payment_tracker.agents.base import BaseAgent
from payment_tracker.agents.parser import parse_extraction_result
from payment_tracker.core.errors import PersistenceError, ResultParseError
from payment_tracker.core.models import InboundMessage, Outcome, Transport
from payment_tracker.core.utils import get_logger, truncate
from payment_tracker.services import responder
from payment_tracker.services.content_normalizer import ContentNormalizer
from payment_tracker.services.payment_repository import PaymentRepository

logger = get_logger("payment-tracker.worker")

MAX_TEXT_LOG_LEN = 120


class MessageProcessor:
    """MessageProcessor handles one inbound message end to end and sends exactly one reply."""

    def __init__(
        self,
        normalizer: ContentNormalizer,
        agent: BaseAgent,
        repository: PaymentRepository,
        transport: Transport,
    ) -> None:
        """Initialize the processor with its collaborators."""
        self.normalizer = normalizer
        self.agent = agent
        self.repository = repository
        self.transport = transport

    async def process(self, message: InboundMessage) -> Outcome:
        """Run the pipeline for one message and send its single reply. Errors never propagate."""
        chat_id = message.chat_id
        kind = "photo" if message.photos else "text" if message.text else "other"
        logger.info(f"[CHAT {chat_id}] Received {kind} message: {truncate(message.text or '', MAX_TEXT_LOG_LEN)}")
        try:
            outcome, text = await self._run(message)
        except Exception:
            logger.exception(f"[CHAT {chat_id}] Error processing message")
            outcome, text = Outcome.FAILED, responder.PROCESSING_FAILED
        try:
            await self.transport.send_message(chat_id, text)
        except Exception:
            logger.exception(f"[CHAT {chat_id}] Failed to send {outcome} reply")
        return outcome

    async def _run(self, message: InboundMessage) -> tuple[Outcome, str]:
        """Run the pipeline stages and pick the outcome and reply text."""
        chat_id = message.chat_id
        request = await self.normalizer.normalize(message)
        if request is None:
            return Outcome.UNSUPPORTED, responder.UNSUPPORTED_CONTENT

        raw_output = await self.agent.extract(request)
        try:
            result = parse_extraction_result(raw_output)
        except ResultParseError:
            logger.warning(f"[CHAT {chat_id}] Could not understand LLM output")
            return Outcome.NOT_UNDERSTOOD, responder.NOT_UNDERSTOOD

        if not result.has_payment:
            logger.info(f"[CHAT {chat_id}] No payment information found")
            return Outcome.NO_DATA, responder.NO_PAYMENT_FOUND

        try:
            payment = await asyncio.to_thread(self.repository.save, result)
        except PersistenceError:
            logger.error(f"[CHAT {chat_id}] Dropping extracted payment after failed insert: {result}")
            return Outcome.SAVE_FAILED, responder.SAVE_FAILED

        return Outcome.STORED, responder.format_payment_recorded(payment)
