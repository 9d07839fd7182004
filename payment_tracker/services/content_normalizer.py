"""Turn an inbound chat message into an extraction request."""

import base64

import httpx

from payment_tracker.agents.prompts import EXTRACTION_PROMPT, TEXT_MESSAGE_TEMPLATE
from payment_tracker.core.errors import ContentResolutionError
from payment_tracker.core.models import ExtractionRequest, InboundMessage, Transport
from payment_tracker.core.utils import get_logger

logger = get_logger("payment-tracker.normalizer")


class ContentNormalizer:
    """Builds the prompt for text messages and fetches and encodes photos."""

    def __init__(self, transport: Transport, http_client: httpx.AsyncClient, mime_type: str = "image/jpeg") -> None:
        """Initialize with the chat transport (for file resolution) and a shared HTTP client."""
        self.transport = transport
        self.http_client = http_client
        self.mime_type = mime_type

    async def normalize(self, message: InboundMessage) -> ExtractionRequest | None:
        """Return the extraction request, or None when the message has neither photo nor text."""
        if message.photos:
            image_base64 = await self.fetch_photo(message)
            return ExtractionRequest(prompt=EXTRACTION_PROMPT, image_base64=image_base64, mime_type=self.mime_type)
        if message.text:
            return ExtractionRequest(prompt=TEXT_MESSAGE_TEMPLATE.format(prompt=EXTRACTION_PROMPT, text=message.text))
        return None

    async def fetch_photo(self, message: InboundMessage) -> str:
        """Download the largest photo variant and return it base64-encoded."""
        photo = message.photos[-1]
        logger.info(f"Resolving photo {photo.file_id} ({photo.width}x{photo.height}) for chat {message.chat_id}")
        try:
            url = await self.transport.resolve_file_url(photo.file_id)
            response = await self.http_client.get(url)
            response.raise_for_status()
        except Exception as exc:
            msg = f"Could not fetch photo {photo.file_id}: {exc}"
            logger.exception(msg)
            raise ContentResolutionError(msg) from exc
        if not response.content:
            msg = f"Photo {photo.file_id} is empty"
            raise ContentResolutionError(msg)
        return base64.b64encode(response.content).decode("ascii")
