"""Telegram transport: receives chat messages by long polling and sends replies.

This module adapts python-telegram-bot to the pipeline. Incoming updates are converted into
InboundMessage objects and handed to the MessageProcessor; the TelegramTransport gives the
pipeline file resolution and reply sending without exposing the Telegram types.
"""

from telegram import Bot, Message, Update
from telegram.ext import Application, ApplicationBuilder, ContextTypes, MessageHandler, filters

from payment_tracker.core.models import InboundMessage, PhotoVariant
from payment_tracker.core.settings import Settings
from payment_tracker.core.utils import get_logger
from payment_tracker.workers.message_processor import MessageProcessor

logger = get_logger("payment-tracker.bot")


class TelegramTransport:
    """File resolution and reply sending through the Telegram Bot API."""

    def __init__(self, bot: Bot, settings: Settings) -> None:
        """Initialize the transport with a bot handle and settings."""
        self.bot = bot
        self.settings = settings

    async def resolve_file_url(self, file_id: str) -> str:
        """Resolve a file id to a downloadable URL."""
        file = await self.bot.get_file(file_id)
        if file.file_path is None:
            msg = f"Telegram returned no file path for {file_id}"
            raise ValueError(msg)
        if file.file_path.startswith(("http://", "https://")):
            return file.file_path
        return self.settings.telegram_file_url_template.format(
            token=self.settings.telegram_bot_token, file_path=file.file_path
        )

    async def send_message(self, chat_id: int, text: str) -> None:
        """Send a text reply to a chat."""
        await self.bot.send_message(chat_id=chat_id, text=text)


def to_inbound_message(message: Message) -> InboundMessage:
    """Convert a Telegram message into the pipeline's InboundMessage."""
    return InboundMessage(
        chat_id=message.chat_id,
        text=message.text,
        photos=[PhotoVariant(file_id=p.file_id, width=p.width, height=p.height) for p in message.photo or ()],
    )


def build_application(settings: Settings) -> Application:
    """Build the Telegram application; updates are handled concurrently."""
    return ApplicationBuilder().token(settings.telegram_bot_token).concurrent_updates(True).build()


def register_handlers(application: Application, processor: MessageProcessor) -> None:
    """Route every new message to the processor and log errors raised outside it."""

    async def on_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        _ = context
        if update.message is None:
            return
        await processor.process(to_inbound_message(update.message))

    async def on_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        logger.error(f"Unhandled error while handling update {update}", exc_info=context.error)

    application.add_handler(MessageHandler(filters.UpdateType.MESSAGE, on_message))
    application.add_error_handler(on_error)


async def start_polling(application: Application) -> None:
    """Initialize the application and start long polling."""
    await application.initialize()
    await application.start()
    await application.updater.start_polling()
    logger.info("Telegram polling started")


async def stop_polling(application: Application) -> None:
    """Stop long polling and shut the application down."""
    await application.updater.stop()
    await application.stop()
    await application.shutdown()
    logger.info("Telegram polling stopped")
