"""Payment extraction agents backed by the Groq chat completions API.

This module defines the agents that send a normalized chat message (text, or a prompt with an inline
base64 image) to the LLM and return its raw output. Two variants are registered: ``structured`` asks
the provider to enforce a JSON schema, ``plain`` uses JSON-object mode and describes the shape in the
prompt. Both target the same ExtractionResult shape. Calls are made once, without retry.
"""

from payment_tracker.agents.base import BaseAgent
from payment_tracker.agents.prompts import (
    FINANCIAL_SCHEMA,
    PLAIN_JSON_INSTRUCTIONS,
    PROMPT_LOG_LABEL,
    SCHEMA_NAME,
)
from payment_tracker.agents.registry import AgentRegistry
from payment_tracker.core.errors import ExtractionError
from payment_tracker.core.models import ExtractionRequest
from payment_tracker.core.settings import Settings
from payment_tracker.core.utils import get_color, get_logger, truncate

MAX_OUTPUT_LOG_LEN = 500

logger = get_logger("payment-tracker.agent")


class GroqExtractionAgent(BaseAgent):
    """Agent responsible for the LLM call that extracts payment data from a message."""

    def __init__(self, llm_client: object, settings: Settings) -> None:
        """Initialize the agent with an async Groq client and settings."""
        self.llm_client = llm_client
        self.settings = settings

    def build_prompt(self, request: ExtractionRequest) -> str:
        """Return the instruction text sent with the request."""
        return request.prompt

    def response_format(self) -> dict:
        """Return the provider response format constraint."""
        raise NotImplementedError

    def build_messages(self, request: ExtractionRequest) -> list[dict]:
        """Build the chat messages, attaching the image as a data URL when present."""
        prompt = self.build_prompt(request)
        if not request.has_image:
            return [{"role": "user", "content": prompt}]
        data_url = f"data:{request.mime_type};base64,{request.image_base64}"
        return [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": prompt},
                    {"type": "image_url", "image_url": {"url": data_url}},
                ],
            }
        ]

    async def extract(self, request: ExtractionRequest) -> str:
        """Call the LLM once and return the raw text it produced."""
        cyan = get_color("cyan")
        yellow = get_color("yellow")
        green = get_color("green")
        reset = get_color("reset")
        kind = "image" if request.has_image else "text"
        logger.info(f"{yellow}PROMPT: {PROMPT_LOG_LABEL} [{kind}]{reset}")
        logger.info(f"{cyan}AGENT: Calling LLM ({self.settings.groq_model})...{reset}")
        try:
            completion = await self.llm_client.chat.completions.create(
                model=self.settings.groq_model,
                messages=self.build_messages(request),
                temperature=self.settings.groq_temperature,
                max_completion_tokens=self.settings.groq_max_completion_tokens,
                top_p=self.settings.groq_top_p,
                stream=self.settings.groq_stream,
                stop=self.settings.groq_stop,
                response_format=self.response_format(),
            )
            raw_output = await self._collect_llm_output(completion)
        except Exception as exc:
            msg = f"Groq API call failed: {exc}"
            logger.exception(msg)
            raise ExtractionError(msg) from exc
        logger.info(f"{green}OUTPUT: {truncate(raw_output, MAX_OUTPUT_LOG_LEN)}{reset}")
        return raw_output

    async def _collect_llm_output(self, completion: object) -> str:
        """Collect the full output from a completion, streamed or not."""
        if not self.settings.groq_stream:
            return completion.choices[0].message.content or ""
        raw_output = ""
        async for chunk in completion:
            raw_output += chunk.choices[0].delta.content or ""
        return raw_output


class StructuredExtractionAgent(GroqExtractionAgent):
    """Agent that asks the provider to enforce the financial JSON schema."""

    def response_format(self) -> dict:
        """Request output conforming to FINANCIAL_SCHEMA."""
        return {
            "type": "json_schema",
            "json_schema": {"name": SCHEMA_NAME, "schema": FINANCIAL_SCHEMA},
        }


class PlainExtractionAgent(GroqExtractionAgent):
    """Agent that describes the JSON shape in the prompt and only asks for a JSON object."""

    def build_prompt(self, request: ExtractionRequest) -> str:
        """Append the JSON shape instructions to the prompt."""
        return f"{request.prompt}\n{PLAIN_JSON_INSTRUCTIONS}"

    def response_format(self) -> dict:
        """Request any syntactically valid JSON object."""
        return {"type": "json_object"}


AgentRegistry.register("structured", StructuredExtractionAgent)
AgentRegistry.register("plain", PlainExtractionAgent)
