"""Parse raw LLM output into an ExtractionResult."""

import json

from pydantic import ValidationError

from payment_tracker.core.errors import ResultParseError
from payment_tracker.core.models import ExtractionResult
from payment_tracker.core.utils import get_logger

logger = get_logger("payment-tracker.parser")


def parse_extraction_result(raw_output: str) -> ExtractionResult:
    """Strictly parse the LLM output as JSON and validate its shape.

    There is no salvage of partial output: anything that is not a JSON object matching
    ExtractionResult raises ResultParseError carrying the raw text.
    """
    try:
        data = json.loads(raw_output)
    except json.JSONDecodeError as exc:
        logger.error(f"Failed to parse LLM response as JSON: {exc}")
        logger.error(f"Raw response: {raw_output}")
        msg = f"LLM response is not valid JSON: {exc}"
        raise ResultParseError(msg, raw_output) from exc
    if not isinstance(data, dict):
        logger.error(f"LLM response is not a JSON object. Raw response: {raw_output}")
        msg = f"Expected a JSON object, got {type(data).__name__}"
        raise ResultParseError(msg, raw_output) from None
    try:
        return ExtractionResult.model_validate(data)
    except ValidationError as exc:
        logger.error(f"LLM response does not match the payment shape: {exc}")
        logger.error(f"Raw response: {raw_output}")
        msg = f"LLM response does not match the payment shape: {exc.error_count()} error(s)"
        raise ResultParseError(msg, raw_output) from exc
