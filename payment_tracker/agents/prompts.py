"""Prompts and response schema for the payment extraction agents."""

EXTRACTION_PROMPT = """Extract financial information from the input.

For images, look for receipts, invoices, or any text containing payment information.
For text messages, analyze the content for payment details.

Focus on extracting:
- Payment amount (in numbers)
- Payment description
- Category (e.g., food, transport, utilities)
- Date (if mentioned)
- Additional details like location, merchant, payment method, or any relevant notes

If the input contains no payment information at all, set every field to null."""

TEXT_MESSAGE_TEMPLATE = "{prompt}\n\nMessage to analyze: {text}"

PLAIN_JSON_INSTRUCTIONS = """
Return ONLY a valid JSON object, with no explanations or extra text, using exactly these fields:
  - value (number or null): the payment amount
  - description (string or null): brief description of what the payment was for
  - category (string or null): category of the expense (e.g., food, transport, utilities)
  - payed_at (string or null): payment date in ISO 8601 format, null if not mentioned
  - data (object or null): additional details with the optional string fields
    location, merchant, payment_method and notes

When no payment information is present, return:
{"value": null, "description": null, "category": null, "payed_at": null, "data": null}
"""

NULLABLE_STRING = ["string", "null"]

FINANCIAL_SCHEMA = {
    "type": "object",
    "properties": {
        "value": {
            "type": ["number", "null"],
            "description": "The payment amount as a number, null when no payment is present",
        },
        "description": {
            "type": NULLABLE_STRING,
            "description": "Brief description of what the payment was for",
        },
        "category": {
            "type": NULLABLE_STRING,
            "description": "Category of the expense (e.g., food, transport, utilities)",
        },
        "payed_at": {
            "type": NULLABLE_STRING,
            "description": "Payment date in ISO 8601 date-time format",
        },
        "data": {
            "type": ["object", "null"],
            "description": "Additional relevant information",
            "properties": {
                "location": {"type": NULLABLE_STRING, "description": "Place where the payment was made"},
                "merchant": {"type": NULLABLE_STRING, "description": "Name of the merchant or service provider"},
                "payment_method": {
                    "type": NULLABLE_STRING,
                    "description": "Method of payment (e.g., cash, card, transfer)",
                },
                "notes": {"type": NULLABLE_STRING, "description": "Any additional notes or comments"},
            },
        },
    },
    "required": ["value", "description", "category", "payed_at", "data"],
}

SCHEMA_NAME = "financial_data"

PROMPT_LOG_LABEL = "Extract payment JSON (value, description, category, payed_at, data)"
