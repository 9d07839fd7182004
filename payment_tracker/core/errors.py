"""Exception types raised along the message pipeline."""


class PaymentTrackerError(Exception):
    """Base class for pipeline errors."""


class ContentResolutionError(PaymentTrackerError):
    """A photo could not be resolved or downloaded from the transport."""


class ExtractionError(PaymentTrackerError):
    """The LLM completion call failed."""


class ResultParseError(PaymentTrackerError):
    """The LLM output was not valid JSON of the expected shape."""

    def __init__(self, message: str, raw_output: str) -> None:
        """Keep the raw output next to the message for diagnosis."""
        super().__init__(message)
        self.raw_output = raw_output


class PersistenceError(PaymentTrackerError):
    """The store rejected the insert."""
