"""Services package: content normalization, payment persistence, and reply formatting."""

from .content_normalizer import ContentNormalizer  # noqa: F401
from .payment_repository import PaymentRepository  # noqa: F401
