"""Agents package: provides agent registry, base class, extraction agents, and the result parser."""

from .base import BaseAgent  # noqa: F401
from .extraction_agent import PlainExtractionAgent, StructuredExtractionAgent  # noqa: F401
from .parser import parse_extraction_result  # noqa: F401
from .registry import AgentRegistry  # noqa: F401
