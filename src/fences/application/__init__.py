"""Application layer - use cases and orchestration."""

from .commands import QuoteDesignCommand
from .controller import DesignController
from .dtos import DesignSnapshot, QuoteOutput, SegmentInput

__all__ = [
    "DesignController",
    "DesignSnapshot",
    "QuoteDesignCommand",
    "QuoteOutput",
    "SegmentInput",
]
