"""Application layer: quote commands and DTOs."""

from .commands import PriceQuoteCommand
from .dtos import LineItemQuote, QuoteOutput

__all__ = ["LineItemQuote", "PriceQuoteCommand", "QuoteOutput"]
