"""FastAPI dependency injection for quote services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cabinet_pricing.application import PriceQuoteCommand


class QuoteCommandFactory:
    """Builds fully configured quote commands."""

    def create_quote_command(self, include_legacy: bool = False) -> PriceQuoteCommand:
        return PriceQuoteCommand(include_legacy=include_legacy)


@lru_cache(maxsize=1)
def get_command_factory() -> QuoteCommandFactory:
    """Get cached QuoteCommandFactory instance."""
    return QuoteCommandFactory()


def get_quote_command(
    factory: Annotated[QuoteCommandFactory, Depends(get_command_factory)],
) -> PriceQuoteCommand:
    """Dependency for PriceQuoteCommand."""
    return factory.create_quote_command()


# Type aliases for cleaner endpoint signatures
CommandFactoryDep = Annotated[QuoteCommandFactory, Depends(get_command_factory)]
QuoteCommandDep = Annotated[PriceQuoteCommand, Depends(get_quote_command)]
