"""FastAPI dependency injection for fence services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from fences.application import QuoteDesignCommand


@lru_cache(maxsize=1)
def get_quote_command() -> QuoteDesignCommand:
    """Get the cached QuoteDesignCommand instance.

    The command holds no design state, so one instance serves every request.
    """
    return QuoteDesignCommand()


# Type aliases for cleaner endpoint signatures
QuoteCommandDep = Annotated[QuoteDesignCommand, Depends(get_quote_command)]
