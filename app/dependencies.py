"""
Shared FastAPI dependencies.

The active ``WordNet`` lives on ``app.state.wordnet``.  It is immutable, so
requests share it without locking; an import swaps in a new instance.
"""

from fastapi import HTTPException, Request, status

from app.services.outcast_service import Outcast
from app.services.wordnet_service import WordNet


def get_wordnet(request: Request) -> WordNet:
    """Return the active taxonomy or fail with 503 if none is loaded."""
    wordnet = getattr(request.app.state, "wordnet", None)
    if wordnet is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="No taxonomy loaded. POST one to /taxonomy first.",
        )
    return wordnet


def get_outcast(request: Request) -> Outcast:
    return Outcast(get_wordnet(request))
