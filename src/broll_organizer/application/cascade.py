"""
Term cascade: try a segment's search terms in order (specific -> broad) until one
yields a usable asset. Per-term failures fall through to the next term; only an
AuthError aborts, because the credential is shared by every remaining query.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Sequence

from broll_organizer.application.selector import select_best
from broll_organizer.domain.errors import AuthError, SearchError
from broll_organizer.domain.models import CascadeOutcome, Exhausted, Succeeded
from broll_organizer.ports.interfaces import IFootageSearch

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class TermCascadeResolver:
    """Resolves one term list to a Succeeded or Exhausted outcome."""

    def __init__(self, search: IFootageSearch, pacing_seconds: float = 0.2, sleep: Sleep = asyncio.sleep):
        self._search = search
        self._pacing = pacing_seconds
        self._sleep = sleep

    async def resolve(self, terms: Sequence[str]) -> CascadeOutcome:
        """Raises AuthError; every other failure is absorbed into the outcome."""
        if not terms:
            raise ValueError("resolve() needs at least one search term")

        for term in terms:
            # Paced before every query, the first one included.
            await self._sleep(self._pacing)
            try:
                result = await self._search.search(term)
            except AuthError:
                logger.error("Credential rejected while searching %r; aborting cascade", term)
                raise
            except SearchError as e:
                logger.warning("Search for %r failed (%s); trying next term", term, type(e).__name__)
                continue

            asset = select_best(result.candidates)
            if asset is None:
                logger.debug("No footage for %r", term)
                continue

            logger.info("Found footage for %r", term)
            return Succeeded(used_term=term, asset=asset, provenance=result.provenance)

        logger.info("No footage for any of %d terms; keeping %r", len(terms), terms[0])
        return Exhausted(used_term=terms[0])
