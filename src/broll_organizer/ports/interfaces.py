"""
Port interfaces (SOLID – Dependency Inversion).
Implement these in adapters; the application layer depends only on these abstractions.
A new stock provider implements IFootageSearch; a new text service implements IScriptSegmenter.
"""

from abc import ABC, abstractmethod
from typing import List

from broll_organizer.domain.models import QueryResult, ScriptSegment


class IFootageSearch(ABC):
    """Footage provider: one query per term, no retries."""

    @abstractmethod
    async def search(self, term: str) -> QueryResult:
        """
        Search for footage matching one term.

        Returns an empty QueryResult when nothing matched.
        Raises AuthError, RateLimited, TransientError or NotFound.
        """
        pass

    async def aclose(self) -> None:
        """Release network resources (optional)."""
        return None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()


class IScriptSegmenter(ABC):
    """Script segmentation: narration text -> scenes with ranked search terms."""

    @abstractmethod
    def segment(self, script: str) -> List[ScriptSegment]:
        """
        Split a script into scenes.

        Raises InvalidCredential, SegmentationEmpty or SegmentationError.
        """
        pass
