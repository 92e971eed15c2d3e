"""IFootageSearch adapter for Envato Market (VideoHive) discovery search."""

import logging
from typing import Any, Dict, Optional

import httpx

from broll_organizer.adapters.http import parse_search_response, send_request
from broll_organizer.domain.errors import TransientError
from broll_organizer.domain.models import AssetCandidate, Provenance, QualityTier, QueryResult
from broll_organizer.ports.interfaces import IFootageSearch

logger = logging.getLogger(__name__)

# Preview clips are small; the API does not report their size.
PREVIEW_WIDTH = 600
PREVIEW_HEIGHT = 338


class EnvatoSearchAdapter(IFootageSearch):
    """Uses the first VideoHive match's preview clip as the single candidate."""

    ENVATO_API_URL = "https://api.envato.com/v1/discovery/search/search/item"

    def __init__(
        self,
        api_key: str,
        timeout_sec: float = 15.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._client = client or httpx.AsyncClient(timeout=timeout_sec)
        self._headers = {"Authorization": f"Bearer {api_key}"}

    async def aclose(self) -> None:
        await self._client.aclose()

    async def search(self, term: str) -> QueryResult:
        params = {"site": "videohive.net", "term": term, "page_size": 1}
        logger.debug("Envato query %r", term)
        response = await send_request(self._client, "GET", self.ENVATO_API_URL, term,
                                       params=params, headers=self._headers)
        data = parse_search_response(response, term, provider="Envato")
        try:
            return self._parse(data)
        except (ValueError, TypeError, AttributeError) as e:
            raise TransientError(f"Envato returned a malformed record: {e}", term=term) from e

    @staticmethod
    def _parse(data: Dict[str, Any]) -> QueryResult:
        matches = data.get("matches") or []
        if not matches:
            return QueryResult.empty()

        item = matches[0]
        previews = item.get("previews") or {}
        video_url = (previews.get("icon_with_video_preview") or {}).get("video_url")
        if not video_url:
            # live_site previews are HTML pages, not playable files
            return QueryResult.empty()

        return QueryResult(
            candidates=[
                AssetCandidate(
                    quality=QualityTier.HD,
                    width=PREVIEW_WIDTH,
                    height=PREVIEW_HEIGHT,
                    locator=video_url,
                )
            ],
            provenance=Provenance(
                duration_seconds=0,
                author_name=item.get("author_username"),
                author_url=item.get("author_url"),
            ),
        )
