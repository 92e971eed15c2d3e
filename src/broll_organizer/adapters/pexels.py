"""IFootageSearch adapter for the Pexels video API."""

import logging
from typing import Any, Dict, Optional

import httpx

from broll_organizer.adapters.http import parse_search_response, send_request
from broll_organizer.domain.errors import TransientError
from broll_organizer.domain.models import AssetCandidate, Provenance, QualityTier, QueryResult
from broll_organizer.ports.interfaces import IFootageSearch

logger = logging.getLogger(__name__)


class PexelsSearchAdapter(IFootageSearch):
    """Searches Pexels and returns the first matching video's files as candidates."""

    PEXELS_API_URL = "https://api.pexels.com/videos/search"

    def __init__(
        self,
        api_key: str,
        timeout_sec: float = 15.0,
        orientation: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._orientation = orientation
        self._client = client or httpx.AsyncClient(timeout=timeout_sec)
        self._headers = {"Authorization": api_key}

    async def aclose(self) -> None:
        await self._client.aclose()

    async def search(self, term: str) -> QueryResult:
        params: Dict[str, Any] = {"query": term, "per_page": 1}
        if self._orientation:
            params["orientation"] = self._orientation

        logger.debug("Pexels query %r", term)
        response = await send_request(self._client, "GET", self.PEXELS_API_URL, term,
                                       params=params, headers=self._headers)
        data = parse_search_response(response, term, provider="Pexels")
        try:
            return self._parse(data)
        except (ValueError, TypeError, AttributeError) as e:
            raise TransientError(f"Pexels returned a malformed record: {e}", term=term) from e

    @staticmethod
    def _parse(data: Dict[str, Any]) -> QueryResult:
        videos = data.get("videos") or []
        if not videos:
            return QueryResult.empty()

        video = videos[0]
        candidates = []
        for f in video.get("video_files") or []:
            link = f.get("link")
            if not link:
                continue
            candidates.append(
                AssetCandidate(
                    quality=QualityTier.parse(f.get("quality")),
                    width=int(f.get("width") or 0),
                    height=int(f.get("height") or 0),
                    locator=link,
                )
            )
        user = video.get("user") or {}
        return QueryResult(
            candidates=candidates,
            provenance=Provenance(
                duration_seconds=video.get("duration"),
                author_name=user.get("name"),
                author_url=user.get("url"),
            ),
        )
