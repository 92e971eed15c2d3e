"""Shared HTTP helpers: map transport failures and status codes onto the search error taxonomy."""

from typing import Any, Dict

import httpx

from broll_organizer.domain.errors import AuthError, NotFound, RateLimited, TransientError


async def send_request(client: httpx.AsyncClient, method: str, url: str, term: str, **kwargs: Any) -> httpx.Response:
    """Issue one request. Timeouts and connection errors become TransientError."""
    try:
        return await client.request(method, url, **kwargs)
    except httpx.TimeoutException as e:
        raise TransientError(f"Request timed out: {e}", term=term) from e
    except httpx.RequestError as e:
        raise TransientError(f"Network error: {e}", term=term) from e


def parse_search_response(response: httpx.Response, term: str, provider: str) -> Dict[str, Any]:
    """Return the JSON body of a successful response or raise the matching SearchError."""
    status = response.status_code
    if status in (401, 403):
        raise AuthError(f"{provider} API key was rejected (HTTP {status})", term=term, status_code=status)
    if status == 429:
        raise RateLimited(f"{provider} rate limit hit", term=term, status_code=status)
    if status == 404:
        raise NotFound(f"{provider} found nothing for {term!r}", term=term, status_code=status)
    if not 200 <= status < 300:
        raise TransientError(
            f"{provider} API error: HTTP {status} {response.reason_phrase}", term=term, status_code=status
        )

    try:
        data = response.json()
    except ValueError as e:
        raise TransientError(f"{provider} returned invalid JSON", term=term, status_code=status) from e
    if not isinstance(data, dict):
        raise TransientError(f"{provider} returned an unexpected payload", term=term, status_code=status)
    return data
