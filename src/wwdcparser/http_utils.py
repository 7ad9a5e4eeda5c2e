"""HTTP utilities for fetching developer.apple.com pages."""

import logging

import httpx

from .exceptions import FetchError
from .models import FetchConfig

logger = logging.getLogger("wwdcparser")

_MAX_REDIRECTS = 5


async def fetch_html(
    url: str,
    config: FetchConfig | None = None,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Fetch a page and return its HTML.

    A single GET is performed; there is no retry.

    Args:
        url: The URL to fetch
        config: HTTP configuration (defaults to FetchConfig())
        client: Optional pre-configured client. It is used as-is and
            left open for the caller.

    Returns:
        The decoded response body

    Raises:
        FetchError: If the request fails or the server returns an error status
    """
    if client is not None:
        return await _get(client, url)

    if config is None:
        config = FetchConfig()

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(config.timeout),
        headers=config.request_headers(),
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await _get(new_client, url)


async def _get(client: httpx.AsyncClient, url: str) -> str:
    logger.info(f"Fetching {url}")
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FetchError(
            f"HTTP {e.response.status_code} while fetching {url}"
        ) from e
    except httpx.HTTPError as e:
        raise FetchError(f"Failed to fetch {url}: {e}") from e

    logger.debug(f"Fetched {len(response.text)} characters from {url}")
    return response.text
