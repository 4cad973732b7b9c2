import logging

import httpx

from loader_installer.core.errors import NetworkError, RemoteError

logger = logging.getLogger("Network")


async def request(url: str, transport: httpx.AsyncBaseTransport = None) -> bytes:
    """GETs url once and returns the raw response body"""
    async with httpx.AsyncClient(transport=transport, follow_redirects=True) as client:
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Request to {url} failed with HTTP {e.response.status_code}")
            raise RemoteError(url, e.response.status_code) from e
        except httpx.RequestError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise NetworkError(url, str(e) or type(e).__name__) from e
        return response.content
