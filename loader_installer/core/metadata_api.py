import json
import logging
from typing import Awaitable, Callable, List

from loader_installer.core.errors import DecodeError
from loader_installer.core.models import Loader

logger = logging.getLogger("Metadata")

Fetch = Callable[[str], Awaitable[bytes]]


class MetadataClient():
    """Talks to the fabric / quilt meta services through a fetch(url) -> bytes coroutine"""

    def __init__(self, fetch: Fetch):
        self.fetch = fetch

    async def fetch_loader_versions(self, loader: Loader) -> List[str]:
        url = f"{loader.spec.meta_url}/loader"
        logger.info(f"Fetching {loader.spec.name} loader versions")
        body = await self.fetch(url)
        try:
            data = json.loads(body)
        except (ValueError, UnicodeDecodeError) as e:
            raise DecodeError(url, f"invalid json: {e}") from e
        if not isinstance(data, list):
            raise DecodeError(url, "expected a list of loader versions")
        versions = []
        for entry in data:
            if not isinstance(entry, dict) or not isinstance(entry.get("version"), str):
                raise DecodeError(url, f"entry without a version string: {entry!r}")
            versions.append(entry["version"])
        return versions

    async def fetch_descriptor(self, loader: Loader, game_version: str, loader_version: str) -> bytes:
        url = f"{loader.spec.meta_url}/loader/{game_version}/{loader_version}"
        logger.info(f"Fetching {loader.spec.name} loader {loader_version} for Minecraft {game_version}")
        return await self.fetch(url)
