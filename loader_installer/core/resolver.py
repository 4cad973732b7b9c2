import logging
from typing import Optional

from loader_installer.core.errors import NoVersionAvailable
from loader_installer.core.metadata_api import MetadataClient
from loader_installer.core.models import Loader

logger = logging.getLogger("Metadata")


async def resolve(loader: Loader, pinned: Optional[str], client: MetadataClient) -> str:
    """Returns the pinned version, or the newest one the loader's selection policy accepts"""
    if pinned:
        return pinned
    versions = await client.fetch_loader_versions(loader)
    if not versions:
        raise NoVersionAvailable(loader.spec.name)
    version = loader.spec.select_latest(versions)
    if not version:
        raise NoVersionAvailable(loader.spec.name)
    logger.info(f"Latest {loader.spec.name} loader is {version}")
    return version
