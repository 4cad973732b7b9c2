import logging
from pathlib import Path
from typing import Callable, Optional

from loader_installer import networking
from loader_installer.core import layout, profiles
from loader_installer.core.metadata_api import Fetch, MetadataClient
from loader_installer.core.models import InstallRequest, installed_version_name, profile_key
from loader_installer.core.resolver import resolve
from loader_installer.paths import default_game_directory

logger = logging.getLogger("Installer")


def resolve_game_directory(request: InstallRequest,
                           default_directory: Callable[[], Path]) -> Path:
    # a caller supplied directory is used as is, a missing one surfaces as RegistryMissing
    if request.game_directory is not None:
        return Path(request.game_directory)
    return default_directory()


async def install(request: InstallRequest, fetch: Optional[Fetch] = None,
                  default_directory: Optional[Callable[[], Path]] = None) -> str:
    """Installs one loader version and returns the installed version name.

    The launcher profile is refreshed before the version files are written,
    so running this again for an installed version still re-stamps the profile.
    """
    loader = request.loader
    game_directory = resolve_game_directory(request, default_directory or default_game_directory)
    client = MetadataClient(fetch or networking.request)

    loader_version = await resolve(loader, request.loader_version, client)
    descriptor = await client.fetch_descriptor(loader, request.game_version, loader_version)

    name = installed_version_name(loader, loader_version, request.game_version)
    logger.info(f"Installing {name} into {game_directory}")
    await profiles.upsert_profile(loader, game_directory,
                                  profile_key(loader, request.game_version), name)
    return await layout.ensure_installed(loader, request.game_version, loader_version,
                                         descriptor, game_directory)
