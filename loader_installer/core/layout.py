import logging
from pathlib import Path

import aiofiles

from loader_installer.core.models import Loader, installed_version_name

logger = logging.getLogger("Installer")


def version_directory(game_directory: Path, name: str) -> Path:
    return Path(game_directory) / "versions" / name


async def ensure_installed(loader: Loader, game_version: str, loader_version: str,
                           descriptor: bytes, game_directory: Path) -> str:
    """Writes versions/<name>/<name>.json and the empty <name>.jar the launcher expects.

    An existing version directory counts as installed and is never touched, even
    if it is incomplete or the descriptor has changed since.
    """
    name = installed_version_name(loader, loader_version, game_version)
    directory = version_directory(game_directory, name)
    if directory.is_dir():
        logger.info(f"{name} is already installed, skipping")
        return name

    directory.mkdir(parents=True)
    try:
        async with aiofiles.open(directory / f"{name}.json", "wb") as f:
            await f.write(descriptor)
        async with aiofiles.open(directory / f"{name}.jar", "wb"):
            pass
    except OSError:
        logger.warning(f"{directory} was left incomplete, delete it before installing again")
        raise
    logger.info(f"Installed {name} ✅")
    return name
