import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import aiofiles

from loader_installer.core.errors import RegistryCorrupt, RegistryMissing
from loader_installer.core.models import Loader, ProfileEntry, ProfileRegistry

logger = logging.getLogger("Profiles")

PROFILES_FILE = "launcher_profiles.json"


def registry_path(game_directory: Path) -> Path:
    return Path(game_directory) / PROFILES_FILE


def parse_registry(text: str, path: Path) -> ProfileRegistry:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise RegistryCorrupt(path, f"invalid json: {e}") from e
    if not isinstance(data, dict):
        raise RegistryCorrupt(path, "top level is not an object")
    if not isinstance(data.get("profiles"), dict):
        raise RegistryCorrupt(path, "'profiles' is missing or not an object")
    if "settings" not in data:
        raise RegistryCorrupt(path, "'settings' is missing")
    version = data.get("version")
    if not isinstance(version, int) or isinstance(version, bool):
        raise RegistryCorrupt(path, "'version' is missing or not an integer")
    for key, entry in data["profiles"].items():
        if not isinstance(entry, dict):
            raise RegistryCorrupt(path, f"profile '{key}' is not an object")
    return ProfileRegistry.from_dict(data)


async def load_registry(game_directory: Path) -> ProfileRegistry:
    path = registry_path(game_directory)
    try:
        async with aiofiles.open(path, "r", encoding="utf-8") as f:
            text = await f.read()
    except FileNotFoundError as e:
        raise RegistryMissing(path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise RegistryMissing(path, str(e)) from e
    return parse_registry(text, path)


async def save_registry(game_directory: Path, registry: ProfileRegistry):
    async with aiofiles.open(registry_path(game_directory), "w", encoding="utf-8") as f:
        await f.write(json.dumps(registry.to_dict(), indent=2))


def timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


async def upsert_profile(loader: Loader, game_directory: Path, key: str,
                         version_name: str, now: Optional[str] = None) -> ProfileEntry:
    """Creates or refreshes the launcher profile `key` so it points at version_name.

    Fields the launcher added to an existing profile are kept, every other
    profile and the registry settings are written back untouched.
    """
    registry = await load_registry(game_directory)
    now = now or timestamp()

    profile = registry.profiles.get(key) or ProfileEntry()
    profile.name = key
    profile.last_used = now
    profile.last_version_id = version_name
    profile.created = now
    profile.icon = loader.spec.icon
    profile.type = "custom"
    registry.profiles[key] = profile

    await save_registry(game_directory, registry)
    logger.info(f"Profile '{key}' now points at {version_name}")
    return profile
