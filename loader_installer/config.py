import json
import logging
from pathlib import Path

from loader_installer.core.models import InstallRequest, Loader

logger = logging.getLogger("Config")

CONFIG_FILE = Path("config.json")

DEFAULT_CONFIG = {
    "minecraft_version": "1.19.3",
    "mod_loader": "fabric",
    "loader_version": None,  # null for latest
    "minecraft_directory": None,  # null for the launcher's default location
}


def load_config(path: Path = CONFIG_FILE) -> dict:
    """Loads the config file, creating it with the defaults if it doesn't exist"""
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
        logger.info(f"Loaded configuration from {path}")
    except FileNotFoundError:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(DEFAULT_CONFIG, f, indent=4)
        logger.info(f"Created new configuration file at {path}")
        return DEFAULT_CONFIG.copy()
    except json.JSONDecodeError as e:
        logger.error(f"Couldn't parse {path}: {e}, using defaults")
        return DEFAULT_CONFIG.copy()
    if not isinstance(config, dict):
        logger.error(f"{path} does not hold a json object, using defaults")
        return DEFAULT_CONFIG.copy()

    for key, value in DEFAULT_CONFIG.items():
        config.setdefault(key, value)
    return config


def request_from_config(config: dict) -> InstallRequest:
    try:
        loader = Loader(str(config["mod_loader"]).lower())
    except ValueError:
        raise ValueError(f"Unsupported mod loader: {config['mod_loader']}") from None
    directory = config.get("minecraft_directory")
    return InstallRequest(
        game_version=config["minecraft_version"],
        loader=loader,
        loader_version=config.get("loader_version") or None,
        game_directory=Path(directory).expanduser() if directory else None,
    )
