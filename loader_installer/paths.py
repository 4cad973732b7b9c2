import sys
from pathlib import Path

from loader_installer.core.errors import NoDirectory


def default_game_directory() -> Path:
    """Returns the vanilla launcher's .minecraft folder for this OS"""
    try:
        home = Path.home()
    except RuntimeError as e:
        raise NoDirectory() from e
    if sys.platform == "win32":
        directory = home / "AppData" / "Roaming" / ".minecraft"
    elif sys.platform == "darwin":
        directory = home / "Library" / "Application Support" / "minecraft"
    else:
        directory = home / ".minecraft"
    if not directory.exists():
        raise NoDirectory(directory)
    return directory
