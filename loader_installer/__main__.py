#!/usr/bin/env python3
import argparse
import asyncio
import logging
import sys

from loader_installer import config
from loader_installer.core.errors import InstallerError
from loader_installer.core.installer import install

logger = logging.getLogger("Installer")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="loader_installer",
        description="Installs a Fabric or Quilt loader version into the vanilla launcher",
    )
    parser.add_argument("minecraft_version", nargs="?", help="game version, e.g. 1.19.3")
    parser.add_argument("--config", default=config.CONFIG_FILE, help="path of the json config file")
    parser.add_argument("--loader", choices=["fabric", "quilt"])
    parser.add_argument("--loader-version", help="loader version to install (default: latest)")
    parser.add_argument("--game-dir", help="minecraft directory (default: the launcher's)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format='[%(asctime)s] [%(name)s/%(levelname)s] %(message)s', datefmt='%H:%M:%S')
    args = parse_args(argv)

    settings = config.load_config(args.config)
    if args.minecraft_version:
        settings["minecraft_version"] = args.minecraft_version
    if args.loader:
        settings["mod_loader"] = args.loader
    if args.loader_version:
        settings["loader_version"] = args.loader_version
    if args.game_dir:
        settings["minecraft_directory"] = args.game_dir

    try:
        request = config.request_from_config(settings)
    except ValueError as e:
        logger.error(str(e))
        return 2

    try:
        name = asyncio.run(install(request))
    except (InstallerError, OSError) as e:
        logger.error(f"Installation failed: {e}")
        return 1
    logger.info(f"Done! Installed {name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
