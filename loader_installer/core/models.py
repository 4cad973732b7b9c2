import base64
import struct
import zlib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

FABRIC_META = "https://meta.fabricmc.net/v2/versions"
QUILT_META = "https://meta.quiltmc.org/v3/versions"

QUILT_ICON = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAIAAAACACAMAAAD04JH5AAAACXBIWXMAAAABAAAAAQBPJcTWAAAAsVBMVEX///8nov0zRP+XIv/cKd0nov0zRP+XIv8nov0zRP+XIv/cKd0nov0zRP+XIv/cKd2XIv/cKd0nov0zRP+XIv/cKd0nov2XIv/cKd0nov0zRP+XIv/cKd0nov0zRP+XIv/cKd0nov0zRP+XIv/cKd0nov0zRP+XIv/cKd0nov0zRP+XIv/cKd0nov0zRP+XIv/cKd0nov2XIv8nov0zRP+XIv/cKd0nov0zRP+XIv/cKd0/NEk8AAAAN3RSTlMAEBAQECAgIDAwMDBAQEBAUFBgYGBgcHBwgYGBgZGRkZGhoaGhsbGxscHBwcHR0dHR4eHx8fHxbU06QwAAA39JREFUeNrtmml3qjAQhkexWor7LrZ1qaIILtVCa///D7uOMQ3ewqB3qRHzfpqeg3mfyplJZiKAkpLSQblckdDDA3vKMEqEMhl8JpXKk5ITIJfzvC2pchmg0fgktVrhWvP5O6mnJxkBisVtjLpdANf9jBGu9R4j21YACuDaADyPlyFUVCquVqwMsVJEpaICuD4AlQUKQAEogO221SoWczl2JB2Nwq19v1IplXAtPHj+40J0YYD1WtPEk4YRDjCdBtcbDJIEgAiOU68D9Puu6/vRh3LXxbVsmz6Yyw7gecEWZb3+mzR8fRXxZnMtAA87ifTTNI5wPkCzmUpxhPFYHFLkBBCm+BePi0UAxxHNab9P2/s+fpp/2diI2zaLOx2ATodoTi8OAFAud/fCuHsQlt96HSO0R7Xbj4QMA5+5v+/sdXcHUK2yGGHyeYyazYgJycUBlBoNdy+M3YPwK8Xy67r9Pms4xmObULWKT+n6bC9dB3h+ZnGtBlCrYWRZ6bSMAGKTxb94jAcMXnzabYDxOO64hZ9+e/vYq1AAmM1YbJoApsliy5IRoFTipo2GaD9HI8Pg2+/joygrNMDHQcOhrnOYxSKbXSxYPJvJDRCl8wGilFwATERcC5PtFgFwwxXiKXdLAJsNbrbM3DR5+t0SgKoDCkABKIDBILjecHh7APM5v5gu7MSPX7cEkJwsWO0kBg7TaThApyOGToOBGMslASCzE48rFQCOEwTAwycfuKBpPn/9AJkMNwpvTn0fW/VqlQZgxYgqQihs1eUDUFLStOWSGtWyK3w+cMBEEs0Xbj98JBG9vvg5mJwAYlyv7RQE4GA4xOVtdxQAxtS/h9c+8gMsl9wS45eX4JWNGDwE28/hUBw/6NdLIEgEQF1e06OXcICgPYEgOQC/vNb1QoHeauLsIxGkBji+vNb10wHC7CMQpAYQl9d4/UCNn44BouxDESQH+JM0pOxDEBIHEGf/DSFhAKfY/4YgOcBk0u3i4aRWM01q9MAATrU/QpAawPOCpTibjQOIf51CjnMNAHg0O+cViJ+DxGsyuQ6Ac9OwXj/Nfrn8erkJAzgNIWB/FQCtFoBlnb4dxyEc2UsAANDrOYR6PXwmnbasGaHj8ROF8M1eAoD/oSiEH7KXACAc4QftJQD4jvDD9hIAHCNcwF4CAIFwIXsJABDBcSaTi9lTAL8AUD0mefbuyfMAAAAASUVORK5CYII="


def png_data_uri(rows: List[str], palette: Dict[str, Tuple[int, int, int, int]]) -> str:
    """Encodes a small RGBA pixel-art image as a base64 PNG data uri"""
    def chunk(kind: bytes, data: bytes) -> bytes:
        crc = zlib.crc32(kind + data) & 0xffffffff
        return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)

    width, height = len(rows[0]), len(rows)
    # every scanline starts with filter type 0
    raw = b"".join(b"\x00" + b"".join(bytes(palette[pixel]) for pixel in row) for row in rows)
    png = (
        b"\x89PNG\r\n\x1a\n"
        + chunk(b"IHDR", struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0))
        + chunk(b"IDAT", zlib.compress(raw))
        + chunk(b"IEND", b"")
    )
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")


FABRIC_ICON_ROWS = [
    "................",
    ".....oooooo.....",
    "....offffffo....",
    "...offssffffo...",
    "..offffssffffo..",
    ".offffffssffffo.",
    ".offsfffffsfffo.",
    ".offfsffffffsfo.",
    ".offffsffffffso.",
    ".offfffsfffffso.",
    ".offsffffsffffo.",
    "..offssffffsfo..",
    "...offffssffo...",
    "....offffffo....",
    ".....oooooo.....",
    "................",
]
FABRIC_PALETTE = {
    ".": (0, 0, 0, 0),
    "o": (56, 52, 42, 255),
    "f": (219, 208, 180, 255),
    "s": (128, 122, 106, 255),
}
FABRIC_ICON = png_data_uri(FABRIC_ICON_ROWS, FABRIC_PALETTE)


def first_version(versions: List[str]) -> Optional[str]:
    if not versions:
        return None
    return versions[0]


def first_stable_version(versions: List[str]) -> Optional[str]:
    # quilt tags pre-releases with a hyphen, e.g. 0.20.0-beta.1
    for version in versions:
        if "-" not in version:
            return version
    return None


@dataclass(frozen=True)
class LoaderSpec:
    name: str
    meta_url: str
    icon: str
    select_latest: Callable[[List[str]], Optional[str]]


class Loader(Enum):
    FABRIC = "fabric"
    QUILT = "quilt"

    @property
    def spec(self) -> LoaderSpec:
        return LOADERS[self]


LOADERS: Dict[Loader, LoaderSpec] = {
    Loader.FABRIC: LoaderSpec(
        name="fabric",
        meta_url=FABRIC_META,
        icon=FABRIC_ICON,
        select_latest=first_version,
    ),
    Loader.QUILT: LoaderSpec(
        name="quilt",
        meta_url=QUILT_META,
        icon=QUILT_ICON,
        select_latest=first_stable_version,
    ),
}


def installed_version_name(loader: Loader, loader_version: str, game_version: str) -> str:
    """Name of the version directory and files, e.g. quilt-loader-0.19.2-1.19.3"""
    return f"{loader.spec.name}-loader-{loader_version}-{game_version}"


def profile_key(loader: Loader, game_version: str) -> str:
    """Key of the launcher profile, shared by every loader version of one game version."""
    return f"{loader.spec.name}-loader-{game_version}"


@dataclass
class InstallRequest:
    game_version: str
    loader: Loader = Loader.FABRIC
    loader_version: Optional[str] = None  # None for latest
    game_directory: Optional[Path] = None  # None for the launcher's default location


@dataclass
class ProfileEntry:
    name: str = ""
    last_used: str = ""
    last_version_id: str = ""
    created: str = ""
    icon: str = ""
    type: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    # json key -> attribute
    FIELDS = {
        "name": "name",
        "lastUsed": "last_used",
        "lastVersionId": "last_version_id",
        "created": "created",
        "icon": "icon",
        "type": "type",
    }

    @classmethod
    def from_dict(cls, dictionary: dict) -> 'ProfileEntry':
        known = {}
        extra = {}
        for key, value in dictionary.items():
            if key in cls.FIELDS:
                known[cls.FIELDS[key]] = value
            else:
                extra[key] = value
        return cls(extra=extra, **known)

    def to_dict(self) -> dict:
        data = {key: getattr(self, attribute) for key, attribute in self.FIELDS.items()}
        data.update(self.extra)
        return data


@dataclass
class ProfileRegistry:
    profiles: Dict[str, ProfileEntry]
    settings: Any
    version: int
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, dictionary: dict) -> 'ProfileRegistry':
        extra = {
            key: value
            for key, value in dictionary.items()
            if key not in ("profiles", "settings", "version")
        }
        return cls(
            profiles={
                key: ProfileEntry.from_dict(entry)
                for key, entry in dictionary["profiles"].items()
            },
            settings=dictionary["settings"],
            version=dictionary["version"],
            extra=extra,
        )

    def to_dict(self) -> dict:
        data = {
            "profiles": {key: entry.to_dict() for key, entry in self.profiles.items()},
            "settings": self.settings,
            "version": self.version,
        }
        data.update(self.extra)
        return data
