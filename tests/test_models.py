import base64
import struct
import zlib

from loader_installer.core.models import (
    Loader,
    ProfileEntry,
    ProfileRegistry,
    first_stable_version,
    first_version,
    installed_version_name,
    png_data_uri,
    profile_key,
)


def test_installed_version_name():
    assert installed_version_name(Loader.QUILT, "0.19.2", "1.19.3") == "quilt-loader-0.19.2-1.19.3"
    assert installed_version_name(Loader.FABRIC, "0.15.0", "1.20.4") == "fabric-loader-0.15.0-1.20.4"


def test_names_are_deterministic():
    assert installed_version_name(Loader.FABRIC, "0.14.9", "1.19.3") == installed_version_name(Loader.FABRIC, "0.14.9", "1.19.3")
    assert profile_key(Loader.QUILT, "1.19.3") == profile_key(Loader.QUILT, "1.19.3")


def test_profile_key_ignores_loader_version():
    assert profile_key(Loader.QUILT, "1.19.3") == "quilt-loader-1.19.3"
    assert profile_key(Loader.FABRIC, "1.19.3") == "fabric-loader-1.19.3"


def test_loader_specs_differ():
    assert Loader.FABRIC.spec.meta_url == "https://meta.fabricmc.net/v2/versions"
    assert Loader.QUILT.spec.meta_url == "https://meta.quiltmc.org/v3/versions"
    assert Loader.FABRIC.spec.icon != Loader.QUILT.spec.icon
    assert Loader.QUILT.spec.icon.startswith("data:image/png;base64,")


def test_selection_predicates():
    assert first_version(["0.15.0", "0.14.9"]) == "0.15.0"
    assert first_version(["0.16.0-beta.1", "0.15.0"]) == "0.16.0-beta.1"
    assert first_version([]) is None
    assert first_stable_version(["0.20.0-beta.1", "0.19.2", "0.19.1"]) == "0.19.2"
    assert first_stable_version(["0.20.0-beta.1", "0.20.0-beta.2"]) is None


def test_profile_entry_keeps_unknown_fields():
    data = {
        "name": "x",
        "lastUsed": "a",
        "lastVersionId": "v",
        "created": "c",
        "icon": "Grass",
        "type": "custom",
        "gameDir": "/somewhere",
        "javaArgs": "-Xmx4G",
    }
    entry = ProfileEntry.from_dict(data)
    assert entry.last_version_id == "v"
    assert entry.extra == {"gameDir": "/somewhere", "javaArgs": "-Xmx4G"}
    assert entry.to_dict() == data


def test_empty_profile_entry():
    assert ProfileEntry().to_dict() == {
        "name": "",
        "lastUsed": "",
        "lastVersionId": "",
        "created": "",
        "icon": "",
        "type": "",
    }


def test_registry_keeps_top_level_keys():
    data = {"profiles": {}, "settings": None, "version": 2, "clientToken": "t", "selectedProfile": "p"}
    registry = ProfileRegistry.from_dict(data)
    assert registry.extra == {"clientToken": "t", "selectedProfile": "p"}
    assert registry.to_dict() == data


def test_fabric_icon_is_embedded_png():
    prefix = "data:image/png;base64,"
    assert Loader.FABRIC.spec.icon.startswith(prefix)
    png = base64.b64decode(Loader.FABRIC.spec.icon[len(prefix):])
    assert png[:8] == b"\x89PNG\r\n\x1a\n"
    assert png[12:16] == b"IHDR"
    assert struct.unpack(">II", png[16:24]) == (16, 16)
    assert png.endswith(b"IEND\xaeB`\x82")


def test_png_data_uri_pixels():
    uri = png_data_uri(["ab", "ba"], {"a": (255, 0, 0, 255), "b": (0, 0, 255, 128)})
    png = base64.b64decode(uri.split(",", 1)[1])
    length = struct.unpack(">I", png[33:37])[0]
    assert png[37:41] == b"IDAT"
    raw = zlib.decompress(png[41:41 + length])
    assert raw == b"\x00\xff\x00\x00\xff\x00\x00\xff\x80" + b"\x00\x00\x00\xff\x80\xff\x00\x00\xff"
