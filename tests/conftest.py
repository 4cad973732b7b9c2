import json

import pytest

from loader_installer.core.errors import RemoteError


SAMPLE_REGISTRY = {
    "profiles": {
        "abc123": {
            "name": "Latest release",
            "type": "latest-release",
            "lastVersionId": "latest-release",
            "created": "1970-01-01T00:00:00.000Z",
            "lastUsed": "2023-01-01T00:00:00.000Z",
            "icon": "Grass",
        }
    },
    "settings": {"enableSnapshots": False, "locale": "en-us"},
    "version": 3,
    "clientToken": "deadbeef",
}


class FakeMeta:
    """Stands in for the fetch capability, serving canned bodies by url"""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    async def __call__(self, url: str) -> bytes:
        self.calls.append(url)
        if url not in self.responses:
            raise RemoteError(url, 404)
        body = self.responses[url]
        if isinstance(body, (list, dict)):
            return json.dumps(body).encode()
        return body


@pytest.fixture
def game_dir(tmp_path):
    directory = tmp_path / "mc"
    directory.mkdir()
    (directory / "launcher_profiles.json").write_text(json.dumps(SAMPLE_REGISTRY), encoding="utf-8")
    return directory


@pytest.fixture
def fake_meta():
    return FakeMeta()


def read_registry(directory):
    return json.loads((directory / "launcher_profiles.json").read_text(encoding="utf-8"))
