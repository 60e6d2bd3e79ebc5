"""Shared fixtures: an in-memory launcher manifest and object store."""

from __future__ import annotations

import hashlib
import json
from pathlib import Path

import httpx
import pytest

from latynka.pack.config import PackSettings
from latynka.pack.launcher_meta import LauncherMetaClient

MANIFEST_URL = "https://meta.test/mc/game/version_manifest.json"
RESOURCES_URL = "https://objects.test"
LANG_ASSET = "minecraft/lang/uk_ua.json"

SOURCE_TRANSLATION = {
    "gui.done": "Готово",
    "menu.quit": "Вийти з гри",
    "options.language": "Мова...",
}


class FakeLauncherStore:
    """Serves manifest, version metadata, asset index and objects by URL."""

    def __init__(self, translation: dict[str, str] | None = None) -> None:
        self.translation = dict(SOURCE_TRANSLATION if translation is None else translation)
        self.payload = json.dumps(self.translation, ensure_ascii=False).encode("utf-8")
        self.asset_hash = hashlib.sha1(self.payload).hexdigest()
        self.requests: list[str] = []
        self.routes: dict[str, bytes] = {}

        self.add_json(
            MANIFEST_URL,
            {
                "latest": {"release": "1.20.1", "snapshot": "23w31a"},
                "versions": [
                    {"id": "23w31a", "type": "snapshot", "url": "https://meta.test/v/23w31a.json"},
                    {"id": "1.20.1", "type": "release", "url": "https://meta.test/v/1.20.1.json"},
                ],
            },
        )
        self.add_json("https://meta.test/v/1.20.1.json", {"assetIndex": {"url": "https://meta.test/indexes/5.json"}})
        self.add_json("https://meta.test/v/23w31a.json", {"assetIndex": {"url": "https://meta.test/indexes/6.json"}})
        index = {"objects": {LANG_ASSET: {"hash": self.asset_hash, "size": len(self.payload)}}}
        self.add_json("https://meta.test/indexes/5.json", index)
        self.add_json("https://meta.test/indexes/6.json", index)
        self.routes[self.object_url] = self.payload

    @property
    def object_url(self) -> str:
        return f"{RESOURCES_URL}/{self.asset_hash[:2]}/{self.asset_hash}"

    def add_json(self, url: str, payload: object) -> None:
        self.routes[url] = json.dumps(payload).encode("utf-8")

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        if url not in self.routes:
            return httpx.Response(404, content=b"not found")
        return httpx.Response(200, content=self.routes[url])

    def http_client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_store() -> FakeLauncherStore:
    return FakeLauncherStore()


@pytest.fixture
def pack_settings(tmp_path: Path) -> PackSettings:
    return PackSettings(
        manifest_url=MANIFEST_URL,
        resources_url=RESOURCES_URL,
        lang_asset=LANG_ASSET,
        output_path=tmp_path / "latin.zip",
    )


@pytest.fixture
def meta_client(pack_settings: PackSettings, fake_store: FakeLauncherStore) -> LauncherMetaClient:
    return LauncherMetaClient(pack_settings, client=fake_store.http_client())
