"""Client for the launcher version manifest and the content-addressed asset store."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import hashlib
import logging
from typing import Any

import httpx

from latynka.pack.config import PackSettings


logger = logging.getLogger(__name__)

EDGE_CHANNEL_ARGUMENT = "snapshot"


class Channel(str, Enum):
    """Which ``latest`` pointer of the manifest to follow."""

    STABLE = "release"
    EDGE = "snapshot"

    @classmethod
    def from_argument(cls, value: str | None) -> "Channel":
        return cls.EDGE if value == EDGE_CHANNEL_ARGUMENT else cls.STABLE


class PackBuildError(RuntimeError):
    """Base class for failures while resolving or fetching pack inputs."""


@dataclass(slots=True)
class VersionNotFoundError(PackBuildError):
    """The manifest points at a version it does not describe."""

    version_id: str
    channel: Channel

    def __str__(self) -> str:
        return f"Can't find version {self.version_id} (channel={self.channel.name.lower()})"


@dataclass(slots=True)
class AssetNotFoundError(PackBuildError):
    """The asset index has no entry for the requested path."""

    asset_path: str

    def __str__(self) -> str:
        return f"Asset index has no entry (asset={self.asset_path})"


@dataclass(slots=True)
class AssetIntegrityError(PackBuildError):
    """Downloaded object content does not match its address."""

    expected: str
    actual: str

    def __str__(self) -> str:
        return f"Asset content hash mismatch: expected {self.expected}, got {self.actual}"


@dataclass(frozen=True, slots=True)
class VersionDescriptor:
    """One entry of the manifest ``versions`` list."""

    id: str
    url: str
    type: str | None = None


@dataclass(frozen=True, slots=True)
class VersionManifest:
    """Latest pointers and version descriptors of the manifest."""

    latest_release: str
    latest_snapshot: str
    versions: tuple[VersionDescriptor, ...]

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "VersionManifest":
        latest = payload["latest"]
        versions = tuple(
            VersionDescriptor(id=row["id"], url=row["url"], type=row.get("type"))
            for row in payload.get("versions", [])
        )
        return cls(
            latest_release=latest["release"],
            latest_snapshot=latest["snapshot"],
            versions=versions,
        )

    def latest(self, channel: Channel) -> str:
        return self.latest_snapshot if channel is Channel.EDGE else self.latest_release


class LauncherMetaClient:
    """Resolve and download the source language file for the latest version."""

    def __init__(self, settings: PackSettings, *, client: httpx.Client | None = None) -> None:
        self._settings = settings
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=settings.http_timeout_seconds, follow_redirects=True)

    def __enter__(self) -> "LauncherMetaClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def fetch_manifest(self) -> VersionManifest:
        return VersionManifest.from_payload(self._get_json(self._settings.manifest_url))

    def resolve_version(self, manifest: VersionManifest, channel: Channel) -> VersionDescriptor:
        version_id = manifest.latest(channel)
        for version in manifest.versions:
            if version.id == version_id:
                return version

        logger.warning("Can't find version %s", version_id)
        raise VersionNotFoundError(version_id=version_id, channel=channel)

    def fetch_asset_index(self, version: VersionDescriptor) -> dict[str, Any]:
        metadata = self._get_json(version.url)
        return self._get_json(metadata["assetIndex"]["url"])

    def asset_hash(self, asset_index: dict[str, Any], asset_path: str | None = None) -> str:
        path = asset_path or self._settings.lang_asset
        entry = asset_index.get("objects", {}).get(path)
        if not entry or not entry.get("hash"):
            raise AssetNotFoundError(asset_path=path)
        return str(entry["hash"]).lower()

    def object_url(self, asset_hash: str) -> str:
        return f"{self._settings.resources_url}/{asset_hash[:2]}/{asset_hash}"

    def fetch_translation(self, asset_hash: str) -> dict[str, str]:
        url = self.object_url(asset_hash)
        logger.info("Fetching %s", url)
        response = self._client.get(url)
        response.raise_for_status()

        actual = hashlib.sha1(response.content).hexdigest()
        if actual != asset_hash:
            raise AssetIntegrityError(expected=asset_hash, actual=actual)
        return response.json()

    def fetch_latest_translation(self, channel: Channel) -> tuple[VersionDescriptor, str, dict[str, str]]:
        """Run the manifest → metadata → asset index → object chain."""

        manifest = self.fetch_manifest()
        version = self.resolve_version(manifest, channel)
        asset_index = self.fetch_asset_index(version)
        asset_hash = self.asset_hash(asset_index)
        logger.info("Found %s hash: %s", self._settings.lang_asset, asset_hash)
        return version, asset_hash, self.fetch_translation(asset_hash)

    def _get_json(self, url: str) -> Any:
        response = self._client.get(url)
        response.raise_for_status()
        return response.json()
