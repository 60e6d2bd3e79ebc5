"""Fetch → transliterate → package pipeline."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from latynka.pack.archive import DEFAULT_ASSETS_DIR, write_resource_pack
from latynka.pack.config import PackSettings
from latynka.pack.launcher_meta import Channel, LauncherMetaClient
from latynka.transliteration import transliterate


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildResult:
    """Summary of one resource pack build."""

    version_id: str
    channel: Channel
    asset_hash: str
    output_path: Path
    entries: int

    def to_dict(self) -> dict[str, object]:
        return {
            "version_id": self.version_id,
            "channel": self.channel.name.lower(),
            "asset_hash": self.asset_hash,
            "output_path": str(self.output_path),
            "entries": self.entries,
        }


def build_pack(
    settings: PackSettings,
    *,
    channel: Channel = Channel.STABLE,
    client: LauncherMetaClient | None = None,
    assets_dir: str | Path = DEFAULT_ASSETS_DIR,
) -> BuildResult:
    """Download the latest source language file and write the Latin resource pack."""

    meta_client = client or LauncherMetaClient(settings)
    try:
        logger.info("Fetching current translation...")
        version, asset_hash, translation = meta_client.fetch_latest_translation(channel)
    finally:
        if client is None:
            meta_client.close()

    logger.info("Transliterating...")
    result = transliterate(translation)

    logger.info("Archiving...")
    output_path = write_resource_pack(result, settings.output_path, assets_dir=assets_dir)
    logger.info("Done! Wrote %d entries for %s to %s", len(result), version.id, output_path)

    return BuildResult(
        version_id=version.id,
        channel=channel,
        asset_hash=asset_hash,
        output_path=output_path,
        entries=len(result),
    )
