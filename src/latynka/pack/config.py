"""Runtime configuration for resource pack builds."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping


DEFAULT_MANIFEST_URL = "https://launchermeta.mojang.com/mc/game/version_manifest.json"
DEFAULT_RESOURCES_URL = "https://resources.download.minecraft.net"
DEFAULT_LANG_ASSET = "minecraft/lang/uk_ua.json"
DEFAULT_OUTPUT_PATH = "latin.zip"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0


def _parse_url(*, name: str, raw_value: str) -> str:
    if not raw_value:
        raise ValueError(f"{name} cannot be empty")
    if not (raw_value.startswith("http://") or raw_value.startswith("https://")):
        raise ValueError(f"{name} must start with http:// or https://")
    return raw_value.rstrip("/")


def _parse_positive_float(*, name: str, raw_value: str, minimum: float = 0.001) -> float:
    value = float(raw_value)
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


@dataclass(frozen=True, slots=True)
class PackSettings:
    """Validated endpoints and paths used by the pack builder."""

    manifest_url: str = DEFAULT_MANIFEST_URL
    resources_url: str = DEFAULT_RESOURCES_URL
    lang_asset: str = DEFAULT_LANG_ASSET
    output_path: Path = Path(DEFAULT_OUTPUT_PATH)
    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PackSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        manifest_url = _parse_url(
            name="LATYNKA_MANIFEST_URL",
            raw_value=source.get("LATYNKA_MANIFEST_URL", DEFAULT_MANIFEST_URL).strip(),
        )
        resources_url = _parse_url(
            name="LATYNKA_RESOURCES_URL",
            raw_value=source.get("LATYNKA_RESOURCES_URL", DEFAULT_RESOURCES_URL).strip(),
        )

        lang_asset = source.get("LATYNKA_LANG_ASSET", DEFAULT_LANG_ASSET).strip()
        if not lang_asset:
            raise ValueError("LATYNKA_LANG_ASSET cannot be empty")

        output_path_raw = source.get("LATYNKA_OUTPUT_PATH", DEFAULT_OUTPUT_PATH).strip()
        if not output_path_raw:
            raise ValueError("LATYNKA_OUTPUT_PATH cannot be empty")

        timeout_raw = source.get("LATYNKA_HTTP_TIMEOUT_SECONDS", str(DEFAULT_HTTP_TIMEOUT_SECONDS)).strip()
        if not timeout_raw:
            raise ValueError("LATYNKA_HTTP_TIMEOUT_SECONDS cannot be empty")
        http_timeout_seconds = _parse_positive_float(
            name="LATYNKA_HTTP_TIMEOUT_SECONDS",
            raw_value=timeout_raw,
            minimum=0.1,
        )

        return cls(
            manifest_url=manifest_url,
            resources_url=resources_url,
            lang_asset=lang_asset,
            output_path=Path(output_path_raw),
            http_timeout_seconds=http_timeout_seconds,
        )
