"""Resource pack zip writer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping
from zipfile import ZIP_DEFLATED, ZipFile

LANG_ENTRY = "assets/minecraft/lang/uk_la.json"
STATIC_ENTRIES: tuple[str, ...] = ("pack.mcmeta", "pack.png")

DEFAULT_ASSETS_DIR = Path(__file__).resolve().parent / "resources"


def serialize_translation(translation: Mapping[str, str]) -> str:
    """Indented JSON with non-ASCII text kept readable."""
    return json.dumps(translation, ensure_ascii=False, indent=2)


def write_resource_pack(
    translation: Mapping[str, str],
    output_path: str | Path,
    *,
    assets_dir: str | Path = DEFAULT_ASSETS_DIR,
) -> Path:
    """Write the language file and the static pack files into one zip archive."""

    target = Path(output_path)
    static_dir = Path(assets_dir)
    missing = [name for name in STATIC_ENTRIES if not (static_dir / name).is_file()]
    if missing:
        raise FileNotFoundError(f"Missing static pack files in {static_dir}: {', '.join(missing)}")

    target.parent.mkdir(parents=True, exist_ok=True)
    partial = target.with_name(target.name + ".part")
    try:
        with ZipFile(partial, "w", compression=ZIP_DEFLATED) as archive:
            archive.writestr(LANG_ENTRY, serialize_translation(translation).encode("utf-8"))
            for name in STATIC_ENTRIES:
                archive.write(static_dir / name, arcname=name)
        partial.replace(target)
    finally:
        partial.unlink(missing_ok=True)

    return target
