"""CLI entrypoint for transliterating a local language JSON file."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from latynka.pack.archive import serialize_translation
from latynka.transliteration import transliterate


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Transliterate the values of a flat language JSON file")
    parser.add_argument("--input", required=True, help="Path to the source language JSON file")
    parser.add_argument("--output", default=None, help="Where to write the result (default: stdout)")
    args = parser.parse_args(argv)

    source = json.loads(Path(args.input).read_text(encoding="utf-8"))
    if not isinstance(source, dict):
        parser.error("input must be a JSON object of string keys to string values")
    bad_keys = [key for key, value in source.items() if value is not None and not isinstance(value, str)]
    if bad_keys:
        parser.error(f"input values must be strings or null (offending keys: {', '.join(bad_keys[:5])})")

    payload = serialize_translation(transliterate(source))
    if args.output:
        Path(args.output).write_text(payload + "\n", encoding="utf-8")
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
