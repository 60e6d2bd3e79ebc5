"""CLI entrypoint for building the Latin resource pack."""

from __future__ import annotations

import argparse
import json
import logging

from dotenv import load_dotenv

load_dotenv()

from latynka.pack.builder import build_pack
from latynka.pack.config import PackSettings
from latynka.pack.launcher_meta import Channel, PackBuildError


logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build the Ukrainian Latin resource pack from the latest language file")
    parser.add_argument(
        "channel",
        nargs="?",
        default=None,
        help="Pass 'snapshot' to follow the latest snapshot instead of the latest release",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )

    settings = PackSettings.from_env()
    channel = Channel.from_argument(args.channel)

    try:
        result = build_pack(settings, channel=channel)
    except PackBuildError as exc:
        logger.error("Resource pack build failed: %s", exc)
        return 1

    print(json.dumps(result.to_dict(), ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
