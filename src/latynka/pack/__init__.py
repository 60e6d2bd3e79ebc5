"""Resource pack assembly: remote lookup, archive writing and the build pipeline."""

from .builder import BuildResult, build_pack
from .config import PackSettings
from .launcher_meta import (
    AssetIntegrityError,
    AssetNotFoundError,
    Channel,
    LauncherMetaClient,
    PackBuildError,
    VersionNotFoundError,
)

__all__ = [
    "AssetIntegrityError",
    "AssetNotFoundError",
    "BuildResult",
    "Channel",
    "LauncherMetaClient",
    "PackBuildError",
    "PackSettings",
    "VersionNotFoundError",
    "build_pack",
]
