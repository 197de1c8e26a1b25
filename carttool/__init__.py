"""carttool: resolve and bundle the Carthage frameworks an app links against."""

__version__ = "0.1.0"

from carttool.cartfile import CartfileEntry, RepoType, parse_cartfile, parse_line
from carttool.config import BuildSettings
from carttool.frameworks import (
    ResolvedFramework,
    copy_frameworks,
    discover_dependencies,
    resolve_frameworks,
    verify_dependencies,
)

__all__ = [
    "BuildSettings",
    "CartfileEntry",
    "RepoType",
    "ResolvedFramework",
    "copy_frameworks",
    "discover_dependencies",
    "parse_cartfile",
    "parse_line",
    "resolve_frameworks",
    "verify_dependencies",
]
