"""Framework linkage discovery, resolution, and bundling."""

from carttool.frameworks.copy import build_copy_environment, copy_frameworks
from carttool.frameworks.discovery import discover_dependencies
from carttool.frameworks.models import ResolvedFramework
from carttool.frameworks.otool import filter_rpath_dependencies, otool_dependencies
from carttool.frameworks.resolver import resolve_frameworks
from carttool.frameworks.verify import verify_dependencies

__all__ = [
    "ResolvedFramework",
    "build_copy_environment",
    "copy_frameworks",
    "discover_dependencies",
    "filter_rpath_dependencies",
    "otool_dependencies",
    "resolve_frameworks",
    "verify_dependencies",
]
