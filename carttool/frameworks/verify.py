"""Check that a built app bundles every framework it links against."""

from __future__ import annotations

import os
from collections.abc import Callable, Collection

import structlog

from carttool.core import paths
from carttool.exceptions import MissingDependencyError
from carttool.frameworks.discovery import Introspector, discover_dependencies
from carttool.frameworks.otool import otool_dependencies

log = structlog.get_logger("carttool.verify")


def app_layout(
    app_path: str, exists: Callable[[str], bool] = os.path.exists
) -> tuple[str, str]:
    """Return ``(executable, frameworks_dir)`` for an ``.app`` bundle.

    macOS bundles keep both under ``Contents``; iOS-style bundles are flat.
    """
    app = paths.absolute(app_path)
    executable_name = paths.base_name(app).rsplit(".app", 1)[0]
    contents = paths.join(app, "Contents")
    if exists(contents):
        return (
            paths.join(paths.join(contents, "MacOS"), executable_name),
            paths.join(contents, "Frameworks"),
        )
    return paths.join(app, executable_name), paths.join(app, "Frameworks")


def verify_dependencies(
    app_path: str,
    search_root: str,
    expected: Collection[str] | None = None,
    introspect: Introspector = otool_dependencies,
    exists: Callable[[str], bool] = os.path.exists,
) -> list[str]:
    """Verify the app at *app_path* bundles all of its vendored frameworks.

    Linkage is discovered against *search_root*, the directory the
    frameworks are built into. Without *expected*, each discovered name must
    exist in the bundle's Frameworks directory; with it, each name (or its
    bare framework name, e.g. ``Bolts``) must be in *expected*.

    Returns:
        The sorted, deduplicated discovered names.

    Raises:
        MissingDependencyError: listing every framework that is missing.
    """
    executable, bundled_dir = app_layout(app_path, exists)
    discovered = sorted(
        set(discover_dependencies(executable, search_root, introspect, exists))
    )

    if expected is None:
        missing = [
            name for name in discovered if not exists(paths.join(bundled_dir, name))
        ]
    else:
        allowed = set(expected)
        missing = [
            name
            for name in discovered
            if name not in allowed and paths.framework_name(name) not in allowed
        ]

    if missing:
        raise MissingDependencyError(missing, app_path)

    log.info("verify.ok", app=app_path, frameworks=len(discovered))
    return discovered
