"""Transitive linkage discovery for an app binary.

Starting from the app's own ``@rpath`` references, every framework that
exists under the search root is introspected in turn and its references are
added to the work list. Frameworks not present under the search root are
assumed to come from elsewhere (system, Xcode) and are dropped.
"""

from __future__ import annotations

import os
from collections.abc import Callable

import structlog

from carttool.core import paths
from carttool.exceptions import IntrospectionError
from carttool.frameworks.otool import otool_dependencies

log = structlog.get_logger("carttool.discovery")

Introspector = Callable[[str], list[str]]


def _introspect(introspect: Introspector, path: str) -> list[str]:
    try:
        return introspect(path)
    except IntrospectionError as e:
        log.warning("discovery.introspection_failed", path=path, reason=e.reason)
        return []


def discover_dependencies(
    binary_path: str,
    search_root: str,
    introspect: Introspector = otool_dependencies,
    exists: Callable[[str], bool] = os.path.exists,
) -> list[str]:
    """Return the @rpath dependencies of *binary_path*, transitively.

    Each distinct name is introspected at most once, so cycles terminate.
    The result keeps discovery order and may contain duplicates; callers
    that need a set must deduplicate.

    Args:
        binary_path: The executable to start from.
        search_root: Directory holding the vendored frameworks.
        introspect: Returns direct dependency names of a binary; raises
            ``IntrospectionError`` when the binary cannot be read.
        exists: Filesystem existence check.
    """
    to_process = _introspect(introspect, binary_path)
    processed: set[str] = set()
    all_frameworks = list(to_process)

    while to_process:
        name = to_process.pop()
        if name in processed:
            continue

        candidate = paths.join(search_root, name)
        if not exists(candidate):
            log.debug("discovery.not_vendored", name=name, path=candidate)
            all_frameworks = [f for f in all_frameworks if f != name]
            continue

        processed.add(name)
        found = _introspect(introspect, candidate)
        to_process.extend(found)
        all_frameworks.extend(found)

    log.debug(
        "discovery.done",
        binary=binary_path,
        introspected=len(processed),
        frameworks=len(set(all_frameworks)),
    )
    return all_frameworks
