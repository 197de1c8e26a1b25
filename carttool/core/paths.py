"""String-level path helpers.

These never touch the filesystem: ``..`` is collapsed lexically and symlinks
are not resolved.
"""

from __future__ import annotations

import os


def absolute(path: str, cwd: str | None = None) -> str:
    """Return *path* as a normalized absolute path.

    Relative paths are anchored at *cwd* (default: the working directory).
    """
    if not path.startswith("/"):
        path = (cwd if cwd is not None else os.getcwd()) + "/" + path
    return _normalize(path)


def join(base: str, component: str) -> str:
    """Append *component* to *base*, ignoring slashes around *component*."""
    return absolute(absolute(base) + "/" + component.strip("/"))


def base_name(path: str) -> str:
    return absolute(path).rsplit("/", 1)[-1]


def parent(path: str) -> str:
    return absolute(absolute(path).rsplit("/", 1)[0] or "/")


def framework_name(name: str) -> str:
    """Bare framework name of a linkage reference.

    ``Bolts.framework/Bolts`` and ``Bolts.framework`` both give ``Bolts``;
    ``libz.1.dylib`` gives ``libz``.
    """
    last = name.rstrip("/").rsplit("/", 1)[-1]
    return last.split(".", 1)[0]


def _normalize(path: str) -> str:
    components: list[str] = []
    for component in path.strip("/").split("/"):
        if component in ("", "."):
            continue
        if component == "..":
            # Never climb above the root
            if components:
                components.pop()
            continue
        components.append(component)
    return "/" + "/".join(components)
