"""Read @rpath linkage from Mach-O binaries with ``otool -L``."""

from __future__ import annotations

from carttool import shell
from carttool.exceptions import CartToolError, IntrospectionError

RPATH_PREFIX = "@rpath"

# Swift runtime dylibs are embedded by Xcode itself, never by Carthage.
_SWIFT_RUNTIME_MARKER = "libswift"


def filter_rpath_dependencies(lines: list[str]) -> list[str]:
    """Reduce raw ``otool -L`` lines to @rpath-relative dependency names.

    ``\\t@rpath/Bolts.framework/Bolts (compatibility version 1.0.0, ...)``
    becomes ``Bolts.framework/Bolts``. Absolute references (system
    libraries) and the header line are dropped.
    """
    names: list[str] = []
    for line in lines:
        if not line:
            continue
        ref = line.split("(", 1)[0].strip()
        if not ref.startswith(RPATH_PREFIX):
            continue
        if _SWIFT_RUNTIME_MARKER in ref:
            continue
        names.append(ref.replace(RPATH_PREFIX + "/", "", 1))
    return names


def otool_dependencies(path: str) -> list[str]:
    """Direct @rpath dependencies of the binary at *path*.

    Raises:
        IntrospectionError: otool is missing, failed, or could not read *path*.
    """
    try:
        out = shell.output(["otool", "-L", path])
    except CartToolError as e:
        raise IntrospectionError(path, str(e)) from e
    return filter_rpath_dependencies(out.splitlines())
