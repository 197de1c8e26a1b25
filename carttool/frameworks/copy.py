"""Drive ``carthage copy-frameworks`` from an Xcode Run Script phase.

Instead of maintaining the input/output file lists by hand, the frameworks
are read from the compiled app with otool, located in
FRAMEWORK_SEARCH_PATHS, and handed to carthage through the
``SCRIPT_INPUT_FILE_*`` / ``SCRIPT_OUTPUT_FILE_*`` variables it expects.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping

import structlog

from carttool import shell
from carttool.config import BuildSettings
from carttool.core import paths
from carttool.exceptions import CommandFailedError, ToolNotInstalledError
from carttool.frameworks.discovery import Introspector, discover_dependencies
from carttool.frameworks.models import ResolvedFramework
from carttool.frameworks.otool import otool_dependencies
from carttool.frameworks.resolver import resolve_frameworks

log = structlog.get_logger("carttool.copy")

COPY_COMMAND = ["carthage", "copy-frameworks"]


def build_copy_environment(
    base_env: Mapping[str, str],
    inputs: list[str],
    outputs: list[str],
) -> dict[str, str]:
    """Return *base_env* plus the script input/output file variables."""
    env = dict(base_env)
    for idx, (src, dst) in enumerate(zip(inputs, outputs)):
        env[f"SCRIPT_INPUT_FILE_{idx}"] = src
        env[f"SCRIPT_OUTPUT_FILE_{idx}"] = dst
    count = str(len(inputs))
    env["SCRIPT_INPUT_FILE_COUNT"] = count
    env["SCRIPT_OUTPUT_FILE_COUNT"] = count
    return env


def resolve_app_frameworks(
    settings: BuildSettings,
    introspect: Introspector = otool_dependencies,
    exists: Callable[[str], bool] = os.path.exists,
) -> list[ResolvedFramework]:
    """Discover and resolve the frameworks the built app links against."""
    names = sorted(
        set(
            discover_dependencies(
                settings.app_path, settings.frameworks_path, introspect, exists
            )
        )
    )
    return resolve_frameworks(names, settings.search_paths, exists)


def copy_frameworks(
    settings: BuildSettings,
    base_env: Mapping[str, str] | None = None,
    introspect: Introspector = otool_dependencies,
    exists: Callable[[str], bool] = os.path.exists,
    run: Callable[..., int] = shell.run,
    which: Callable[[str], str | None] = shell.which,
) -> list[ResolvedFramework]:
    """Resolve the app's frameworks and run ``carthage copy-frameworks``.

    Raises:
        ToolNotInstalledError: carthage is not on PATH.
        FrameworkNotFoundError: a linked framework is in no search path.
        CommandFailedError: carthage exited non-zero.
    """
    if which("carthage") is None:
        raise ToolNotInstalledError("carthage")

    resolved = resolve_app_frameworks(settings, introspect, exists)
    inputs = [fw.path for fw in resolved]
    outputs = [paths.join(settings.frameworks_target_dir, fw.name) for fw in resolved]

    for fw in resolved:
        log.info("copy.resolved", framework=fw.name, path=fw.path)

    env = build_copy_environment(
        os.environ if base_env is None else base_env, inputs, outputs
    )
    returncode = run(COPY_COMMAND, env=env)
    if returncode != 0:
        raise CommandFailedError(COPY_COMMAND, returncode)
    return resolved
