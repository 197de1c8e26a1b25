"""Thin wrappers around subprocess for the external tools we drive."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Mapping

import structlog

from carttool.exceptions import CommandFailedError, ToolNotInstalledError

log = structlog.get_logger("carttool.shell")


def which(name: str) -> str | None:
    """Full path of executable *name* on PATH, or None."""
    return shutil.which(name)


def run(cmd: list[str], env: Mapping[str, str] | None = None) -> int:
    """Run *cmd* with inherited stdio and return its exit status."""
    log.debug("shell.run", cmd=cmd)
    try:
        proc = subprocess.run(cmd, env=dict(env) if env is not None else None)
    except FileNotFoundError as e:
        raise ToolNotInstalledError(cmd[0]) from e
    return proc.returncode


def output(cmd: list[str]) -> str:
    """Run *cmd* and return its stdout.

    Raises:
        ToolNotInstalledError: the executable does not exist.
        CommandFailedError: the command exited non-zero.
    """
    log.debug("shell.output", cmd=cmd)
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise ToolNotInstalledError(cmd[0]) from e
    if proc.returncode != 0:
        raise CommandFailedError(cmd, proc.returncode, proc.stderr)
    return proc.stdout
