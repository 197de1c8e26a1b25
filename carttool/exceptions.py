"""Custom exceptions for carttool."""

from __future__ import annotations


class CartToolError(Exception):
    """Base exception for all carttool errors."""


class ConfigurationMissingError(CartToolError):
    """Raised when a required build setting is not present in the environment."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing {name} environment variable")


class ToolNotInstalledError(CartToolError):
    """Raised when a required executable cannot be found."""

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(f"{tool} executable not found")


class CommandFailedError(CartToolError):
    """Raised when an external command exits non-zero."""

    def __init__(self, cmd: list[str], returncode: int, stderr: str = ""):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr.strip()}" if stderr.strip() else ""
        super().__init__(f"{' '.join(cmd)} failed (exit {returncode}){detail}")


class IntrospectionError(CartToolError):
    """Raised when the linkage of a binary cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to get otool output from {path}: {reason}")


class FrameworkNotFoundError(CartToolError):
    """Raised when a framework is absent from every search path."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unable to find {name} in FRAMEWORK_SEARCH_PATHS")


class MissingDependencyError(CartToolError):
    """Raised when an app links against frameworks it does not bundle."""

    def __init__(self, missing: list[str], app_path: str):
        self.missing = missing
        self.app_path = app_path
        super().__init__(
            f"{app_path} is missing {len(missing)} linked framework(s): "
            f"{', '.join(missing)}"
        )

    @property
    def name(self) -> str:
        """First missing framework."""
        return self.missing[0]
