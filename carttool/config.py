"""Build settings read from the Xcode run-script environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from carttool.core import paths
from carttool.core.envlist import split_env_var
from carttool.exceptions import ConfigurationMissingError

REQUIRED_VARIABLES = (
    "BUILT_PRODUCTS_DIR",
    "FRAMEWORKS_FOLDER_PATH",
    "PROJECT_DIR",
    "EXECUTABLE_NAME",
    "FRAMEWORK_SEARCH_PATHS",
)

# Xcode PLATFORM_NAME -> Carthage/Build subdirectory
_CARTHAGE_PLATFORMS: dict[str, str] = {
    "iphoneos": "iOS",
    "iphonesimulator": "iOS",
    "macosx": "Mac",
    "appletvos": "tvOS",
    "appletvsimulator": "tvOS",
    "watchos": "watchOS",
    "watchsimulator": "watchOS",
}


def carthage_platform(platform_name: str) -> str:
    """Map an Xcode ``PLATFORM_NAME`` to its Carthage build directory name.

    Unknown values are passed through, so ``iOS`` stays ``iOS``.
    """
    return _CARTHAGE_PLATFORMS.get(platform_name.lower(), platform_name)


@dataclass(frozen=True)
class BuildSettings:
    """The subset of Xcode build settings the copy step needs."""

    built_products_dir: str
    frameworks_folder_path: str
    project_dir: str
    executable_name: str
    platform: str
    framework_search_paths: str

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        platform: str | None = None,
    ) -> BuildSettings:
        """Build settings from *env* (default: ``os.environ``).

        *platform* takes precedence over ``PLATFORM_NAME``.

        Raises:
            ConfigurationMissingError: naming the first absent variable.
        """
        if env is None:
            env = os.environ

        def get(key: str) -> str:
            value = env.get(key)
            if value is None:
                raise ConfigurationMissingError(key)
            return value

        if platform is None:
            platform = carthage_platform(get("PLATFORM_NAME"))

        return cls(
            built_products_dir=get("BUILT_PRODUCTS_DIR"),
            frameworks_folder_path=get("FRAMEWORKS_FOLDER_PATH"),
            project_dir=get("PROJECT_DIR"),
            executable_name=get("EXECUTABLE_NAME"),
            platform=platform,
            framework_search_paths=get("FRAMEWORK_SEARCH_PATHS"),
        )

    @property
    def app_path(self) -> str:
        """The app's main executable: ``<built>/<exe>.app/<exe>``."""
        app = paths.join(self.built_products_dir, self.executable_name + ".app")
        return paths.join(app, self.executable_name)

    @property
    def frameworks_path(self) -> str:
        """Carthage build output for the target platform."""
        return paths.join(
            paths.join(self.project_dir, "Carthage/Build"), self.platform
        )

    @property
    def frameworks_target_dir(self) -> str:
        return paths.join(self.built_products_dir, self.frameworks_folder_path)

    @property
    def search_paths(self) -> list[str]:
        return split_env_var(self.framework_search_paths)
