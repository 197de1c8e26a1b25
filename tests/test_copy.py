"""Tests for the copy-frameworks orchestration — carthage is never run."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from carttool.config import BuildSettings
from carttool.exceptions import (
    CommandFailedError,
    FrameworkNotFoundError,
    ToolNotInstalledError,
)
from carttool.frameworks.copy import (
    COPY_COMMAND,
    build_copy_environment,
    copy_frameworks,
    resolve_app_frameworks,
)
from fakes import FakeOtool, make_framework, ref


class RecordingRun:
    def __init__(self, returncode: int = 0):
        self.returncode = returncode
        self.calls: list[tuple[list[str], dict[str, str]]] = []

    def __call__(self, cmd, env=None):
        self.calls.append((cmd, env))
        return self.returncode


def _which_carthage(name: str) -> str | None:
    return "/usr/local/bin/carthage" if name == "carthage" else None


@pytest.fixture
def project(tmp_path: Path):
    """An Xcode-like layout: built app plus Carthage/Build/iOS frameworks."""
    products = tmp_path / "DerivedData" / "Debug-iphoneos"
    app = products / "MyApp.app"
    app.mkdir(parents=True)
    (app / "MyApp").write_bytes(b"\xcf\xfa\xed\xfe")

    project_dir = tmp_path / "My Project"
    carthage_build = project_dir / "Carthage" / "Build" / "iOS"
    core = make_framework(carthage_build, "FBSDKCoreKit")
    make_framework(carthage_build, "Bolts")

    settings = BuildSettings(
        built_products_dir=str(products),
        frameworks_folder_path="MyApp.app/Frameworks",
        project_dir=str(project_dir),
        executable_name="MyApp",
        platform="iOS",
        framework_search_paths=f"{products} " + str(carthage_build).replace(" ", "\\ "),
    )
    otool = FakeOtool(
        {
            settings.app_path: [ref("FBSDKCoreKit"), ref("UIKitExtras")],
            str(core): [ref("Bolts")],
        }
    )
    return settings, otool, carthage_build


class TestBuildCopyEnvironment:
    def test_indexed_pairs_and_counts(self):
        env = build_copy_environment({"PATH": "/usr/bin"}, ["/in/a", "/in/b"], ["/out/a", "/out/b"])
        assert env["PATH"] == "/usr/bin"
        assert env["SCRIPT_INPUT_FILE_0"] == "/in/a"
        assert env["SCRIPT_OUTPUT_FILE_0"] == "/out/a"
        assert env["SCRIPT_INPUT_FILE_1"] == "/in/b"
        assert env["SCRIPT_OUTPUT_FILE_1"] == "/out/b"
        assert env["SCRIPT_INPUT_FILE_COUNT"] == "2"
        assert env["SCRIPT_OUTPUT_FILE_COUNT"] == "2"

    def test_base_env_not_mutated(self):
        base = {"A": "1"}
        build_copy_environment(base, ["/x"], ["/y"])
        assert base == {"A": "1"}

    def test_empty(self):
        env = build_copy_environment({}, [], [])
        assert env == {"SCRIPT_INPUT_FILE_COUNT": "0", "SCRIPT_OUTPUT_FILE_COUNT": "0"}


class TestResolveAppFrameworks:
    def test_resolves_transitive_frameworks(self, project):
        settings, otool, carthage_build = project
        resolved = resolve_app_frameworks(settings, introspect=otool)
        assert [fw.name for fw in resolved] == [ref("Bolts"), ref("FBSDKCoreKit")]
        assert resolved[0].path == str(carthage_build / ref("Bolts"))


class TestCopyFrameworks:
    def test_runs_carthage_with_file_lists(self, project):
        settings, otool, carthage_build = project
        run = RecordingRun()

        resolved = copy_frameworks(
            settings, base_env={"HOME": "/Users/foo"}, introspect=otool,
            run=run, which=_which_carthage,
        )

        assert len(resolved) == 2
        assert len(run.calls) == 1
        cmd, env = run.calls[0]
        assert cmd == COPY_COMMAND
        assert env["HOME"] == "/Users/foo"
        assert env["SCRIPT_INPUT_FILE_COUNT"] == "2"
        assert env["SCRIPT_INPUT_FILE_0"] == str(carthage_build / ref("Bolts"))
        assert env["SCRIPT_OUTPUT_FILE_0"] == (
            f"{settings.built_products_dir}/MyApp.app/Frameworks/{ref('Bolts')}"
        )

    def test_carthage_missing(self, project):
        settings, otool, _ = project
        run = RecordingRun()
        with pytest.raises(ToolNotInstalledError, match="carthage"):
            copy_frameworks(settings, introspect=otool, run=run, which=lambda _: None)
        assert run.calls == []

    def test_unresolvable_framework_aborts(self, project, tmp_path: Path):
        settings, otool, _ = project
        # Search paths that do not contain the Carthage build
        settings = replace(settings, framework_search_paths=str(tmp_path / "elsewhere"))
        run = RecordingRun()
        with pytest.raises(FrameworkNotFoundError, match="Bolts"):
            copy_frameworks(settings, introspect=otool, run=run, which=_which_carthage)
        assert run.calls == []

    def test_carthage_failure(self, project):
        settings, otool, _ = project
        with pytest.raises(CommandFailedError) as exc_info:
            copy_frameworks(
                settings, base_env={}, introspect=otool,
                run=RecordingRun(returncode=2), which=_which_carthage,
            )
        assert exc_info.value.returncode == 2
