"""Shared pytest fixtures for carttool tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
    """Empty ``Carthage/Build/iOS`` under a temporary project dir."""
    d = tmp_path / "Carthage" / "Build" / "iOS"
    d.mkdir(parents=True)
    return d
