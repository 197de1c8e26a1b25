"""Find and read the Carthage manifests of a project."""

from __future__ import annotations

import dataclasses
from pathlib import Path

from carttool.cartfile.models import CartfileEntry
from carttool.cartfile.parser import parse_cartfile

# In the order carthage itself reads them
MANIFEST_NAMES = ("Cartfile", "Cartfile.private", "Cartfile.resolved")


def find_manifests(root: Path) -> list[Path]:
    """Manifest files present directly under *root*."""
    return [root / name for name in MANIFEST_NAMES if (root / name).is_file()]


def read_manifest(path: Path, source_file: str | None = None) -> list[CartfileEntry]:
    """Parse the manifest at *path*.

    Undecodable bytes are replaced rather than failing the whole file; they
    can only occur in lines that would not parse anyway.
    """
    content = path.read_text(encoding="utf-8", errors="replace")
    label = source_file or path.name
    return [
        dataclasses.replace(entry, source_file=label)
        for entry in parse_cartfile(content)
    ]


def scan(root: Path) -> list[CartfileEntry]:
    """Parse every manifest found in *root*."""
    results: list[CartfileEntry] = []
    for path in find_manifests(root):
        results.extend(read_manifest(path, str(path.relative_to(root))))
    return results
