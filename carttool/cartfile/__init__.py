"""Carthage manifest parsing."""

from carttool.cartfile.models import CartfileEntry, RepoType
from carttool.cartfile.parser import cartfile_lines, parse_cartfile, parse_line
from carttool.cartfile.scanner import MANIFEST_NAMES, find_manifests, read_manifest, scan

__all__ = [
    "MANIFEST_NAMES",
    "CartfileEntry",
    "RepoType",
    "cartfile_lines",
    "find_manifests",
    "parse_cartfile",
    "parse_line",
    "read_manifest",
    "scan",
]
