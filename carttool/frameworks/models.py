"""Data models for framework resolution."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedFramework:
    """A linked framework and the search-path copy that will be bundled."""

    name: str  # @rpath-relative reference, e.g. "Bolts.framework/Bolts"
    path: str  # absolute path of the first match
