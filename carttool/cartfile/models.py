"""Data models for Carthage manifests."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class RepoType(str, enum.Enum):
    GIT = "git"
    GITHUB = "github"


@dataclass(frozen=True)
class CartfileEntry:
    """A single dependency declared in a Cartfile."""

    type: RepoType
    repo_name: str
    remote_url: str
    tag: str  # tag or commit hash, opaque
    source_file: str = "Cartfile"
