"""Line parser for Carthage manifests.

Only pinned git declarations are recognised:

    github "owner/repo" "version"
    git "url" "version"

Every other line (comments, binary origins, version operators such as
``~> 1.0``) is skipped.
"""

from __future__ import annotations

import re

import structlog

from carttool.cartfile.models import CartfileEntry, RepoType

log = structlog.get_logger("carttool.cartfile")

GITHUB_HOST = "github.com"

# keyword "first" "second" and nothing else
_LINE_RE = re.compile(r'^\s*(github|git)\s+"([^"]+)"\s+"([^"]+)"\s*$')

# scheme://host/... or scp-style user@host:path
_URL_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://[^/\s]+/\S+$")
_SCP_RE = re.compile(r"^(?:[^@\s/]+@)?[A-Za-z0-9.-]+:(?!//)\S+$")


def _is_remote(location: str) -> bool:
    return bool(_URL_RE.match(location) or _SCP_RE.match(location))


def _name_from_url(url: str) -> str:
    """Extract the repo name from a git URL.

    Examples:
        ssh://git@host:7999/team/apicore.git -> apicore
        git@github.com:org/repo              -> repo
    """
    last = url.rstrip("/").rsplit("/", 1)[-1]
    last = last.rsplit(":", 1)[-1]
    if last.endswith(".git"):
        last = last[: -len(".git")]
    return last


def parse_line(line: str) -> CartfileEntry | None:
    """Parse one manifest line, or return None if it is not a declaration."""
    m = _LINE_RE.match(line)
    if not m:
        return None
    keyword, location, tag = m.groups()

    if keyword == "github":
        owner, sep, repo = location.partition("/")
        if not owner or not sep or not repo or "/" in repo:
            return None
        remote_url = f"https://{GITHUB_HOST}/{owner}/{repo}.git"
        repo_type = RepoType.GITHUB
    else:
        if not _is_remote(location):
            return None
        remote_url = location
        repo_type = RepoType.GIT

    repo_name = _name_from_url(remote_url)
    if not repo_name:
        return None
    return CartfileEntry(
        type=repo_type,
        repo_name=repo_name,
        remote_url=remote_url,
        tag=tag,
    )


def cartfile_lines(content: str) -> list[str]:
    """Non-blank lines of a manifest."""
    return [line for line in content.splitlines() if line.strip()]


def parse_cartfile(content: str) -> list[CartfileEntry]:
    """Entries for every line that parses, in file order."""
    entries: list[CartfileEntry] = []
    for line in cartfile_lines(content):
        entry = parse_line(line)
        if entry is None:
            log.debug("cartfile.line_skipped", line=line)
            continue
        entries.append(entry)
    return entries
