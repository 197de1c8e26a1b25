"""Split Xcode list-valued build settings such as FRAMEWORK_SEARCH_PATHS."""

from __future__ import annotations

# Cannot appear in a path Xcode hands us: it contains a NUL byte.
_ESCAPED_SPACE_PLACEHOLDER = "\x00escaped_space\x00"


def split_env_var(value: str) -> list[str]:
    """Split a space-delimited setting into its entries.

    Spaces inside an entry are escaped as ``\\ `` (which is how Xcode writes
    them), e.g. ``/a/b /c\\ d/e`` gives ``["/a/b", "/c d/e"]``.
    """
    tmp = value.replace("\\ ", _ESCAPED_SPACE_PLACEHOLDER)
    return [
        part.replace(_ESCAPED_SPACE_PLACEHOLDER, " ") for part in tmp.split(" ") if part
    ]
