"""Map framework names to their copy in FRAMEWORK_SEARCH_PATHS."""

from __future__ import annotations

import os
from collections.abc import Callable

from carttool.core import paths
from carttool.exceptions import FrameworkNotFoundError
from carttool.frameworks.models import ResolvedFramework


def resolve_frameworks(
    names: list[str],
    search_paths: list[str],
    exists: Callable[[str], bool] = os.path.exists,
) -> list[ResolvedFramework]:
    """Resolve each name against *search_paths*; earlier paths win.

    Raises:
        FrameworkNotFoundError: for the first name found in no search path.
    """
    resolved: list[ResolvedFramework] = []
    for name in names:
        for directory in search_paths:
            candidate = paths.join(directory, name)
            if exists(candidate):
                resolved.append(ResolvedFramework(name=name, path=candidate))
                break
        else:
            raise FrameworkNotFoundError(name)
    return resolved
