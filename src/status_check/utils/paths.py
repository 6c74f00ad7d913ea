"""Repository-relative path helpers."""

from __future__ import annotations

import os


def normalize_path(path: str | os.PathLike[str], repo_root: str | os.PathLike[str]) -> str:
    """Return ``path`` relative to ``repo_root`` using ``/`` separators.

    Relative input is taken to be relative to ``repo_root`` already, so
    normalizing a normalized path returns it unchanged. Paths outside the
    root come back with ``..`` segments.
    """
    relative = os.path.relpath(os.path.join(repo_root, path), repo_root)
    return relative.replace(os.sep, "/")
