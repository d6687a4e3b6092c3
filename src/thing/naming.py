"""Name normalisation utilities shared by the resolver and renderer."""

from __future__ import annotations

import posixpath

__all__ = ["split_repository", "template_name"]


def template_name(name: str) -> str:
    """Return the value substituted for ``{{name}}`` inside template files.

    A single trailing ``/`` is stripped first, then only the final path
    component is kept, so ``"foo/"`` becomes ``"foo"`` and ``"sub/my-app"``
    becomes ``"my-app"``.
    """

    if name.endswith("/"):
        name = name[:-1]
    return posixpath.basename(name)


def split_repository(reference: str) -> tuple[str, str] | None:
    """Split ``owner/repo`` into its parts.

    Returns ``None`` unless ``reference`` holds exactly one ``/`` separating
    two non-empty segments without whitespace.
    """

    parts = reference.split("/")
    if len(parts) != 2:
        return None
    owner, repo = parts
    if not owner or not repo:
        return None
    if any(char.isspace() for char in reference):
        return None
    return owner, repo
