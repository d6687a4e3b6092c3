"""Exception types raised by the scaffolding pipeline."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "HookLaunchFailure",
    "InvalidReference",
    "MalformedDescriptor",
    "PreconditionFailed",
    "RepositoryNotFound",
    "ThingError",
    "UnresolvedTemplate",
]


class ThingError(RuntimeError):
    """Base class for every failure that aborts a scaffold run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidReference(ThingError):
    """Raised when a template reference is neither a directory nor ``owner/repo``."""


class RepositoryNotFound(ThingError):
    """Raised when a remote template cannot be located or fetched."""


class PreconditionFailed(ThingError):
    """Raised when the target exists or the template directory is missing."""


class UnresolvedTemplate(ThingError):
    """Raised when a template file still contains placeholders after substitution."""

    def __init__(self, path: Path, detail: str = "") -> None:
        self.path = path
        message = f"could not process file {path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class MalformedDescriptor(ThingError):
    """Raised when the template metadata file is missing or invalid."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"invalid template descriptor {path}: {detail}")


class HookLaunchFailure(ThingError):
    """Raised when a hook process cannot be started."""

    def __init__(self, command: str, detail: str) -> None:
        self.command = command
        super().__init__(f"failed to launch hook '{command}': {detail}")
