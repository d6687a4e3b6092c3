"""Configuration helpers shared by the scaffolding pipeline and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from .naming import template_name

__all__ = ["METADATA_FILENAME", "ProjectConfig", "Settings"]


METADATA_FILENAME = "thing.template.yaml"


def _default_cache_root() -> Path:
    return Path.home() / ".local" / "thing" / "templates"


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime settings for template acquisition.

    Attributes
    ----------
    cache_root:
        Directory holding extracted remote templates, one ``owner/repo``
        subdirectory per cached repository.
    api_url:
        Base URL of the repository hosting API used to look up default
        branches.
    archive_url:
        Base URL serving ``<owner>/<repo>/archive/<branch>.zip`` downloads.
    metadata_filename:
        Basename of the template metadata file. Files with this name are
        never rendered into the new project.
    timeout:
        Seconds to wait on each HTTP request.
    github_token:
        Optional token sent as a bearer credential to the hosting API.
    """

    cache_root: Path = field(default_factory=_default_cache_root)
    api_url: str = "https://api.github.com"
    archive_url: str = "https://github.com"
    metadata_filename: str = METADATA_FILENAME
    timeout: float = 30.0
    github_token: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build :class:`Settings` honouring ``THING_*`` environment overrides."""

        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}

        cache_dir = env.get("THING_CACHE_DIR")
        if cache_dir:
            overrides["cache_root"] = Path(cache_dir).expanduser()
        api_url = env.get("THING_GITHUB_API")
        if api_url:
            overrides["api_url"] = api_url.rstrip("/")
        archive_url = env.get("THING_GITHUB_URL")
        if archive_url:
            overrides["archive_url"] = archive_url.rstrip("/")
        timeout = env.get("THING_TIMEOUT")
        if timeout:
            try:
                overrides["timeout"] = float(timeout)
            except ValueError as exc:
                raise ValueError(f"THING_TIMEOUT must be a number, got '{timeout}'") from exc
        token = env.get("GITHUB_TOKEN") or env.get("GH_TOKEN")
        if token:
            overrides["github_token"] = token

        return cls(**overrides)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Identifiers describing the project being created.

    Attributes
    ----------
    name:
        The project name exactly as provided by the user. It doubles as the
        target directory, relative to the working directory.
    project_dir:
        Absolute path of the directory that will hold the new project.
    template_name:
        The value substituted for ``{{name}}`` in template files: the last
        path component of :attr:`name`.
    """

    name: str
    project_dir: Path
    template_name: str

    @classmethod
    def from_name(cls, name: str, *, cwd: str | Path | None = None) -> "ProjectConfig":
        """Build a :class:`ProjectConfig` for ``name`` relative to ``cwd``."""

        if not name.strip():
            raise ValueError("project name must not be empty")

        base = Path.cwd() if cwd is None else Path(cwd)
        return cls(
            name=name,
            project_dir=(base / name).absolute(),
            template_name=template_name(name),
        )

    def context(self) -> Mapping[str, str]:
        """Return the substitution context exposed to template files."""

        return {"name": self.template_name}
