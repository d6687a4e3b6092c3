"""Turn template references into local template directories.

A reference is either a path to an existing directory, used as-is, or an
``owner/repo`` identifier. Remote templates are fetched as a zip archive of
the repository's default branch and extracted under the cache root, replacing
whatever was cached for that repository before.
"""

from __future__ import annotations

import io
import logging
import shutil
import zipfile
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any, Literal

import requests

from .config import Settings
from .errors import InvalidReference, RepositoryNotFound
from .naming import split_repository

__all__ = ["ResolvedTemplate", "TemplateResolver"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedTemplate:
    """A template directory available on the local filesystem."""

    path: Path
    source: Literal["local", "github"] = "local"
    owner: str | None = None
    repo: str | None = None
    branch: str | None = None


class TemplateResolver:
    """Resolve template references, downloading remote ones into the cache."""

    def __init__(self, settings: Settings | None = None, session: requests.Session | None = None) -> None:
        self._settings = settings or Settings()
        self._session = session or requests.Session()

    def cache_dir(self, owner: str, repo: str) -> Path:
        """Return the cache directory holding ``owner/repo``."""

        return self._settings.cache_root / owner / repo

    def resolve(self, reference: str) -> ResolvedTemplate:
        local = Path(reference)
        if local.is_dir():
            LOGGER.info("Using local template %s", local)
            return ResolvedTemplate(path=local)

        parts = split_repository(reference)
        if parts is None:
            raise InvalidReference(
                f"'{reference}' is neither an existing directory nor an 'owner/repo' reference"
            )
        owner, repo = parts
        branch = self._default_branch(owner, repo)
        path = self._download(owner, repo, branch)
        return ResolvedTemplate(path=path, source="github", owner=owner, repo=repo, branch=branch)

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self._settings.github_token:
            headers["Authorization"] = f"Bearer {self._settings.github_token}"
        return headers

    def _default_branch(self, owner: str, repo: str) -> str:
        url = f"{self._settings.api_url}/repos/{owner}/{repo}"
        LOGGER.debug("Looking up default branch via %s", url)
        try:
            response = self._session.get(url, headers=self._headers(), timeout=self._settings.timeout)
        except requests.RequestException as exc:
            raise RepositoryNotFound(f"cannot find repository {owner}/{repo}: {exc}") from exc
        if response.status_code >= 400:
            raise RepositoryNotFound(
                f"cannot find repository {owner}/{repo}: HTTP {response.status_code}"
            )
        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise RepositoryNotFound(f"cannot find repository {owner}/{repo}: invalid API response") from exc

        branch = payload.get("default_branch") if isinstance(payload, dict) else None
        if not isinstance(branch, str) or not branch:
            raise RepositoryNotFound(f"repository {owner}/{repo} has no default branch")
        return branch

    def _download(self, owner: str, repo: str, branch: str) -> Path:
        destination = self.cache_dir(owner, repo)
        if destination.exists():
            LOGGER.info("Removing cached template %s", destination)
            shutil.rmtree(destination)

        url = f"{self._settings.archive_url}/{owner}/{repo}/archive/{branch}.zip"
        LOGGER.info("Downloading %s", url)
        try:
            response = self._session.get(url, timeout=self._settings.timeout)
        except requests.RequestException as exc:
            raise RepositoryNotFound(f"failed to download {url}: {exc}") from exc
        if response.status_code >= 400:
            raise RepositoryNotFound(f"failed to download {url}: HTTP {response.status_code}")

        top_level = _extract_archive(response.content, destination)
        path = destination / (top_level or f"{repo}-{branch}")
        LOGGER.info("Extracted template to %s", path)
        return path


def _extract_archive(data: bytes, destination: Path) -> str | None:
    """Extract zip ``data`` into ``destination``.

    Returns the name of the archive's single top-level directory, or ``None``
    when the archive does not have exactly one.
    """

    try:
        archive = zipfile.ZipFile(io.BytesIO(data))
    except zipfile.BadZipFile as exc:
        raise RepositoryNotFound(f"downloaded archive is not a valid zip file: {exc}") from exc

    with archive:
        roots: set[str] = set()
        for member in archive.namelist():
            parts = PurePosixPath(member).parts
            if not parts or member.startswith("/") or ".." in parts:
                raise RepositoryNotFound(f"archive member '{member}' escapes the cache directory")
            roots.add(parts[0])

        destination.mkdir(parents=True, exist_ok=True)
        try:
            archive.extractall(destination)
        except (zipfile.BadZipFile, OSError) as exc:
            raise RepositoryNotFound(f"failed to extract archive into {destination}: {exc}") from exc

    if len(roots) == 1:
        (root,) = roots
        if (destination / root).is_dir():
            return root
    return None
