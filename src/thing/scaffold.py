"""Render template directories into new projects."""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

from .config import METADATA_FILENAME, ProjectConfig
from .errors import UnresolvedTemplate
from .template import TemplateRenderer, TemplateRenderingError

__all__ = ["ProjectScaffolder", "discover_template_files"]


LOGGER = logging.getLogger(__name__)


def discover_template_files(
    template_root: str | Path,
    *,
    skip: Iterable[str] = (METADATA_FILENAME,),
) -> list[Path]:
    """Return every file below ``template_root`` in a stable order.

    Files whose basename is listed in ``skip`` are left out wherever they
    appear in the tree. Symlinked directories are not descended into.
    """

    root = Path(template_root)
    skipped = set(skip)
    files: list[Path] = []
    for current, dirnames, filenames in os.walk(root, followlinks=False):
        current_path = Path(current)
        for dirname in list(dirnames):
            if (current_path / dirname).is_symlink():
                LOGGER.warning("Skipping symlinked directory %s", current_path / dirname)
                dirnames.remove(dirname)
        dirnames.sort()
        for filename in sorted(filenames):
            if filename in skipped:
                continue
            files.append(current_path / filename)
    return files


@dataclass(slots=True)
class ProjectScaffolder:
    """Copy a template tree into a project directory, substituting ``{{name}}``."""

    renderer: TemplateRenderer
    metadata_filename: str

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        *,
        metadata_filename: str = METADATA_FILENAME,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.metadata_filename = metadata_filename

    def render(
        self,
        config: ProjectConfig,
        template_root: str | Path,
        project_dir: str | Path,
        *,
        metadata_filename: str | None = None,
    ) -> list[Path]:
        """Render every template file of ``template_root`` into ``project_dir``.

        Returns the destination paths in the order they were written. The
        first file that cannot be read, rendered or written aborts the run
        with :class:`UnresolvedTemplate`; files written before it are kept.
        ``metadata_filename`` overrides the basename skipped during discovery.
        """

        template_root = Path(template_root)
        project_dir = Path(project_dir)
        skip = metadata_filename or self.metadata_filename
        sources = discover_template_files(template_root, skip=(skip,))
        LOGGER.info(
            "Template files:\n%s",
            "\n".join(f"  {source.relative_to(template_root)}" for source in sources) or "  (none)",
        )

        context = config.context()
        written: list[Path] = []
        for source in sources:
            destination = project_dir / source.relative_to(template_root)
            try:
                self._render_file(source, destination, context)
            except (TemplateRenderingError, OSError) as exc:
                raise UnresolvedTemplate(source, str(exc)) from exc
            written.append(destination)
        return written

    def _render_file(self, source: Path, destination: Path, context: Mapping[str, str]) -> None:
        try:
            rendered = self.renderer.render_file(source, context)
        except UnicodeDecodeError:
            LOGGER.debug("Copying binary file %s unchanged", source)
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, destination)
            return
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(rendered.encode("utf-8"))
        LOGGER.debug("Rendered %s", destination)
