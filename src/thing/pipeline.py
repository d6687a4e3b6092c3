"""End-to-end scaffolding: resolve, check, render, run hooks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import ProjectConfig, Settings
from .descriptor import load_descriptor
from .errors import PreconditionFailed
from .hooks import HookExecutor, HookResult
from .resolver import ResolvedTemplate, TemplateResolver
from .scaffold import ProjectScaffolder

__all__ = ["ScaffoldPipeline", "ScaffoldResult", "check_preconditions"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScaffoldResult:
    """Summary of a completed scaffold run."""

    project_dir: Path
    template: ResolvedTemplate
    files: list[Path] = field(default_factory=list)
    hooks: list[HookResult] = field(default_factory=list)


def check_preconditions(project_dir: str | Path, template: ResolvedTemplate) -> None:
    """Fail unless ``project_dir`` is free and the template directory exists."""

    project_dir = Path(project_dir)
    if project_dir.exists():
        raise PreconditionFailed(f"target directory {project_dir} already exists")
    if not template.path.is_dir():
        raise PreconditionFailed(f"template directory {template.path} does not exist")


class ScaffoldPipeline:
    """Create a project from a template reference.

    Stages run strictly in order and the first failure propagates. Nothing
    created before the failure is removed.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        resolver: TemplateResolver | None = None,
        scaffolder: ProjectScaffolder | None = None,
        executor: HookExecutor | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.resolver = resolver or TemplateResolver(self.settings)
        self.scaffolder = scaffolder or ProjectScaffolder(metadata_filename=self.settings.metadata_filename)
        self.executor = executor or HookExecutor()

    def run(self, name: str, reference: str, *, cwd: str | Path | None = None) -> ScaffoldResult:
        config = ProjectConfig.from_name(name, cwd=cwd)
        template = self.resolver.resolve(reference)
        check_preconditions(config.project_dir, template)

        try:
            config.project_dir.mkdir(parents=True)
        except OSError as exc:
            raise PreconditionFailed(f"cannot create {config.project_dir}: {exc}") from exc
        LOGGER.info("Created %s", config.project_dir)
        files = self.scaffolder.render(
            config,
            template.path,
            config.project_dir,
            metadata_filename=self.settings.metadata_filename,
        )

        descriptor = load_descriptor(template.path, self.settings.metadata_filename)
        results = self.executor.run(config.project_dir, descriptor.hooks)
        return ScaffoldResult(
            project_dir=config.project_dir,
            template=template,
            files=files,
            hooks=results,
        )
