"""Create new projects from template directories.

A template is a directory tree, local or fetched from a GitHub repository,
whose files may contain a ``{{name}}`` placeholder and whose root carries a
``thing.template.yaml`` file listing post-creation hooks. The package
exposes the individual stages (resolver, renderer, hook executor) and the
:class:`ScaffoldPipeline` that runs them in sequence for the command line
interface.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import ProjectConfig, Settings
from .descriptor import TemplateDescriptor, load_descriptor
from .errors import (
    HookLaunchFailure,
    InvalidReference,
    MalformedDescriptor,
    PreconditionFailed,
    RepositoryNotFound,
    ThingError,
    UnresolvedTemplate,
)
from .hooks import HookExecutor, HookResult
from .pipeline import ScaffoldPipeline, ScaffoldResult, check_preconditions
from .resolver import ResolvedTemplate, TemplateResolver
from .scaffold import ProjectScaffolder, discover_template_files
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "HookExecutor",
    "HookLaunchFailure",
    "HookResult",
    "InvalidReference",
    "MalformedDescriptor",
    "PreconditionFailed",
    "ProjectConfig",
    "ProjectScaffolder",
    "RepositoryNotFound",
    "ResolvedTemplate",
    "ScaffoldPipeline",
    "ScaffoldResult",
    "Settings",
    "TemplateDescriptor",
    "TemplateRenderer",
    "TemplateRenderingError",
    "TemplateResolver",
    "ThingError",
    "UnresolvedTemplate",
    "check_preconditions",
    "discover_template_files",
    "load_descriptor",
]
