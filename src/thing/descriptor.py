"""Template metadata loading."""

from __future__ import annotations

from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import METADATA_FILENAME
from .errors import MalformedDescriptor

__all__ = ["TemplateDescriptor", "load_descriptor"]


class TemplateDescriptor(BaseModel):
    """Metadata shipped at the root of every template."""

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    hooks: List[str] = Field(..., description="Shell commands run inside the new project, in order.")
    description: str = Field(..., description="Human-readable summary of the template.")


def load_descriptor(template_root: str | Path, filename: str = METADATA_FILENAME) -> TemplateDescriptor:
    """Read and validate the metadata file at ``template_root``."""

    path = Path(template_root) / filename
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise MalformedDescriptor(path, "file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedDescriptor(path, str(exc)) from exc

    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MalformedDescriptor(path, f"invalid YAML: {exc}") from exc

    if not isinstance(payload, dict):
        raise MalformedDescriptor(path, "expected a mapping with 'hooks' and 'description'")

    try:
        return TemplateDescriptor.model_validate(payload)
    except ValidationError as exc:
        raise MalformedDescriptor(path, str(exc)) from exc
