"""Placeholder substitution for template files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]*?)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when a template still contains placeholders after substitution."""

    def __init__(self, unresolved: list[str]) -> None:
        self.unresolved = unresolved
        names = ", ".join(f"'{token}'" for token in unresolved)
        super().__init__(f"unresolved placeholders: {names}")


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with flat ``{{ key }}`` placeholders.

    Values are substituted literally. There are no filters, dotted lookups or
    control structures: a placeholder is either a key present in the context
    or it is unresolved, and any unresolved placeholder fails the whole
    render.
    """

    def render_string(self, template: str, context: Mapping[str, str]) -> str:
        """Render ``template`` using ``context``.

        Raises
        ------
        TemplateRenderingError
            If any placeholder names a key missing from ``context``. No
            partially rendered text is returned.
        """

        unresolved: list[str] = []

        def substitute(match: re.Match[str]) -> str:
            key = match.group("expression")
            if key in context:
                return str(context[key])
            unresolved.append(key)
            return match.group(0)

        rendered = _PLACEHOLDER_PATTERN.sub(substitute, template)
        if unresolved:
            raise TemplateRenderingError(unresolved)
        return rendered

    def render_file(
        self,
        template_path: str | Path,
        context: Mapping[str, str],
        *,
        encoding: str = "utf-8",
    ) -> str:
        """Read ``template_path`` and return its rendered text.

        Line endings are preserved as stored. A :class:`UnicodeDecodeError`
        propagates for files that are not text in ``encoding``.
        """

        template_path = Path(template_path)
        if not template_path.is_file():
            raise FileNotFoundError(template_path)

        text = template_path.read_bytes().decode(encoding)
        return self.render_string(text, context)
