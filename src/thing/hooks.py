"""Post-creation hooks declared by templates."""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from .errors import HookLaunchFailure

__all__ = ["ACCEPT_TOKEN", "HookExecutor", "HookResult", "format_hook_prompt", "prompt_confirmation"]


LOGGER = logging.getLogger(__name__)

ACCEPT_TOKEN = "y"

Confirm = Callable[[str], bool]
Runner = Callable[..., "subprocess.CompletedProcess[bytes]"]


@dataclass(frozen=True, slots=True)
class HookResult:
    """Outcome of a single hook command."""

    command: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def format_hook_prompt(hooks: Sequence[str]) -> str:
    lines = ["Template hooks:"]
    lines.extend(f"  {hook}" for hook in hooks)
    lines.append(f"Execute {ACCEPT_TOKEN}/n: ")
    return "\n".join(lines)


def prompt_confirmation(prompt: str) -> bool:
    """Ask on the terminal; only the exact answer ``y`` confirms."""

    sys.stdout.write(prompt)
    sys.stdout.flush()
    try:
        answer = input()
    except EOFError:
        return False
    return answer == ACCEPT_TOKEN


class HookExecutor:
    """Confirm and run hook commands inside a project directory.

    ``confirm`` receives the prompt listing every hook and returns whether the
    operator accepted. ``runner`` has the signature of :func:`subprocess.run`.
    """

    def __init__(self, confirm: Confirm | None = None, runner: Runner | None = None) -> None:
        self._confirm = confirm or prompt_confirmation
        self._runner = runner or subprocess.run

    def run(self, project_dir: str | Path, hooks: Sequence[str]) -> list[HookResult]:
        """Run ``hooks`` in order with ``project_dir`` as working directory.

        Returns an empty list when there is nothing to run or the operator
        declines. A hook exiting non-zero is logged and the remaining hooks
        still run.
        """

        if not hooks:
            return []
        if not self._confirm(format_hook_prompt(hooks)):
            LOGGER.info("Hooks declined, skipping %d hook(s)", len(hooks))
            return []

        cwd = Path(project_dir).absolute()
        results: list[HookResult] = []
        for hook in hooks:
            LOGGER.info("Running hook: %s", hook)
            try:
                completed = self._runner(hook, shell=True, cwd=cwd, check=False)
            except OSError as exc:
                raise HookLaunchFailure(hook, str(exc)) from exc
            result = HookResult(command=hook, returncode=completed.returncode)
            if not result.ok:
                LOGGER.warning("Hook '%s' exited with status %d", hook, result.returncode)
            results.append(result)
        return results
