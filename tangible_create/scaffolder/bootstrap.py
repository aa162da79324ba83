"""Dependency installation inside a freshly scaffolded project.

Commands run one after another through the shell with the project root as
working directory.  Their output is not captured: package manager progress
goes straight to the operator's terminal.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from rich.markup import escape

from ..config import BootstrapStep
from ..utils import console, print_warning
from .errors import BootstrapError

CommandRunner = Callable[..., subprocess.CompletedProcess]


@dataclass
class BootstrapResult:
    """Outcome of one bootstrap command."""

    command: str
    required: bool
    returncode: int | None

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class BootstrapRunner:
    """Runs an ordered list of ``BootstrapStep`` commands.

    A required step that fails raises ``BootstrapError`` and no later step is
    attempted.  An optional step that fails prints a remediation hint and the
    run carries on.
    """

    def __init__(
        self,
        steps: Sequence[BootstrapStep],
        runner: CommandRunner = subprocess.run,
    ) -> None:
        self.steps = list(steps)
        self.runner = runner

    def run(self, project_root: str | Path) -> list[BootstrapResult]:
        """Run every step in *project_root* and return their results."""
        cwd = Path(project_root)
        results: list[BootstrapResult] = []

        for step in self.steps:
            console.print(f"[dim]$ {escape(step.command)}[/dim]")
            returncode = self._execute(step.command, cwd)
            results.append(BootstrapResult(step.command, step.required, returncode))

            if returncode == 0:
                continue
            if step.required:
                raise BootstrapError(step.command, returncode)

            hint = step.hint or f"cd {cwd.name} && {step.command}"
            print_warning(f"`{step.command}` did not complete. Run it manually:\n\n  {hint}\n")

        return results

    def _execute(self, command: str, cwd: Path) -> int | None:
        try:
            completed = self.runner(command, shell=True, cwd=str(cwd), check=False)
        except OSError as exc:
            print_warning(f"Could not start `{command}`: {exc}")
            return None
        return completed.returncode
