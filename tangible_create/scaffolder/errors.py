"""Exceptions raised while scaffolding a project."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ScaffoldState(str, Enum):
    """Stages of a scaffold run, in the order they are reached."""

    START = "start"
    GUARD_CHECKED = "guard_checked"
    DIR_CREATED = "dir_created"
    TREE_COPIED = "tree_copied"
    TEMPLATES_RENDERED = "templates_rendered"
    ENTRY_RENAMED = "entry_renamed"
    DEPENDENCIES_BOOTSTRAPPED = "dependencies_bootstrapped"
    DONE = "done"
    ABORTED = "aborted"
    FAILED = "failed"


class ScaffoldError(Exception):
    """Base class for errors that stop a scaffold run.

    ``state`` is the terminal state the run ended in, and ``reached`` the
    last stage that completed before the error.
    """

    state = ScaffoldState.FAILED

    def __init__(self, message: str, reached: ScaffoldState = ScaffoldState.START) -> None:
        self.reached = reached
        super().__init__(message)


class ProjectExistsError(ScaffoldError):
    """The target project directory already exists. Nothing was created."""

    state = ScaffoldState.ABORTED

    def __init__(self, path: Path, reached: ScaffoldState = ScaffoldState.START) -> None:
        self.path = path
        super().__init__(f'Project folder "{path.name}" already exists', reached)


class StructuralIOError(ScaffoldError):
    """Creating, copying or renaming inside the project directory failed."""


class TemplateRenderError(ScaffoldError):
    """A single template could not be rendered.

    Raised by the renderer and recorded per file by the orchestrator; it never
    stops the run.
    """

    def __init__(self, template_path: str, cause: str) -> None:
        self.template_path = template_path
        self.cause = cause
        super().__init__(f"{template_path}: {cause}", ScaffoldState.TREE_COPIED)


class BootstrapError(ScaffoldError):
    """A required dependency bootstrap command failed."""

    def __init__(self, command: str, returncode: int | None) -> None:
        self.command = command
        self.returncode = returncode
        if returncode is None:
            detail = "could not be started"
        else:
            detail = f"exited with status {returncode}"
        super().__init__(f"`{command}` {detail}", ScaffoldState.ENTRY_RENAMED)
