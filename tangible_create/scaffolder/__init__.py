"""Scaffolder -- turns the plugin template into a new project.

Quick usage::

    from tangible_create.scaffolder import ProjectGenerator, ProjectRequest

    project = ProjectRequest(name="my-plugin", description="Does things")
    generator = ProjectGenerator(project)
    result = await generator.generate("/tmp/output")
"""

from tangible_create.scaffolder.bootstrap import BootstrapResult, BootstrapRunner
from tangible_create.scaffolder.errors import (
    BootstrapError,
    ProjectExistsError,
    ScaffoldError,
    ScaffoldState,
    StructuralIOError,
    TemplateRenderError,
)
from tangible_create.scaffolder.generator import ProjectGenerator, ScaffoldResult
from tangible_create.scaffolder.models import ProjectRequest, RenderContext, RenderOutcome
from tangible_create.scaffolder.templates import TemplateRenderer

__all__ = [
    "BootstrapError",
    "BootstrapResult",
    "BootstrapRunner",
    "ProjectExistsError",
    "ProjectGenerator",
    "ProjectRequest",
    "RenderContext",
    "RenderOutcome",
    "ScaffoldError",
    "ScaffoldResult",
    "ScaffoldState",
    "StructuralIOError",
    "TemplateRenderError",
    "TemplateRenderer",
]
