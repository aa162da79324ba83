"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which renders placeholder-bearing files
of the plugin template with the project's ``RenderContext``.  Templates use
EJS-style delimiters so that PHP and JavaScript bodies need no escaping::

    <%= project.title %>            output an expression
    <%= snake(project.name) %>      case helpers are plain functions...
    <%= project.name | constant %>  ...and filters
    <% if project.description %>    statements
    <%# not rendered %>             comments
    <%= include("usage.md") %>      inline a file verbatim

``include`` resolves its argument relative to the directory of the file
being rendered.  The included text is inserted as-is and is not rendered
again, which keeps include depth at one and rules out include cycles.  An
include that cannot be read contributes an empty string and a warning; the
rest of the file still renders and is written.
"""

from __future__ import annotations

import asyncio
from pathlib import Path, PurePosixPath
from typing import Awaitable, Callable

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError

from ..utils import print_error, print_warning
from .casing import CASE_FUNCTIONS
from .errors import TemplateRenderError
from .models import RenderContext, RenderOutcome

IncludeResolver = Callable[[Path], Awaitable[str]]


async def read_template_file(path: Path) -> str:
    """Default include resolver: read *path* as UTF-8 text."""
    return await asyncio.to_thread(path.read_text, encoding="utf-8")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders plugin template files for project scaffolding.

    One renderer serves every file of a run.  It holds no per-render state,
    so independent renders may run concurrently.
    """

    def __init__(
        self,
        template_dir: str | Path,
        resolver: IncludeResolver | None = None,
    ) -> None:
        self.template_dir = Path(template_dir)
        self.resolver = resolver or read_template_file
        self.env = Environment(
            block_start_string="<%",
            block_end_string="%>",
            variable_start_string="<%=",
            variable_end_string="%>",
            comment_start_string="<%#",
            comment_end_string="%>",
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            enable_async=True,
        )
        self.env.filters.update(CASE_FUNCTIONS)

    # -- Rendering ---------------------------------------------------------

    async def render(
        self,
        source: str,
        context: RenderContext,
        *,
        template_path: str,
        warnings: list[str] | None = None,
    ) -> str:
        """Render template *source* with *context*.

        Args:
            source: Raw template text.
            context: The run's render context.
            template_path: Path of the template relative to the template
                root.  Used to resolve includes and in error messages.
            warnings: Optional list that receives one message per include
                that could not be resolved.

        Raises:
            TemplateRenderError: If the template fails to compile or one of
                its expressions fails to evaluate.
        """
        base_dir = PurePosixPath(template_path).parent

        async def include(target: str) -> str:
            return await self._resolve_include(base_dir, str(target), template_path, warnings)

        try:
            template = self.env.from_string(source)
            return await template.render_async(**context.template_vars(), include=include)
        except TemplateSyntaxError as exc:
            raise TemplateRenderError(template_path, f"line {exc.lineno}: {exc.message}") from exc
        except Exception as exc:
            raise TemplateRenderError(template_path, f"{type(exc).__name__}: {exc}") from exc

    async def render_to_file(
        self,
        relative_path: str,
        project_root: str | Path,
        context: RenderContext,
    ) -> RenderOutcome:
        """Render one manifest entry over its raw copy in *project_root*.

        The template source is read from the template root.  The copy is only
        overwritten once rendering has fully succeeded; on failure it is left
        as the raw template text and the failure is returned, not raised.
        """
        source_path = self.template_dir / relative_path
        output_path = Path(project_root) / relative_path
        warnings: list[str] = []

        try:
            if not output_path.is_file():
                raise TemplateRenderError(relative_path, "listed in the manifest but missing from the project")
            source = await asyncio.to_thread(source_path.read_text, encoding="utf-8")
            content = await self.render(
                source, context, template_path=relative_path, warnings=warnings
            )
            await asyncio.to_thread(_write_file, output_path, content)
        except TemplateRenderError as exc:
            print_error(f"Could not render {relative_path}: {exc.cause}")
            return RenderOutcome(relative_path, ok=False, error=exc.cause, warnings=warnings)
        except (OSError, ValueError) as exc:
            print_error(f"Could not render {relative_path}: {exc}")
            return RenderOutcome(relative_path, ok=False, error=str(exc), warnings=warnings)

        return RenderOutcome(relative_path, ok=True, warnings=warnings)

    # -- Includes ----------------------------------------------------------

    async def _resolve_include(
        self,
        base_dir: PurePosixPath,
        target: str,
        template_path: str,
        warnings: list[str] | None,
    ) -> str:
        root = self.template_dir.resolve()
        candidate = (root / base_dir / target).resolve()

        if not candidate.is_relative_to(root):
            cause = "path is outside the template root"
        else:
            try:
                return await self.resolver(candidate)
            except (OSError, ValueError) as exc:
                cause = f"{type(exc).__name__}: {exc}"

        message = f"include {target!r} in {template_path} ({candidate}): {cause}"
        print_warning(f"Skipped {message}")
        if warnings is not None:
            warnings.append(message)
        return ""


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
