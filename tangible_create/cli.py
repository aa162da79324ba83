"""Command line entry point for create-tangible-plugin.

Usage::

    create-tangible-plugin                    # prompts for everything
    create-tangible-plugin my-plugin          # prompts for title and description
    create-tangible-plugin my-plugin --title "My Plugin" --description "" --skip-install
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
from pathlib import Path

from rich.prompt import Prompt

from tangible_create import __version__
from tangible_create.config import ScaffoldConfig
from tangible_create.scaffolder import ProjectGenerator, ProjectRequest, ScaffoldError, ScaffoldResult
from tangible_create.scaffolder.casing import kebab, title
from tangible_create.scaffolder.guard import project_exists
from tangible_create.utils import console, format_duration, print_error, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-tangible-plugin",
        description="Create a new Tangible plugin project from the bundled template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-tangible-plugin\n"
            "  create-tangible-plugin my-plugin\n"
            "  create-tangible-plugin my-plugin --title 'My Plugin' --skip-install\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        help="Project name, lowercase alphanumeric with optional dashes (prompted if omitted)",
    )
    parser.add_argument("--title", default=None, help="Project title (default: title-cased name)")
    parser.add_argument("--description", default=None, help="Project description")
    parser.add_argument(
        "--directory", "-C",
        type=Path,
        default=Path.cwd(),
        help="Directory in which the project folder is created (default: current directory)",
    )
    parser.add_argument(
        "--template-dir",
        type=Path,
        default=None,
        help="Use a different template tree",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not run the dependency install commands",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


def _ask_name(parent: Path) -> str:
    """Prompt until the operator gives a usable name that is not taken."""
    while True:
        raw = Prompt.ask(
            'Project name [dim]- Lowercase alphanumeric with optional dash "-"[/dim]',
            console=console,
        )
        name = kebab(raw)
        if not name:
            continue
        if project_exists(parent, name):
            console.print(f'Project folder "{name}" already exists')
            continue
        return name


def _collect_request(args: argparse.Namespace, name: str) -> ProjectRequest:
    project_title = args.title
    if project_title is None:
        project_title = Prompt.ask(
            "Project title [dim]- Press enter for default[/dim]",
            default=title(name),
            console=console,
        )
    description = args.description
    if description is None:
        description = Prompt.ask("Project description", default="", console=console)
    return ProjectRequest(name=name, title=project_title, description=description)


def _print_result(result: ScaffoldResult) -> None:
    rendered = [outcome.path for outcome in result.renders if outcome.ok]
    summary = {
        "Project": str(result.project_root),
        "Rendered": ", ".join(rendered) or "-",
        "Failed": ", ".join(outcome.path for outcome in result.failed_renders) or "-",
        "Renamed": ", ".join(f"{src} -> {dst}" for src, dst in result.renamed.items()) or "-",
    }
    print_summary_table(summary, title="Scaffold")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``create-tangible-plugin``."""
    args = build_parser().parse_args(argv)
    parent: Path = args.directory

    config = ScaffoldConfig.from_env()
    overrides: dict[str, object] = {}
    if args.template_dir is not None:
        overrides["template_dir"] = args.template_dir
    if args.skip_install:
        overrides["skip_bootstrap"] = True
    if overrides:
        config = config.model_copy(update=overrides)

    name = kebab(args.name) if args.name else ""
    if args.name and not name:
        print_error(f"Invalid project name: {args.name!r}")
        return 1

    # Checked before any prompt is shown
    if name and project_exists(parent, name):
        console.print(f'Project folder "{name}" already exists')
        return 1

    try:
        if not name:
            name = _ask_name(parent)
        project = _collect_request(args, name)
    except KeyboardInterrupt:
        console.print()
        return 130

    console.print(f'Creating project "{name}" [dim]- Press CTRL + C to quit at any time[/dim]')
    started = time.monotonic()

    generator = ProjectGenerator(project, config)
    try:
        result = asyncio.run(generator.generate(parent))
    except ScaffoldError as exc:
        print_error(str(exc))
        return 1

    _print_result(result)
    elapsed = format_duration(time.monotonic() - started)
    console.print(
        f"\nDone in {elapsed}.\n\nStart by running:\n\ncd {name}\n{config.dev_command}\n",
        markup=False,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
