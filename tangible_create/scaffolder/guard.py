"""Existence checks run before anything touches the filesystem."""

from __future__ import annotations

from pathlib import Path


def project_path(parent: str | Path, name: str) -> Path:
    """Return the directory a project called *name* would occupy."""
    return Path(parent) / name


def project_exists(parent: str | Path, name: str) -> bool:
    """Return ``True`` if *name* is already taken inside *parent*.

    This is a check-then-act test: the orchestrator still creates the
    directory with a non-merging ``mkdir`` so a directory that appears in
    between is reported the same way.
    """
    return project_path(parent, name).exists()
