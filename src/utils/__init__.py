"""Utilities for experiments and post-processing."""

from pathlib import Path

from .cavity_plotter import CavityPlotter


def get_project_root():
    """Directory holding pyproject.toml, searched upwards from this file."""
    here = Path(__file__).resolve()
    for parent in here.parents:
        if (parent / "pyproject.toml").exists():
            return parent
    return Path.cwd()


__all__ = ["get_project_root", "CavityPlotter"]
