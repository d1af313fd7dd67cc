"""
Exposes the version of greatcircle
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _read_version_file() -> str | None:
    """
    Fallback for a source checkout without installed metadata; reads the
    repo-root VERSION file.
    """
    path = Path(__file__).resolve().parents[1] / "VERSION"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError:
        return None


try:
    __version__ = version("greatcircle")
except PackageNotFoundError:
    __version__ = _read_version_file()

__all__ = ["__version__"]
