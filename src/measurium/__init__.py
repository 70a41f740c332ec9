"""
Measurium: category-safe measurement quantities.

Measurium represents a numeric value together with a unit drawn from one of a
fixed family of categories (length, weight, volume, temperature). Quantities
convert between units of the same category, compare across units with a fixed
tolerance, and support arithmetic where the category allows it.
This module exposes a minimal, stable public API. Heavy subsystems (e.g. the
category registry) are imported lazily to avoid import-time side effects.
"""

from importlib import metadata as _metadata
from pathlib import Path as _Path


__author__ = "Measurium contributors"
__license__ = "MIT"

_PYPROJECT = _Path(__file__).resolve().parents[2] / "pyproject.toml"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("measurium")
except _metadata.PackageNotFoundError:
    import tomllib
    with open(_PYPROJECT, "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__author__", "__license__"]
