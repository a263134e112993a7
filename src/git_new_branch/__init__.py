"""Create git branches namespaced by your username."""

from importlib import metadata

try:
    __version__ = metadata.version("git-new-branch")
except metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
