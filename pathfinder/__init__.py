"""Pathfinder companion executable discovery.

This package locates the companion executables of a multi-binary application
suite on disk. It understands developer build trees as well as packaged
installs, and the naming and bundle conventions of Windows, macOS and Linux.

Discovery runs in two stages: a generator produces ordered candidate paths for
a query, and a prober returns the first candidate that exists. The top-level
helpers below wire both stages together for the running platform.
"""

from .candidates import ExecutableQuery, Flavor, NameRemapping, SearchPathGenerator
from .discovery import (
    DiscoveryResult,
    ExecutableNotFoundError,
    PathFinder,
    discover,
    require,
    resolve,
    search_paths,
)
from .platforms import CURRENT_PLATFORM, Platform
from .probe import ExistenceProber

__all__ = [
    "CURRENT_PLATFORM",
    "DiscoveryResult",
    "ExecutableNotFoundError",
    "ExecutableQuery",
    "ExistenceProber",
    "Flavor",
    "NameRemapping",
    "PathFinder",
    "Platform",
    "SearchPathGenerator",
    "__version__",
    "discover",
    "require",
    "resolve",
    "search_paths",
]
__version__ = "0.1.0"
