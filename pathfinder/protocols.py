"""Protocol definitions for Pathfinder.

``PathFinder`` depends on these two interfaces rather than on the concrete
generator and prober, so either stage can be swapped out (for example a prober
backed by a fake filesystem in tests).
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .candidates import ExecutableQuery


@runtime_checkable
class CandidateSource(Protocol):
    """Produces ordered candidate paths for an executable query."""

    @abstractmethod
    def search_paths(self, query: ExecutableQuery) -> list[str]:
        """Return candidate paths, most preferred first.

        Args:
            query: The executable being looked for.

        Returns:
            Ordered list of path strings. Must not touch the filesystem.
        """
        ...


@runtime_checkable
class PathProbe(Protocol):
    """Checks candidate paths against the filesystem."""

    @abstractmethod
    def first_existing(self, paths: Sequence[str], name: str = "") -> str | None:
        """Return the first usable path, or None if none exists.

        Args:
            paths: Candidate paths in priority order.
            name: Executable name, used for diagnostics only.
        """
        ...
