"""Executable discovery for Pathfinder.

This module composes candidate generation and existence probing into the
public discovery operations.

Key items:
- PathFinder: Generator plus prober, optionally built from configuration.
- DiscoveryResult: Outcome of one discovery, including the paths searched.
- ExecutableNotFoundError: Raised by ``require`` when nothing is found.
- search_paths / discover / resolve / require: Module-level shortcuts using
  the running platform.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .candidates import ExecutableQuery, Flavor, NameRemapping, SearchPathGenerator
from .platforms import Platform
from .probe import ExistenceProber
from .protocols import CandidateSource, PathProbe


class ExecutableNotFoundError(Exception):
    """Error raised when an executable is required but not found.

    Attributes:
        name: The logical executable name that was requested.
        searched_paths: Candidate paths that were probed, in order.
    """

    def __init__(self, name: str, searched_paths: list[str]):
        self.name = name
        self.searched_paths = searched_paths
        if searched_paths:
            paths_str = ", ".join(searched_paths)
            message = f"Executable '{name}' not found. Searched: {paths_str}"
        else:
            message = f"Executable '{name}' not found. No candidate paths."
        super().__init__(message)


@dataclass(frozen=True)
class DiscoveryResult:
    """Result of a discovery.

    Attributes:
        query: The query that was resolved.
        path: The resolved path, or None when nothing was found.
        searched: Every candidate path, in probe order.
    """

    query: ExecutableQuery
    path: str | None
    searched: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "searched", tuple(self.searched))

    @property
    def found(self) -> bool:
        return self.path is not None

    def __bool__(self) -> bool:
        return self.found

    def unwrap(self) -> str:
        """Return the resolved path or raise ExecutableNotFoundError."""
        if self.path is None:
            raise ExecutableNotFoundError(self.query.name, list(self.searched))
        return self.path


class PathFinder:
    """Resolves executable queries to paths on disk.

    Attributes:
        generator: Source of ordered candidate paths.
        prober: Checks candidates against the filesystem.
    """

    def __init__(
        self,
        generator: CandidateSource | None = None,
        prober: PathProbe | None = None,
    ):
        self.generator = generator or SearchPathGenerator()
        self.prober = prober or ExistenceProber()

    @classmethod
    def from_config(
        cls, config: dict[str, Any], platform: Platform | None = None
    ) -> PathFinder:
        """Build a PathFinder from a configuration dictionary.

        Args:
            config: Values as returned by ``pathfinder.config.load_config``.
            platform: Platform to simulate; defaults to the running one.

        Returns:
            A PathFinder honoring the configured build root, bundle names,
            remappings and stat timeout.
        """
        remapping = NameRemapping.default()
        remapping.extend(config.get("remappings") or [])
        generator = SearchPathGenerator(
            platform=platform,
            executable_path=config.get("executable_path"),
            bundle_anchor=config.get("bundle_anchor"),
            build_root=config["build_root"],
            components_bundle=config["components_bundle"],
            remapping=remapping,
        )
        prober = ExistenceProber(
            bundle_extensions=config["bundle_extensions"],
            stat_timeout=config.get("stat_timeout"),
        )
        return cls(generator, prober)

    def search_paths(self, query: ExecutableQuery) -> list[str]:
        return self.generator.search_paths(query)

    def resolve(self, query: ExecutableQuery) -> DiscoveryResult:
        """Generate candidates for ``query`` and return the first that exists."""
        paths = self.generator.search_paths(query)
        found = self.prober.first_existing(paths, name=query.name)
        return DiscoveryResult(query=query, path=found, searched=tuple(paths))

    def discover(self, query: ExecutableQuery) -> str | None:
        return self.resolve(query).path


def _finder(platform: Platform | str | None) -> PathFinder:
    if platform is None:
        return PathFinder()
    return PathFinder(SearchPathGenerator(platform=Platform.parse(platform)))


def search_paths(
    name: str,
    flavor: Flavor | str | None = None,
    packaged: bool = False,
    *,
    platform: Platform | str | None = None,
) -> list[str]:
    """Return candidate paths for an executable without touching the disk.

    Examples:
        >>> search_paths("Interface", "local-release", False, platform="linux")
        ['../build/Interface/Interface', '../build/Interface/Release/Interface']
    """
    query = ExecutableQuery(name, Flavor.parse(flavor), packaged)
    return _finder(platform).search_paths(query)


def resolve(
    name: str,
    flavor: Flavor | str | None = None,
    packaged: bool = False,
    *,
    platform: Platform | str | None = None,
) -> DiscoveryResult:
    """Discover an executable and report every path that was searched."""
    query = ExecutableQuery(name, Flavor.parse(flavor), packaged)
    return _finder(platform).resolve(query)


def discover(
    name: str,
    flavor: Flavor | str | None = None,
    packaged: bool = False,
    *,
    platform: Platform | str | None = None,
) -> str | None:
    """Return the first existing path for an executable, or None if absent.

    Args:
        name: Logical executable name, e.g. "domain-server".
        flavor: "local-debug" or "local-release".
        packaged: Whether this process runs from an installed layout.
        platform: Platform to simulate; defaults to the running one.
    """
    return resolve(name, flavor, packaged, platform=platform).path


def require(
    name: str,
    flavor: Flavor | str | None = None,
    packaged: bool = False,
    *,
    platform: Platform | str | None = None,
) -> str:
    """Like ``discover`` but raise ExecutableNotFoundError when absent."""
    return resolve(name, flavor, packaged, platform=platform).unwrap()
