"""Candidate path generation for Pathfinder.

This module turns an executable query into an ordered list of places the
executable might live. It performs no I/O: the result depends only on the
query and on the facts injected into the generator (platform, location of the
running executable, build root).

Key classes:
- Flavor: Local debug or local release build outputs.
- ExecutableQuery: The immutable description of what to look for.
- NameRemapping: Internal to public product name substitutions.
- SearchPathGenerator: Builds candidate paths for a query.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath

from .bundles import BUNDLE_CONTENTS, find_bundle_root
from .platforms import CURRENT_PLATFORM, Platform

DEFAULT_BUILD_ROOT = "../build"
DEFAULT_COMPONENTS_BUNDLE = "Components.app"

# Names of the primary desktop application, before and after remapping.
PRIMARY_APPLICATIONS = frozenset({"Interface", "High Fidelity"})


class Flavor(Enum):
    """Build configuration whose outputs a developer tree search should prefer."""

    LOCAL_DEBUG = "local-debug"
    LOCAL_RELEASE = "local-release"

    @classmethod
    def parse(cls, value: str | Flavor | None) -> Flavor:
        """Parse a flavor name.

        Only "local-release" selects release outputs; every other value,
        including None, selects debug outputs.
        """
        if isinstance(value, Flavor):
            return value
        if value and value.strip().lower().replace("_", "-") == "local-release":
            return cls.LOCAL_RELEASE
        return cls.LOCAL_DEBUG

    @property
    def build_subdir(self) -> str:
        """Per-configuration output directory used by multi-config generators."""
        return "Release" if self is Flavor.LOCAL_RELEASE else "Debug"


@dataclass(frozen=True)
class ExecutableQuery:
    """What to look for.

    Attributes:
        name: Logical executable name, e.g. "Interface" or "domain-server".
        flavor: Which developer build outputs to prefer.
        packaged: True when running from an installed layout rather than a
            developer build tree.
    """

    name: str
    flavor: Flavor = Flavor.LOCAL_DEBUG
    packaged: bool = False

    def __post_init__(self):
        object.__setattr__(self, "flavor", Flavor.parse(self.flavor))
        object.__setattr__(self, "packaged", bool(self.packaged))


class NameRemapping:
    """Lookup table of executable renames keyed by platform and packaging mode.

    Shipped binaries are sometimes renamed relative to their build target,
    e.g. the macOS installer ships "Interface" as "High Fidelity". Each entry
    maps an internal name to the name found on disk.
    """

    def __init__(
        self,
        entries: Mapping[tuple[Platform, bool], Mapping[str, str]] | None = None,
    ):
        self._table: dict[tuple[Platform, bool], dict[str, str]] = {}
        for (platform, packaged), names in (entries or {}).items():
            for internal, public in names.items():
                self.add(platform, packaged, internal, public)

    @classmethod
    def default(cls) -> NameRemapping:
        """Return the remappings applied by released installers."""
        return cls({(Platform.MACOS, True): {"Interface": "High Fidelity"}})

    def add(
        self, platform: Platform | str, packaged: bool, internal: str, public: str
    ) -> None:
        """Register a rename for one platform and packaging mode."""
        key = (Platform.parse(platform), bool(packaged))
        self._table.setdefault(key, {})[internal] = public

    def extend(self, entries: Iterable[Mapping[str, object]]) -> None:
        """Register renames given as mappings with platform/packaged/from/to keys."""
        for entry in entries:
            self.add(
                str(entry["platform"]),
                bool(entry.get("packaged", True)),
                str(entry["from"]),
                str(entry["to"]),
            )

    def apply(self, name: str, platform: Platform, packaged: bool) -> str:
        """Return the on-disk name for ``name``, or ``name`` if not remapped."""
        return self._table.get((platform, bool(packaged)), {}).get(name, name)

    def copy(self) -> NameRemapping:
        return NameRemapping(self._table)

    def __eq__(self, other):
        if not isinstance(other, NameRemapping):
            return NotImplemented
        return self._table == other._table

    def __repr__(self):
        return f"NameRemapping({self._table!r})"


def executable_suffix(name: str, platform: Platform) -> str:
    """Return what follows ``name`` in the executable's file path.

    On macOS the primary desktop application is a bundle, so the suffix walks
    into the bundle to its inner executable. Windows appends ".exe" and Linux
    appends nothing.

    Examples:
        >>> executable_suffix("Interface", Platform.MACOS)
        '.app/Contents/MacOS/Interface'
        >>> executable_suffix("domain-server", Platform.WINDOWS)
        '.exe'
    """
    if platform is Platform.MACOS and name in PRIMARY_APPLICATIONS:
        return f".app/{BUNDLE_CONTENTS}/MacOS/{name}"
    return platform.executable_suffix


class SearchPathGenerator:
    """Builds ordered candidate paths for executable queries.

    All environment facts are injected at construction time so the same
    generator answers identically for the lifetime of the process.

    Attributes:
        platform: Platform whose naming conventions apply.
        executable_path: Path of the running process's own executable.
        bundle_anchor: Path inspected for an enclosing macOS bundle.
        build_root: Developer build output directory.
        components_bundle: Name of the bundle embedded inside the main bundle.
        remapping: Internal to public name substitutions.
    """

    def __init__(
        self,
        platform: Platform | None = None,
        executable_path: str | PurePath | None = None,
        bundle_anchor: str | PurePath | None = None,
        build_root: str = DEFAULT_BUILD_ROOT,
        components_bundle: str = DEFAULT_COMPONENTS_BUNDLE,
        remapping: NameRemapping | None = None,
    ):
        self.platform = CURRENT_PLATFORM if platform is None else platform
        self.executable_path = str(
            sys.executable if executable_path is None else executable_path
        )
        self.bundle_anchor = (
            None if bundle_anchor is None else str(bundle_anchor)
        )
        self.build_root = build_root
        self.components_bundle = components_bundle
        self.remapping = NameRemapping.default() if remapping is None else remapping

    def search_paths(self, query: ExecutableQuery) -> list[str]:
        """Return candidate paths for ``query``, most likely first.

        Args:
            query: The executable to look for.

        Returns:
            Two build-tree paths for unpackaged queries. For packaged queries,
            the path beside the running executable, followed on macOS by the
            embedded components bundle and the bundle's sibling when the
            process runs from inside an app bundle.
        """
        name = self.remapping.apply(query.name, self.platform, query.packaged)
        filename = name + executable_suffix(name, self.platform)

        if not query.packaged:
            return self._build_tree_paths(name, filename, query.flavor)
        return self._install_paths(filename)

    def _build_tree_paths(self, name: str, filename: str, flavor: Flavor) -> list[str]:
        root = self.build_root if self.build_root.endswith("/") else self.build_root + "/"
        base = f"{root}{name}/"
        return [
            base + filename,
            f"{base}{flavor.build_subdir}/{filename}",
        ]

    def _install_paths(self, filename: str) -> list[str]:
        pure = self.platform.pure_path
        executable_dir = pure(self.executable_path).parent
        paths = [str(executable_dir / filename)]

        if self.platform is Platform.MACOS:
            anchor = self.bundle_anchor or str(executable_dir)
            bundle_root = find_bundle_root(anchor)
            if bundle_root is not None:
                macos_dir = bundle_root / BUNDLE_CONTENTS / "MacOS"
                components_dir = (
                    macos_dir / self.components_bundle / BUNDLE_CONTENTS / "MacOS"
                )
                paths.append(str(components_dir / filename))
                paths.append(str(bundle_root.parent / filename))
        return paths
