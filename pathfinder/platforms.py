"""Platform detection for Pathfinder.

The running platform is detected once, when this module is imported, and
exposed as ``CURRENT_PLATFORM``. Everything downstream receives a ``Platform``
value explicitly so other platforms can be simulated in tests and from the CLI.

Key items:
- Platform: Supported operating system families.
- detect_platform: Map a ``sys.platform`` string to a Platform.
- CURRENT_PLATFORM: The platform of this process.
"""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import PurePath, PurePosixPath, PureWindowsPath


class Platform(Enum):
    """Operating system families with distinct executable layouts."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"

    @classmethod
    def parse(cls, value: str | Platform) -> Platform:
        """Parse a platform name or ``sys.platform`` identifier.

        Args:
            value: A Platform, a name like "windows" or "macos", or a raw
                ``sys.platform`` value like "win32" or "darwin".

        Returns:
            The matching Platform.

        Raises:
            ValueError: If the value names no known platform.
        """
        if isinstance(value, Platform):
            return value
        key = value.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f"Unknown platform: {value}")

    @property
    def executable_suffix(self) -> str:
        """Suffix appended to plain executable names."""
        return ".exe" if self is Platform.WINDOWS else ""

    @property
    def pure_path(self) -> type[PurePath]:
        """The pure path class matching native paths on this platform."""
        return PureWindowsPath if self is Platform.WINDOWS else PurePosixPath


_ALIASES = {
    "windows": Platform.WINDOWS,
    "win32": Platform.WINDOWS,
    "cygwin": Platform.WINDOWS,
    "macos": Platform.MACOS,
    "darwin": Platform.MACOS,
    "osx": Platform.MACOS,
    "linux": Platform.LINUX,
}


def detect_platform(sys_platform: str | None = None) -> Platform:
    """Detect the platform from a ``sys.platform`` string.

    Anything that is neither Windows nor macOS is treated as Linux, since
    other Unix systems share its flat executable layout.
    """
    name = sys.platform if sys_platform is None else sys_platform
    if name.startswith(("win32", "cygwin")):
        return Platform.WINDOWS
    if name == "darwin":
        return Platform.MACOS
    return Platform.LINUX


CURRENT_PLATFORM = detect_platform()
