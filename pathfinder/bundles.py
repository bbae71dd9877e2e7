"""Application bundle helpers.

macOS ships applications as ``.app`` directories whose executables live under
``<Name>.app/Contents/MacOS``. These helpers work on path segments rather than
raw substrings so a bundle is only recognised on whole-segment boundaries.

Functions:
    split_segments: Split a path into its segments.
    find_bundle_root: Locate the outermost enclosing ``.app`` bundle.
    is_bundle_path: Check whether a path names a bundle directory.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePath, PurePosixPath

BUNDLE_EXTENSION = ".app"
BUNDLE_CONTENTS = "Contents"


def split_segments(path: str | PurePath) -> tuple[str, ...]:
    """Split a POSIX path into segments, keeping a leading root as ``/``.

    Examples:
        >>> split_segments("/Applications/Sandbox.app/Contents/MacOS")
        ('/', 'Applications', 'Sandbox.app', 'Contents', 'MacOS')
    """
    return PurePosixPath(path).parts


def _is_bundle_segment(segment: str, extension: str) -> bool:
    return len(segment) > len(extension) and segment.endswith(extension)


def find_bundle_root(
    path: str | PurePath, extension: str = BUNDLE_EXTENSION
) -> PurePosixPath | None:
    """Find the bundle that encloses a path.

    A bundle is a segment ending in ``extension`` that is directly followed by
    a ``Contents`` segment. When bundles are nested, the outermost one wins.

    Args:
        path: Path to inspect, usually the directory of the running executable.
        extension: Bundle directory extension.

    Returns:
        Path of the bundle directory itself, or None when the path is not
        inside a bundle.

    Examples:
        >>> find_bundle_root("/Applications/Sandbox.app/Contents/MacOS")
        PurePosixPath('/Applications/Sandbox.app')
        >>> find_bundle_root("/usr/local/bin") is None
        True
    """
    segments = split_segments(path)
    for index, segment in enumerate(segments[:-1]):
        if (
            _is_bundle_segment(segment, extension)
            and segments[index + 1] == BUNDLE_CONTENTS
        ):
            return PurePosixPath(*segments[: index + 1])
    return None


def is_bundle_path(
    path: str | PurePath, extensions: Iterable[str] = (BUNDLE_EXTENSION,)
) -> bool:
    """Return True if the last segment of ``path`` carries a bundle extension."""
    segments = split_segments(path)
    if not segments:
        return False
    last = segments[-1]
    return any(_is_bundle_segment(last, ext) for ext in extensions)
