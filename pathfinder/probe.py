"""Existence probing for candidate paths.

The prober stats candidate paths in order and returns the first one that is a
regular file, or a bundle directory. Failures on individual candidates are
logged and skipped; only running out of candidates is reported to the caller.

Key classes:
- ExistenceProber: Returns the first usable path from a candidate list.
"""

from __future__ import annotations

import logging
import os
import stat
import threading
from collections.abc import Callable, Iterable, Sequence

from .bundles import BUNDLE_EXTENSION, is_bundle_path

logger = logging.getLogger(__name__)

StatFunc = Callable[[str], os.stat_result]


class ExistenceProber:
    """Finds the first candidate path that exists on disk.

    Attributes:
        bundle_extensions: Directory extensions accepted as executables.
        stat_timeout: Seconds to wait for each stat call, or None to wait
            indefinitely.
    """

    def __init__(
        self,
        bundle_extensions: Iterable[str] = (BUNDLE_EXTENSION,),
        stat_timeout: float | None = None,
        stat_func: StatFunc = os.stat,
    ):
        self.bundle_extensions = tuple(bundle_extensions)
        self.stat_timeout = stat_timeout
        self._stat = stat_func

    def first_existing(self, paths: Sequence[str], name: str = "") -> str | None:
        """Return the first usable path in ``paths``.

        Args:
            paths: Candidate paths in priority order.
            name: Executable name, used in log messages.

        Returns:
            The first path that is a regular file or a bundle directory, or
            None when no candidate qualifies.
        """
        label = name or "executable"
        for path in paths:
            try:
                mode = self._stat_mode(path)
            except (OSError, ValueError) as exc:
                logger.debug(f"{label} not found at {path}: {exc}")
                continue
            if self.is_usable(path, mode):
                logger.info(f"Found {label} at {path}")
                return path
            logger.debug(f"{label} at {path} is not a file or bundle; skipping")
        return None

    def is_usable(self, path: str, mode: int) -> bool:
        """Check whether a stat mode makes ``path`` an acceptable executable."""
        if stat.S_ISREG(mode):
            return True
        return stat.S_ISDIR(mode) and is_bundle_path(path, self.bundle_extensions)

    def _stat_mode(self, path: str) -> int:
        if self.stat_timeout is None:
            return self._stat(path).st_mode
        # A hung stat (e.g. a dead network mount) cannot be interrupted, so it
        # runs on a daemon thread that is abandoned on timeout and never joined
        # at interpreter exit.
        outcome: dict[str, object] = {}

        def run():
            try:
                outcome["mode"] = self._stat(path).st_mode
            except Exception as exc:
                outcome["error"] = exc

        worker = threading.Thread(target=run, name="pathfinder-stat", daemon=True)
        worker.start()
        worker.join(self.stat_timeout)
        if worker.is_alive():
            raise TimeoutError(f"stat timed out after {self.stat_timeout}s")
        if "error" in outcome:
            raise outcome["error"]
        return outcome["mode"]
