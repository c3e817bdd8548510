"""Directory-tree file discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from webp_converter.errors import DiscoveryError

logger = logging.getLogger(__name__)


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


class WalkFileDiscovery:
    """Find files recursively with ``os.walk``.

    Matches the ``**/*.*`` glob shape: only names containing a dot are
    returned and hidden files or directories are not descended into.
    Symlinked directories are followed; each real directory is walked once
    so link cycles terminate.
    """

    def discover(self, root: Path) -> list[Path]:
        """Return sorted absolute file paths beneath ``root``.

        Parameters
        ----------
        root : Path
            Absolute directory to walk.

        Returns
        -------
        list[Path]
            Sorted absolute paths.

        Raises
        ------
        DiscoveryError
            If ``root`` is not a directory or a subdirectory cannot be read.
        """
        if not root.is_dir():
            raise DiscoveryError(f"Input directory does not exist: {root}")

        def _raise(exc: OSError) -> None:
            raise DiscoveryError(f"Cannot read directory {exc.filename}: {exc.strerror}") from exc

        files: list[Path] = []
        visited = {os.path.realpath(root)}
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise, followlinks=True):
            kept: list[str] = []
            for name in dirnames:
                if _is_hidden(name):
                    continue
                real = os.path.realpath(os.path.join(dirpath, name))
                if real in visited:
                    continue
                visited.add(real)
                kept.append(name)
            dirnames[:] = kept
            for filename in filenames:
                if _is_hidden(filename) or "." not in filename:
                    continue
                files.append(Path(dirpath) / filename)

        logger.debug("Discovered %d files under %s", len(files), root)
        return sorted(files)
