"""Recursive source-tree walking for dependency guessing."""

from __future__ import annotations

import fnmatch
import logging
import os
from typing import Iterable, Iterator, Optional, Tuple

from constants import Constants

logger = logging.getLogger(__name__)


def _matches(filename: str, patterns: Iterable[str]) -> bool:
    return any(fnmatch.fnmatch(filename, pattern) for pattern in patterns)


def iter_source_files(
    root: str,
    patterns: Iterable[str],
    ignored_dirs: Optional[Iterable[str]] = None,
) -> Iterator[Tuple[str, str]]:
    """Yield ``(path, text)`` for every file under ``root`` matching ``patterns``.

    Traversal is sorted so results are stable across runs. Directories named
    in ``ignored_dirs`` (default: Constants.IGNORED_DIRS) are not entered.
    A file that cannot be read is logged and skipped.
    """
    patterns = list(patterns)
    ignored = set(Constants.IGNORED_DIRS if ignored_dirs is None else ignored_dirs)

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in ignored)
        for filename in sorted(filenames):
            if not _matches(filename, patterns):
                continue
            path = os.path.join(dirpath, filename)
            try:
                with open(path, "r", encoding="utf-8", errors="replace") as fh:
                    text = fh.read()
            except OSError as exc:
                logger.warning("Skipping unreadable source file %s: %s", path, exc)
                continue
            yield path, text
