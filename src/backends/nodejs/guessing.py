"""Dependency guessing for Node.js projects.

Guessing runs in three independent stages:

1. extraction: pull module specifiers out of source text with regexes;
2. normalization: turn a specifier into a package name, or drop it;
3. filtering: remove Node.js built-in modules.

New import syntaxes only need a new entry in ``IMPORT_PATTERNS``.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Callable, Iterable, Iterator, List, Optional, Set, Tuple

from constants import Constants, ExitCodes
from common import process
from common.search import iter_source_files

logger = logging.getLogger(__name__)

# https://developer.mozilla.org/en-US/docs/Web/JavaScript/Reference/Statements/import
IMPORT_PATTERNS = [
    # import defaultExport from "module-name";
    # import * as name from "module-name";
    # export { name } from "module-name";
    r"""from\s*['"]([^'"]+)['"]\s*;?\s*$""",
    # import "module-name";
    r"""import\s*['"]([^'"]+)['"]\s*;?\s*$""",
    # const mod = require("module-name")
    # const mod = import("module-name")
    r"""(?:require|import)\s*\(\s*['"]([^'"{}]+)['"]\s*\)""",
]

_IMPORT_RE = re.compile("|".join(IMPORT_PATTERNS), re.MULTILINE)

BuiltinsProvider = Callable[[], Iterable[str]]


def extract_raw_specifiers(source_files: Iterable[Tuple[str, str]]) -> Iterator[str]:
    """Yield every module specifier found in ``(path, text)`` pairs, in order."""
    for path, text in source_files:
        for match in _IMPORT_RE.finditer(text):
            # Exactly one alternative matched, so exactly one group is set.
            specifier = "".join(group for group in match.groups() if group)
            logger.debug("%s: found import of %r", path, specifier)
            yield specifier


def normalize_specifier(raw: str) -> Optional[str]:
    """Reduce a module specifier to the package that provides it.

    ``css!./style.css`` and ``./utils`` are local and give None;
    ``lodash/debounce`` gives ``lodash``; ``@babel/core/lib/x`` gives
    ``@babel/core``.
    """
    # Loader prefixes ("style!css!mod") come first; only the last part names a module.
    module = raw.rsplit("!", 1)[-1]
    if not module or module.startswith("."):
        return None
    if "/" in module:
        parts = module.split("/")
        if module.startswith("@"):
            module = "/".join(parts[:2])
        else:
            # An absolute path ("/opt/x") leaves no name at all.
            module = parts[0]
    return module or None


def filter_builtins(candidates: Iterable[str], builtin_names: Iterable[str]) -> Set[str]:
    """Drop candidates that exactly equal a built-in module name."""
    builtins = set(builtin_names)
    return {name for name in candidates if name not in builtins}


def node_builtin_modules() -> List[str]:
    """Ask the local Node.js for its built-in module names."""
    output = process.get_cmd_output(
        [Constants.NODE_COMMAND, "-e", Constants.NODE_BUILTINS_SCRIPT]
    )
    try:
        text = output.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.error("%s: %s", Constants.NODE_COMMAND, exc)
        sys.exit(ExitCodes.PROCESS_ERROR.value)
    return [line.strip() for line in text.splitlines() if line.strip()]


def guess(
    root: str = ".",
    builtins_provider: BuiltinsProvider = node_builtin_modules,
    patterns: Optional[Iterable[str]] = None,
) -> Set[str]:
    """Infer the packages a project imports by scanning its sources.

    Args:
        root: Project directory to scan.
        builtins_provider: Returns the host's built-in module names.
        patterns: Filename globs to scan (default: Constants.NODEJS_FILENAME_PATTERNS).

    Returns:
        set: Package names used by the sources, built-ins excluded.
    """
    if patterns is None:
        patterns = Constants.NODEJS_FILENAME_PATTERNS
    sources = iter_source_files(root, patterns)

    candidates = set()
    for specifier in extract_raw_specifiers(sources):
        name = normalize_specifier(specifier)
        if name is not None:
            candidates.add(name)

    pkgs = filter_builtins(candidates, builtins_provider())
    logger.debug("Guessed %d package(s) from %d candidate(s)", len(pkgs), len(candidates))
    return pkgs
