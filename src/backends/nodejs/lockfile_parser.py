"""yarn.lock parsing: pinned version per package.

Yarn v1 lockfiles are a sequence of blocks such as::

    "left-pad@^1.0.0", "left-pad@^1.1.0":
      version "1.3.0"
      resolved "https://registry.yarnpkg.com/left-pad/-/left-pad-1.3.0.tgz"

Only the header line and the ``version`` line directly below it matter here.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Dict

from constants import Constants, ExitCodes

logger = logging.getLogger(__name__)

# Group 1: first package name on the header line (scoped names keep their "@").
# Group 2: the pinned version on the following line.
_BLOCK_RE = re.compile(r'^"?(@?[^@ \n]+).+:\n  version "(.+)"$', re.MULTILINE)


def extract_pins(lock_text: str) -> Dict[str, str]:
    """Map each package named in ``lock_text`` to its pinned version.

    Blocks that do not fit the expected shape are skipped. When a name occurs
    in more than one block, the last block wins.
    """
    pins: Dict[str, str] = {}
    for match in _BLOCK_RE.finditer(lock_text):
        pins[match.group(1)] = match.group(2)
    return pins


def list_lockfile(lockfile_path: str = Constants.YARN_LOCK_FILE) -> Dict[str, str]:
    """Read ``yarn.lock`` and return its pinned versions; unreadable is fatal."""
    try:
        with open(lockfile_path, "r", encoding="utf-8") as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("%s: %s", Constants.YARN_LOCK_FILE, e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    pins = extract_pins(contents)
    logger.debug("Parsed %d pinned package(s) from %s", len(pins), lockfile_path)
    return pins
