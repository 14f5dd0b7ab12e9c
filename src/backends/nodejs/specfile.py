"""package.json reading: declared dependencies and their version specs."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict

from constants import Constants, ExitCodes

logger = logging.getLogger(__name__)

DEPENDENCY_GROUPS = ("dependencies", "devDependencies")


def _fail(message: Any) -> None:
    logger.error("%s: %s", Constants.PACKAGE_JSON_FILE, message)
    sys.exit(ExitCodes.FILE_ERROR.value)


def _string_map(group: str, value: Any) -> Dict[str, str]:
    """Validate one dependency group as an object of string specs."""
    if value is None:
        return {}
    if not isinstance(value, dict) or not all(isinstance(v, str) for v in value.values()):
        _fail(f"{group} must map package names to version strings")
    return value


def list_specfile(package_json_path: str = Constants.PACKAGE_JSON_FILE) -> Dict[str, str]:
    """Return the merged runtime and development dependencies of package.json.

    A package listed in both groups takes its devDependencies spec. An
    unreadable or malformed package.json is fatal.
    """
    try:
        with open(package_json_path, "r", encoding="utf-8") as file:
            body = file.read()
    except (OSError, UnicodeDecodeError) as e:
        _fail(e)
    try:
        cfg = json.loads(body)
    except json.JSONDecodeError as e:
        _fail(e)
    if not isinstance(cfg, dict):
        _fail("top level must be a JSON object")

    pkgs: Dict[str, str] = {}
    for group in DEPENDENCY_GROUPS:
        pkgs.update(_string_map(group, cfg.get(group)))
    return pkgs
