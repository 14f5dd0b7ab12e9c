"""Constants used in the project."""

import logging
import os
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    CONNECTION_ERROR = 2
    FILE_ERROR = 1
    EXIT_WARNINGS = 3
    PROCESS_ERROR = 4


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    REGISTRY_URL_NPM = "https://registry.npmjs.org/"
    NPM_SEARCH_PATH = "-/v1/search"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests

    YARN_COMMAND = "yarn"
    NODE_COMMAND = "node"
    # Prints every built-in module name of the running Node.js, one per line.
    NODE_BUILTINS_SCRIPT = """
require("module").builtinModules.map(x => console.log(x));
"""

    PACKAGE_JSON_FILE = "package.json"
    YARN_LOCK_FILE = "yarn.lock"
    NODEJS_FILENAME_PATTERNS = ["*.js", "*.ts", "*.jsx", "*.tsx"]
    IGNORED_DIRS = [
        "node_modules",
        ".git",
        ".hg",
        ".svn",
        "__pycache__",
        ".cache",
    ]

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "UPM_LOG_LEVEL"
    ENV_CONFIG = "UPM_CONFIG"
    ENV_REGISTRY_URL = "UPM_REGISTRY_URL"
    DEFAULT_CONFIG_PATHS = [
        "upm.yml",
        os.path.join("~", ".config", "upm", "upm.yml"),
    ]


# YAML keys accepted in upm.yml and the Constants attribute each one sets.
_CONFIG_KEYS = {
    "registry_url": ("REGISTRY_URL_NPM", str),
    "request_timeout": ("REQUEST_TIMEOUT", int),
    "yarn_command": ("YARN_COMMAND", str),
    "node_command": ("NODE_COMMAND", str),
}


def _find_config_path() -> Optional[str]:
    """Return the first existing config path, honoring $UPM_CONFIG first."""
    env_path = os.environ.get(Constants.ENV_CONFIG)
    candidates = [env_path] if env_path else []
    candidates.extend(Constants.DEFAULT_CONFIG_PATHS)
    for candidate in candidates:
        path = os.path.expanduser(candidate)
        if os.path.isfile(path):
            return path
    return None


def _load_yaml_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the YAML configuration mapping, or an empty dict if none applies.

    A missing file yields ``{}``. A malformed file is reported and ignored so
    that a broken config never blocks package operations.
    """
    import yaml  # pylint: disable=import-outside-toplevel

    path = path or _find_config_path()
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as fh:
            cfg = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Ignoring config file %s: %s", path, exc)
        return {}
    if not isinstance(cfg, dict):
        logger.warning("Ignoring config file %s: top level is not a mapping", path)
        return {}
    return cfg


def apply_config(cfg: Dict[str, Any]) -> None:
    """Apply config values onto Constants; the registry env var wins over YAML."""
    for key, (attr, cast) in _CONFIG_KEYS.items():
        if key not in cfg or cfg[key] is None:
            continue
        try:
            setattr(Constants, attr, cast(cfg[key]))
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid config value for %s: %r", key, cfg[key])

    env_registry = os.environ.get(Constants.ENV_REGISTRY_URL)
    if env_registry and env_registry.strip():
        Constants.REGISTRY_URL_NPM = env_registry.strip()

    if not Constants.REGISTRY_URL_NPM.endswith("/"):
        Constants.REGISTRY_URL_NPM += "/"
