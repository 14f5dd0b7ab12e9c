"""CLI configuration overrides for runtime tunables.

Precedence, lowest to highest: built-in Constants, YAML config file,
environment variables, command-line flags.
"""

from __future__ import annotations

import logging

from constants import Constants, _load_yaml_config, apply_config

logger = logging.getLogger(__name__)


def apply_cli_overrides(args) -> None:
    """Load the YAML config named by ``--config`` (or the default locations),
    then apply CLI flags on top."""
    cfg = _load_yaml_config(getattr(args, "CONFIG", None))
    apply_config(cfg)

    registry_url = getattr(args, "REGISTRY_URL", None)
    if registry_url:
        Constants.REGISTRY_URL_NPM = registry_url if registry_url.endswith("/") else registry_url + "/"

    timeout = getattr(args, "REQUEST_TIMEOUT", None)
    if timeout is not None:
        if timeout > 0:
            Constants.REQUEST_TIMEOUT = timeout
        else:
            logger.warning("Ignoring non-positive --timeout %s", timeout)

    logger.debug("Using registry %s", Constants.REGISTRY_URL_NPM)
