"""Shared HTTP helpers used by the registry clients.

Encapsulates request/timeout error handling so backend modules avoid
duplicating try/except blocks. Transport failures are fatal for the current
command: the helpers log the underlying error and exit.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict

import requests

from constants import Constants, ExitCodes
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


def safe_get(url: str, *, context: str, **kwargs: Any) -> requests.Response:
    """GET ``url`` with the configured timeout; transport failures are fatal.

    One DEBUG record is emitted per request, after it completes, carrying
    the status code and elapsed time. ``context`` names the remote service
    in error messages (e.g. "NPM registry").
    """
    kwargs.setdefault("timeout", Constants.REQUEST_TIMEOUT)
    try:
        with Timer() as t:
            res = requests.get(url, **kwargs)
    except requests.Timeout:
        logger.error("%s: no response within %s seconds", context, kwargs["timeout"])
        sys.exit(ExitCodes.CONNECTION_ERROR.value)
    except requests.RequestException as exc:
        logger.error("%s: %s", context, exc)
        sys.exit(ExitCodes.CONNECTION_ERROR.value)

    if is_debug_enabled(logger):
        logger.debug(
            "GET %s -> %s", safe_url(url), res.status_code,
            extra=extra_context(
                event="http_response",
                component="http_client",
                status_code=res.status_code,
                duration_ms=t.duration_ms(),
                context=context
            )
        )
    return res


def get_json_document(url: str, *, context: str, **kwargs: Any) -> Dict[str, Any]:
    """GET ``url`` and decode its body as a JSON object.

    Non-2xx statuses are logged and the body is still decoded, since the
    registry answers errors with JSON as well. A body that is not a JSON
    object is fatal.

    Args:
        url: Target URL.
        context: Human-readable source tag for logs (e.g., "NPM registry").
        **kwargs: Passed through to requests.get.

    Returns:
        dict: The decoded document.
    """
    res = safe_get(url, context=context, **kwargs)
    if not 200 <= res.status_code < 300:
        logger.warning(
            "HTTP non-2xx handled",
            extra=extra_context(
                event="http_response",
                outcome="handled_non_2xx",
                status_code=res.status_code,
                target=safe_url(url),
                context=context
            )
        )

    try:
        document = json.loads(res.text)
    except (json.JSONDecodeError, TypeError, ValueError) as exc:
        logger.error("%s: %s", context, exc)
        sys.exit(ExitCodes.CONNECTION_ERROR.value)

    if not isinstance(document, dict):
        logger.error("%s: expected a JSON object, got %s", context, type(document).__name__)
        sys.exit(ExitCodes.CONNECTION_ERROR.value)
    return document
