"""Blocking helpers for running external programs (yarn, node).

Any failure to start a program, or a non-zero exit, ends the current command.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import sys
from typing import List

from constants import ExitCodes
from common.logging_utils import extra_context, is_debug_enabled, Timer

logger = logging.getLogger(__name__)


def run_cmd(cmd: List[str]) -> None:
    """Run ``cmd`` with inherited stdio, exiting if it cannot run or fails."""
    logger.info("--> %s", shlex.join(cmd))
    with Timer() as t:
        try:
            result = subprocess.run(cmd, check=False)  # noqa: S603
        except OSError as exc:
            logger.error("%s: %s", cmd[0], exc)
            sys.exit(ExitCodes.PROCESS_ERROR.value)

    if is_debug_enabled(logger):
        logger.debug(
            "Command finished",
            extra=extra_context(
                event="process_exit",
                component="process",
                action=cmd[0],
                status_code=result.returncode,
                duration_ms=t.duration_ms()
            )
        )
    if result.returncode != 0:
        logger.error("command failed: %s: exit status %d", shlex.join(cmd), result.returncode)
        sys.exit(ExitCodes.PROCESS_ERROR.value)


def get_cmd_output(cmd: List[str]) -> bytes:
    """Run ``cmd`` and return its stdout, exiting if it cannot run or fails."""
    if is_debug_enabled(logger):
        logger.debug(
            "Capturing command output",
            extra=extra_context(event="process_start", component="process", action=cmd[0])
        )
    try:
        result = subprocess.run(cmd, capture_output=True, check=False)  # noqa: S603
    except OSError as exc:
        logger.error("%s: %s", cmd[0], exc)
        sys.exit(ExitCodes.PROCESS_ERROR.value)

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        logger.error(
            "command failed: %s: exit status %d%s",
            shlex.join(cmd),
            result.returncode,
            f": {stderr}" if stderr else "",
        )
        sys.exit(ExitCodes.PROCESS_ERROR.value)
    return result.stdout
