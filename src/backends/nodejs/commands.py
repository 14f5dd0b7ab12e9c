"""Yarn invocations for add/remove/lock/install."""

from __future__ import annotations

from typing import Iterable, Mapping

from constants import Constants
from common import process


def add(pkgs: Mapping[str, str]) -> None:
    """Run ``yarn add name@spec ...``; a package without a spec is added bare."""
    cmd = [Constants.YARN_COMMAND, "add"]
    for name, spec in pkgs.items():
        cmd.append(f"{name}@{spec}" if spec else name)
    process.run_cmd(cmd)


def remove(pkgs: Iterable[str]) -> None:
    cmd = [Constants.YARN_COMMAND, "remove"]
    cmd.extend(pkgs)
    process.run_cmd(cmd)


def lock() -> None:
    process.run_cmd([Constants.YARN_COMMAND, "upgrade"])


def install() -> None:
    process.run_cmd([Constants.YARN_COMMAND, "install"])
