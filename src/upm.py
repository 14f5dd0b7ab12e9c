"""upm - universal package manager, command-line dispatcher.

Selects a language backend, runs the requested operation, and issues the
follow-up lock/install calls that the backend's quirks leave to the caller.

    Returns:
        int: Exit code
"""
import json
import logging
import os
import sys
from dataclasses import asdict

from args import parse_args
from backends import get_backend
from backends.api import describe_quirks, plan_followups
from cli_config import apply_cli_overrides
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import Constants, ExitCodes

logger = logging.getLogger(__name__)


def parse_pkg_arg(token):
    """Split ``name@spec`` into (name, spec); the spec may be empty.

    A leading "@" belongs to a scoped name, so ``@types/node@^18`` gives
    ("@types/node", "^18") and ``@types/node`` gives ("@types/node", "").
    """
    at = token.rfind("@")
    if at <= 0:
        return token, ""
    return token[:at], token[at + 1:]


def _emit(args, payload, text_lines):
    if args.OUTPUT_FORMAT == "json":
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        for line in text_lines:
            print(line)


def _pkginfo_lines(pkg):
    fields = [
        ("Name", pkg.name),
        ("Description", pkg.description),
        ("Version", pkg.version),
        ("Homepage", pkg.homepage_url),
        ("Source code", pkg.source_code_url),
        ("Bug tracker", pkg.bug_tracker_url),
        ("Author", pkg.author),
        ("License", pkg.license),
    ]
    return [f"{label}: {value}" for label, value in fields if value]


def _run_followups(backend, operation, args):
    if getattr(args, "NO_INSTALL", False):
        return
    for step in plan_followups(backend, operation):
        logger.debug(
            "Follow-up operation",
            extra=extra_context(event="decision", component="cli", action=step, after=operation)
        )
        getattr(backend, step)()


def dispatch(backend, args):
    """Run the subcommand in ``args`` against ``backend``."""
    action = args.action
    if action == "search":
        results = backend.search(" ".join(args.QUERY))
        _emit(
            args,
            [asdict(r) for r in results],
            [f"{r.name} {r.version}  {r.description}".rstrip() for r in results],
        )
    elif action == "info":
        pkg = backend.info(args.PACKAGE)
        if not pkg.name:
            logger.error("package not found: %s", args.PACKAGE)
            return ExitCodes.FILE_ERROR.value
        _emit(args, asdict(pkg), _pkginfo_lines(pkg))
    elif action == "add":
        pkgs = dict(parse_pkg_arg(token) for token in args.PACKAGES)
        backend.add(pkgs)
        _run_followups(backend, "add", args)
    elif action == "remove":
        specfile = backend.list_specfile()
        pkgs = []
        for name in args.PACKAGES:
            if name in specfile:
                pkgs.append(name)
            else:
                logger.warning("%s is not declared in %s, skipping", name, backend.specfile)
        if not pkgs:
            return ExitCodes.SUCCESS.value
        backend.remove(set(pkgs))
        _run_followups(backend, "remove", args)
    elif action == "lock":
        backend.lock()
        _run_followups(backend, "lock", args)
    elif action == "install":
        backend.install()
    elif action == "list":
        pkgs = backend.list_lockfile() if args.LIST_LOCKFILE else backend.list_specfile()
        _emit(args, pkgs, [f"{name} {spec}" for name, spec in sorted(pkgs.items())])
    elif action == "guess":
        pkgs = backend.guess()
        if args.ONLY_MISSING and os.path.isfile(backend.specfile):
            pkgs = pkgs - set(backend.list_specfile())
        _emit(args, sorted(pkgs), sorted(pkgs))
    elif action == "quirks":
        names = describe_quirks(backend.quirks)
        _emit(args, names, names)
    else:
        logger.error("Unknown action: %s", action)
        return ExitCodes.FILE_ERROR.value
    return ExitCodes.SUCCESS.value


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging(getattr(args, "LOG_FILE", None))
    apply_cli_overrides(args)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action=args.action)
        )

    backend = get_backend(args.BACKEND)
    if backend is None:
        logger.error("Unknown language backend: %s", args.BACKEND)
        sys.exit(ExitCodes.FILE_ERROR.value)

    if args.PROJECT_DIR:
        try:
            os.chdir(args.PROJECT_DIR)
        except OSError as e:
            logger.error("%s: %s", args.PROJECT_DIR, e)
            sys.exit(ExitCodes.FILE_ERROR.value)

    sys.exit(dispatch(backend, args))


if __name__ == "__main__":
    main()
