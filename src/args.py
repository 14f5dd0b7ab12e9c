"""Argument parsing functionality for upm."""

import argparse

from backends import DEFAULT_BACKEND, backend_names


def _add_common_options(parser):
    """Options accepted by every subcommand."""
    parser.add_argument("-l", "--lang",
                        dest="BACKEND",
                        help="Language backend to use",
                        action="store", type=str,
                        choices=backend_names(),
                        default=DEFAULT_BACKEND)
    parser.add_argument("-C", "--directory",
                        dest="PROJECT_DIR",
                        help="Project directory (default: current directory)",
                        action="store", type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (text or json)",
                        action="store",
                        type=str.lower,
                        choices=["text", "json"],
                        default="text")
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        default=None)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to a YAML configuration file",
                        action="store",
                        type=str)
    parser.add_argument("--registry-url",
                        dest="REGISTRY_URL",
                        help="Override the package registry base URL",
                        action="store",
                        type=str)
    parser.add_argument("--timeout",
                        dest="REQUEST_TIMEOUT",
                        help="HTTP request timeout in seconds",
                        action="store",
                        type=int)


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="upm",
        description="upm - universal package manager (Node.js/Yarn backend)",
        add_help=True,
    )
    subparsers = parser.add_subparsers(dest="action", required=True)

    search = subparsers.add_parser("search", help="Search the registry for packages")
    search.add_argument("QUERY", nargs="+", help="Search terms")

    info = subparsers.add_parser("info", help="Show registry metadata for a package")
    info.add_argument("PACKAGE", help="Package name")

    add = subparsers.add_parser("add", help="Add packages to the specfile")
    add.add_argument("PACKAGES", nargs="+", help="Packages as NAME or NAME@SPEC")

    remove = subparsers.add_parser("remove", help="Remove packages from the specfile")
    remove.add_argument("PACKAGES", nargs="+", help="Package names")

    lock = subparsers.add_parser("lock", help="Regenerate the lockfile")
    install = subparsers.add_parser("install", help="Install packages from the lockfile")

    list_cmd = subparsers.add_parser("list", help="List declared or locked packages")
    list_cmd.add_argument("-a", "--all",
                          dest="LIST_LOCKFILE",
                          help="List every locked package instead of the specfile",
                          action="store_true")

    guess = subparsers.add_parser("guess", help="Guess dependencies from source imports")
    guess.add_argument("--only-missing",
                       dest="ONLY_MISSING",
                       help="Only print guessed packages absent from the specfile",
                       action="store_true")

    quirks = subparsers.add_parser("quirks", help="Show the backend's declared quirks")

    for sub in (add, remove, lock):
        sub.add_argument("--no-install",
                         dest="NO_INSTALL",
                         help="Do not install after changing the specfile or lockfile",
                         action="store_true")

    for sub in (search, info, add, remove, lock, install, list_cmd, guess, quirks):
        _add_common_options(sub)

    return parser.parse_args(argv)
