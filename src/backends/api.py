"""Common contract shared by every language backend.

A backend is a plain value: metadata about the ecosystem's files plus the
callables implementing each operation. Deviations from the default call
sequence are declared through ``Quirks`` flags rather than subclassing, and
the dispatcher reads them to decide which follow-up calls to make.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Flag, auto
from typing import Callable, Dict, List, Mapping, Optional, Set

# Type aliases kept distinct for readability at call sites.
PkgName = str
PkgSpec = str
PkgVersion = str


class Quirks(Flag):
    """Capability flags describing how a backend deviates from the defaults."""

    NONE = 0
    # Installing the same lockfile twice may produce different results.
    NOT_REPRODUCIBLE = auto()
    # add/remove also update the lockfile.
    ADD_REMOVE_ALSO_LOCKS = auto()
    # add/remove also install into the project environment.
    ADD_REMOVE_ALSO_INSTALLS = auto()
    # lock also installs into the project environment.
    LOCK_ALSO_INSTALLS = auto()


@dataclass
class PkgInfo:
    """Registry metadata about one package."""

    name: str = ""
    description: str = ""
    version: str = ""
    homepage_url: str = ""
    source_code_url: str = ""
    bug_tracker_url: str = ""
    author: str = ""
    license: str = ""


def format_author(name: str = "", email: str = "", url: str = "") -> str:
    """Render author fields as ``Name <email> (url)``, omitting empty parts."""
    parts = []
    if name:
        parts.append(name)
    if email:
        parts.append(f"<{email}>")
    if url:
        parts.append(f"({url})")
    return " ".join(parts)


@dataclass
class LanguageBackend:  # pylint: disable=too-many-instance-attributes
    """One pluggable implementation of the package-manager contract."""

    name: str
    specfile: str
    lockfile: str
    filename_patterns: List[str]
    search: Callable[[str], List[PkgInfo]]
    info: Callable[[PkgName], PkgInfo]
    add: Callable[[Mapping[PkgName, PkgSpec]], None]
    remove: Callable[[Set[PkgName]], None]
    lock: Callable[[], None]
    install: Callable[[], None]
    list_specfile: Callable[[], Dict[PkgName, PkgSpec]]
    list_lockfile: Callable[[], Dict[PkgName, PkgVersion]]
    guess: Callable[[], Set[PkgName]]
    quirks: Quirks = Quirks.NONE

    def has_quirks(self, flags: Quirks) -> bool:
        """Return True if every flag in ``flags`` is declared by this backend."""
        return (self.quirks & flags) == flags


def plan_followups(backend: LanguageBackend, operation: str) -> List[str]:
    """Return the extra operations a dispatcher must run after ``operation``.

    ``operation`` is one of "add", "remove" or "lock". The result lists
    "lock" and/or "install" in call order, leaving out whatever the backend
    already performs implicitly according to its quirks.
    """
    if operation in ("add", "remove"):
        if backend.has_quirks(Quirks.ADD_REMOVE_ALSO_INSTALLS):
            return []
        if backend.has_quirks(Quirks.ADD_REMOVE_ALSO_LOCKS):
            return ["install"]
        return ["lock"] + plan_followups(backend, "lock")
    if operation == "lock":
        if backend.has_quirks(Quirks.LOCK_ALSO_INSTALLS):
            return []
        return ["install"]
    raise ValueError(f"Unknown operation: {operation}")


def describe_quirks(quirks: Quirks) -> List[str]:
    """Names of the individual flags set in ``quirks``, in declaration order."""
    return [
        member.name.lower()
        for member in Quirks
        if member is not Quirks.NONE and member.name and member in quirks
    ]


def optional_str(value: Optional[object]) -> str:
    """Coerce an optional JSON scalar to a display string."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
