"""Pick the newest stable release out of a registry's version list."""

from typing import Iterable, Optional

import semantic_version


def select_latest(version_labels: Iterable[str]) -> Optional[str]:
    """Return the highest non-prerelease version label, or None.

    Labels that are not valid semantic versions are skipped, as are
    pre-releases such as ``2.0.0-beta``.

    Args:
        version_labels: Version strings as published by the registry.

    Returns:
        The winning label as given, or None when nothing qualifies.
    """
    latest_label: Optional[str] = None
    latest: Optional[semantic_version.Version] = None
    for label in version_labels:
        try:
            version = semantic_version.Version(label)
        except (ValueError, TypeError):
            continue
        if version.prerelease:
            continue
        if latest is None or version > latest:
            latest, latest_label = version, label
    return latest_label
