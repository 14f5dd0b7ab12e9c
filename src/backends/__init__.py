"""Language backends available to the dispatcher, keyed by name."""

from typing import Dict, List, Optional

from backends.api import LanguageBackend
from backends.nodejs import NODEJS_YARN_BACKEND

BACKENDS: Dict[str, LanguageBackend] = {
    NODEJS_YARN_BACKEND.name: NODEJS_YARN_BACKEND,
}

DEFAULT_BACKEND = NODEJS_YARN_BACKEND.name


def get_backend(name: Optional[str] = None) -> Optional[LanguageBackend]:
    """Return the backend registered under ``name`` (default backend if None)."""
    return BACKENDS.get(name or DEFAULT_BACKEND)


def backend_names() -> List[str]:
    return sorted(BACKENDS)
