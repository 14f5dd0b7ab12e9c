"""NPM registry client: text search and single-package metadata."""

from __future__ import annotations

import logging
from typing import Any, Dict, List
from urllib.parse import quote_plus

from constants import Constants
from common import http_client
from backends.api import PkgInfo, format_author, optional_str
from versioning.selector import select_latest

logger = logging.getLogger(__name__)

CONTEXT = "NPM registry"


def _obj(value: Any) -> Dict[str, Any]:
    """Treat a missing or non-object JSON field as an empty object."""
    return value if isinstance(value, dict) else {}


def search(query: str) -> List[PkgInfo]:
    """Search the registry for packages matching ``query``.

    See https://github.com/npm/registry/blob/master/docs/REGISTRY-API.md
    for the response format.
    """
    url = f"{Constants.REGISTRY_URL_NPM}{Constants.NPM_SEARCH_PATH}?text={quote_plus(query)}"
    document = http_client.get_json_document(url, context=CONTEXT)

    results = []
    objects = document.get("objects")
    for entry in objects if isinstance(objects, list) else []:
        pkg = _obj(_obj(entry).get("package"))
        links = _obj(pkg.get("links"))
        author = _obj(pkg.get("author"))
        results.append(
            PkgInfo(
                name=optional_str(pkg.get("name")),
                description=optional_str(pkg.get("description")),
                version=optional_str(pkg.get("version")),
                homepage_url=optional_str(links.get("homepage")),
                source_code_url=optional_str(links.get("repository")),
                bug_tracker_url=optional_str(links.get("bugs")),
                author=format_author(
                    name=optional_str(author.get("username")),
                    email=optional_str(author.get("email")),
                ),
            )
        )
    logger.debug("NPM search for %r returned %d result(s)", query, len(results))
    return results


def info(name: str) -> PkgInfo:
    """Look up one package; ``version`` is its newest stable release."""
    url = f"{Constants.REGISTRY_URL_NPM}{quote_plus(name)}"
    document = http_client.get_json_document(url, context=CONTEXT)

    versions = _obj(document.get("versions"))
    latest = select_latest(versions.keys()) or ""
    author = _obj(document.get("author"))

    return PkgInfo(
        name=optional_str(document.get("name")),
        description=optional_str(document.get("description")),
        version=latest,
        homepage_url=optional_str(document.get("homepage")),
        source_code_url=optional_str(_obj(document.get("repository")).get("url")),
        bug_tracker_url=optional_str(_obj(document.get("bugs")).get("url")),
        author=format_author(
            name=optional_str(author.get("name")),
            email=optional_str(author.get("email")),
            url=optional_str(author.get("url")),
        ),
        license=optional_str(document.get("license")),
    )
