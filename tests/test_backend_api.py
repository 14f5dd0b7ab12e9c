"""Tests for the backend contract: quirks, follow-up planning, registry."""

import dataclasses
from dataclasses import replace

import pytest

from backends import BACKENDS, get_backend
from backends.api import PkgInfo, Quirks, describe_quirks, format_author, plan_followups
from backends.nodejs import NODEJS_YARN_BACKEND


class TestNodejsBackend:
    """Declared metadata of the Node.js/Yarn backend."""

    def test_metadata(self):
        assert NODEJS_YARN_BACKEND.name == "nodejs-yarn"
        assert NODEJS_YARN_BACKEND.specfile == "package.json"
        assert NODEJS_YARN_BACKEND.lockfile == "yarn.lock"
        assert NODEJS_YARN_BACKEND.filename_patterns == ["*.js", "*.ts", "*.jsx", "*.tsx"]

    def test_quirks(self):
        assert NODEJS_YARN_BACKEND.has_quirks(Quirks.ADD_REMOVE_ALSO_INSTALLS)
        assert NODEJS_YARN_BACKEND.has_quirks(Quirks.LOCK_ALSO_INSTALLS)
        assert not NODEJS_YARN_BACKEND.has_quirks(Quirks.NOT_REPRODUCIBLE)

    def test_no_redundant_install(self):
        assert plan_followups(NODEJS_YARN_BACKEND, "add") == []
        assert plan_followups(NODEJS_YARN_BACKEND, "remove") == []
        assert plan_followups(NODEJS_YARN_BACKEND, "lock") == []

    def test_registry_lookup(self):
        assert get_backend("nodejs-yarn") is NODEJS_YARN_BACKEND
        assert get_backend() is NODEJS_YARN_BACKEND
        assert get_backend("cobol") is None
        assert "nodejs-yarn" in BACKENDS


class TestPlanFollowups:
    """Follow-up sequencing for other quirk combinations."""

    def test_no_quirks_locks_then_installs(self):
        backend = replace(NODEJS_YARN_BACKEND, quirks=Quirks.NONE)
        assert plan_followups(backend, "add") == ["lock", "install"]
        assert plan_followups(backend, "lock") == ["install"]

    def test_add_also_locks(self):
        backend = replace(NODEJS_YARN_BACKEND, quirks=Quirks.ADD_REMOVE_ALSO_LOCKS)
        assert plan_followups(backend, "remove") == ["install"]

    def test_lock_also_installs_only(self):
        backend = replace(NODEJS_YARN_BACKEND, quirks=Quirks.LOCK_ALSO_INSTALLS)
        assert plan_followups(backend, "add") == ["lock"]

    def test_unknown_operation(self):
        with pytest.raises(ValueError):
            plan_followups(NODEJS_YARN_BACKEND, "install")


class TestHelpers:
    """Small formatting helpers."""

    def test_describe_quirks(self):
        assert describe_quirks(NODEJS_YARN_BACKEND.quirks) == [
            "add_remove_also_installs",
            "lock_also_installs",
        ]
        assert describe_quirks(Quirks.NONE) == []

    @pytest.mark.parametrize("fields, expected", [
        ({"name": "Ada", "email": "ada@example.com", "url": "https://ada.dev"},
         "Ada <ada@example.com> (https://ada.dev)"),
        ({"name": "Ada"}, "Ada"),
        ({"email": "ada@example.com"}, "<ada@example.com>"),
        ({}, ""),
    ])
    def test_format_author(self, fields, expected):
        assert format_author(**fields) == expected

    def test_pkginfo_defaults(self):
        pkg = PkgInfo(name="x")
        assert pkg.version == ""
        assert pkg.license == ""

    def test_pkginfo_fields_are_registry_backed(self):
        assert [f.name for f in dataclasses.fields(PkgInfo)] == [
            "name", "description", "version", "homepage_url",
            "source_code_url", "bug_tracker_url", "author", "license",
        ]
