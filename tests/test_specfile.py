"""Tests for package.json dependency listing."""

import json

import pytest

from backends.nodejs.specfile import list_specfile


def _write(tmp_path, content):
    path = tmp_path / "package.json"
    path.write_text(content if isinstance(content, str) else json.dumps(content, indent=2))
    return str(path)


class TestListSpecfile:
    """list_specfile merges dependency groups."""

    def test_dev_dependencies_override_runtime(self, tmp_path):
        path = _write(tmp_path, {
            "name": "demo",
            "dependencies": {"a": "^1.0.0"},
            "devDependencies": {"a": "^2.0.0", "b": "^1.0.0"},
        })
        assert list_specfile(path) == {"a": "^2.0.0", "b": "^1.0.0"}

    def test_missing_groups_give_empty_mapping(self, tmp_path):
        path = _write(tmp_path, {"name": "demo", "version": "1.0.0"})
        assert list_specfile(path) == {}

    def test_null_group_is_treated_as_empty(self, tmp_path):
        path = _write(tmp_path, {"dependencies": None, "devDependencies": {"jest": "^29.0.0"}})
        assert list_specfile(path) == {"jest": "^29.0.0"}

    def test_reads_cwd_by_default(self, tmp_path, monkeypatch):
        _write(tmp_path, {"dependencies": {"@types/node": "^18.0.0"}})
        monkeypatch.chdir(tmp_path)
        assert list_specfile() == {"@types/node": "^18.0.0"}

    def test_missing_file_is_fatal(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            list_specfile(str(tmp_path / "package.json"))
        assert exc_info.value.code == 1

    @pytest.mark.parametrize("content", [
        "{not json",
        "[]",
        json.dumps({"dependencies": ["a", "b"]}),
        json.dumps({"devDependencies": {"a": 1}}),
    ])
    def test_malformed_manifest_is_fatal(self, tmp_path, content):
        path = _write(tmp_path, content)
        with pytest.raises(SystemExit) as exc_info:
            list_specfile(path)
        assert exc_info.value.code == 1
