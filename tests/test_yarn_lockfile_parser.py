"""Tests for yarn.lock pin extraction."""

import pytest

from backends.nodejs.lockfile_parser import extract_pins, list_lockfile


YARN_LOCK = '''# THIS IS AN AUTOGENERATED FILE. DO NOT EDIT THIS FILE DIRECTLY.
# yarn lockfile v1


"@babel/code-frame@^7.0.0", "@babel/code-frame@^7.10.4":
  version "7.12.13"
  resolved "https://registry.yarnpkg.com/@babel/code-frame/-/code-frame-7.12.13.tgz"
  dependencies:
    "@babel/highlight" "^7.12.13"

js-tokens@^4.0.0:
  version "4.0.0"
  resolved "https://registry.yarnpkg.com/js-tokens/-/js-tokens-4.0.0.tgz"

loose-envify@^1.1.0, loose-envify@^1.4.0:
  version "1.4.0"
  resolved "https://registry.yarnpkg.com/loose-envify/-/loose-envify-1.4.0.tgz"
'''


class TestExtractPins:
    """extract_pins over lockfile text."""

    def test_quoted_alias_lists(self):
        text = (
            '"left-pad@^1.0.0":\n  version "1.3.0"\n\n'
            '"right-pad@^1.0.0", "right-pad@^1.1.0":\n  version "1.1.0"'
        )
        assert extract_pins(text) == {"left-pad": "1.3.0", "right-pad": "1.1.0"}

    def test_real_lockfile_layout(self):
        pins = extract_pins(YARN_LOCK)
        assert pins == {
            "@babel/code-frame": "7.12.13",
            "js-tokens": "4.0.0",
            "loose-envify": "1.4.0",
        }

    def test_last_block_wins(self):
        text = 'a@^1.0.0:\n  version "1.0.0"\n\na@^2.0.0:\n  version "2.1.0"\n'
        assert extract_pins(text) == {"a": "2.1.0"}

    def test_malformed_blocks_are_skipped(self):
        text = (
            'broken@^1.0.0:\n  resolved "https://example.invalid/broken.tgz"\n\n'
            'no-colon@^1.0.0\n  version "1.0.0"\n\n'
            'ok@^1.0.0:\n  version "1.0.1"\n'
        )
        assert extract_pins(text) == {"ok": "1.0.1"}

    def test_empty_text(self):
        assert extract_pins("") == {}


class TestListLockfile:
    """list_lockfile reads yarn.lock from disk."""

    def test_reads_file(self, tmp_path):
        lock = tmp_path / "yarn.lock"
        lock.write_text(YARN_LOCK)
        assert list_lockfile(str(lock))["js-tokens"] == "4.0.0"

    def test_default_path_is_cwd_yarn_lock(self, tmp_path, monkeypatch):
        (tmp_path / "yarn.lock").write_text('x@^1:\n  version "1.2.3"\n')
        monkeypatch.chdir(tmp_path)
        assert list_lockfile() == {"x": "1.2.3"}

    def test_missing_file_is_fatal(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            list_lockfile(str(tmp_path / "yarn.lock"))
        assert exc_info.value.code == 1
