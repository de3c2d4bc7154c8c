import pytest

from ownergrep.core.exceptions import FileReadError, IgnoreFileError
from ownergrep.core.ignore import IgnoreMatcher
from ownergrep.core.searcher import file_contains, search_path


def _no_ignores(root):
    return lambda: IgnoreMatcher([], root)


def test_file_contains_is_case_insensitive(tmp_path):
    upper = tmp_path / "upper.txt"
    upper.write_text("# TODO: fix this")
    lower = tmp_path / "lower.txt"
    lower.write_text("todo later")
    assert file_contains(upper, "todo")
    assert file_contains(lower, "TODO")
    assert not file_contains(lower, "fixme")


def test_file_contains_missing_file_raises(tmp_path):
    with pytest.raises(FileReadError):
        file_contains(tmp_path / "gone.txt", "x")


def test_search_single_file_skips_ignore_rules(make_tree):
    root = make_tree({"src/a.test.js": "TODO"})

    def factory():
        raise AssertionError("ignore rules are only needed for directories")

    assert search_path("src/a.test.js", "todo", root, factory) == ["src/a.test.js"]


def test_search_directory(make_tree):
    root = make_tree({"src/a.js": "TODO", "src/b.js": "done", "src/lib/c.js": "todo!"})
    matches = search_path("src/", "TODO", root, _no_ignores(root))
    assert sorted(matches) == ["src/a.js", "src/lib/c.js"]


def test_search_directory_applies_ignore_rules(make_tree):
    root = make_tree({"src/a.js": "TODO", "src/a.test.js": "TODO"})
    matches = search_path("src", "TODO", root, lambda: IgnoreMatcher(["*.test.js"], root))
    assert matches == ["src/a.js"]


def test_search_leading_slash_is_relative_to_root(make_tree):
    root = make_tree({"docs/readme.md": "TODO"})
    assert search_path("/docs", "todo", root, _no_ignores(root)) == ["docs/readme.md"]


def test_missing_path_logs_warning(tmp_path, log_messages):
    assert search_path("nope/", "x", tmp_path, _no_ignores(tmp_path)) == []
    assert any(m.startswith("WARNING") and "does not exist" in m for m in log_messages)


def test_unreadable_file_is_skipped(make_tree, monkeypatch, log_messages):
    root = make_tree({"src/good.txt": "needle", "src/bad.txt": "needle"})
    original = type(root).read_text

    def flaky_read_text(self, *args, **kwargs):
        if self.name == "bad.txt":
            raise PermissionError(13, "Permission denied")
        return original(self, *args, **kwargs)

    monkeypatch.setattr(type(root), "read_text", flaky_read_text)
    assert search_path("src", "needle", root, _no_ignores(root)) == ["src/good.txt"]
    assert any("Could not read file" in m and "bad.txt" in m for m in log_messages)


def test_ignore_file_error_propagates(make_tree):
    root = make_tree({"src/a.js": "TODO"})

    def factory():
        raise IgnoreFileError(root / ".gitignore", reason="No such file or directory")

    with pytest.raises(IgnoreFileError):
        search_path("src", "TODO", root, factory)
