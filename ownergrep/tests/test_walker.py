from ownergrep.core.ignore import IgnoreMatcher
from ownergrep.core.walker import walk_files


def _rel(paths, root):
    return sorted(p.relative_to(root).as_posix() for p in paths)


def test_walk_collects_all_files(make_tree):
    root = make_tree({"a.txt": "", "sub/b.txt": "", "sub/deep/c.txt": ""})
    files = walk_files(root, IgnoreMatcher([], root))
    assert _rel(files, root) == ["a.txt", "sub/b.txt", "sub/deep/c.txt"]


def test_walk_prunes_ignored_entries(make_tree):
    root = make_tree(
        {
            "src/a.js": "",
            "src/a.test.js": "",
            "src/node_modules/lib/index.js": "",
            "src/app.log": "",
        }
    )
    matcher = IgnoreMatcher(["node_modules", "*.test.js", "*.log"], root)
    files = walk_files(root / "src", matcher)
    assert _rel(files, root) == ["src/a.js"]


def test_walk_empty_directory(tmp_path):
    (tmp_path / "empty").mkdir()
    assert walk_files(tmp_path / "empty", IgnoreMatcher([], tmp_path)) == []


def test_unlistable_subdirectory_is_skipped(make_tree, monkeypatch, log_messages):
    root = make_tree({"src/a.js": "", "src/locked/secret.js": "", "src/open/b.js": ""})
    path_cls = type(root)
    original = path_cls.iterdir

    def iterdir(self):
        if self.name == "locked":
            raise PermissionError(13, "Permission denied")
        return original(self)

    monkeypatch.setattr(path_cls, "iterdir", iterdir)
    files = walk_files(root / "src", IgnoreMatcher([], root))
    assert _rel(files, root) == ["src/a.js", "src/open/b.js"]
    assert any(m.startswith("WARNING Could not list directory") and "locked" in m for m in log_messages)


def test_untraversable_entry_does_not_drop_siblings(make_tree, monkeypatch, log_messages):
    root = make_tree({"src/a.js": "", "src/noexec/c.js": "", "src/z.js": ""})
    path_cls = type(root)
    original = path_cls.is_dir

    def is_dir(self, *args, **kwargs):
        if self.name == "noexec":
            raise PermissionError(13, "Permission denied")
        return original(self, *args, **kwargs)

    monkeypatch.setattr(path_cls, "is_dir", is_dir)
    files = walk_files(root / "src", IgnoreMatcher([], root))
    assert _rel(files, root) == ["src/a.js", "src/z.js"]
    assert any("noexec" in m for m in log_messages if m.startswith("WARNING"))
