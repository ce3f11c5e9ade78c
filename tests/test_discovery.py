"""Tests for source discovery."""

from gobundle.discovery import is_excluded, walk_sources


def _touch(path, text="package x\n"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_walk_order_and_exclusions(tmp_path):
    for name in ["b.go", "a.go", "notes.txt", "sub/c.go", "sub/deeper/d.go", "vendor/v.go", "testdata/t.go"]:
        _touch(tmp_path / name)

    paths = [rel for rel, _ in walk_sources(tmp_path)]

    assert paths == ["a.go", "b.go", "sub/c.go", "sub/deeper/d.go"]


def test_custom_exclusions(tmp_path):
    for name in ["main.go", "internal/gen/z.go", "internal/keep.go"]:
        _touch(tmp_path / name)

    paths = [rel for rel, _ in walk_sources(tmp_path, ["internal/gen"])]

    assert paths == ["internal/keep.go", "main.go"]


def test_is_excluded_prefix_match():
    assert is_excluded("vendor/a.go", ["vendor"])
    assert not is_excluded("pkg/vendor/a.go", ["vendor"])
    assert not is_excluded("a.go", [""])
