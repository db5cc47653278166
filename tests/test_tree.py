import io
import os

import pytest

from dirvis.config import RGB, ColourTheme, Config
from dirvis.flags import Flags
from dirvis.tree import (
    build_path,
    colourise,
    count_visible_entries,
    indentation,
    is_hidden_folder,
    print_tree,
    render_tree,
)


def _theme_config():
    return Config(
        ColourTheme(
            directory=RGB(1, 1, 1),
            file=RGB(2, 2, 2),
            hidden=RGB(3, 3, 3),
            executable=RGB(4, 4, 4),
        )
    )


def test_colourise():
    assert colourise(RGB(1, 2, 3), "x") == "\033[38;2;1;2;3mx\033[0m"


@pytest.mark.parametrize(
    "directory,expected",
    [("a", "a/b"), ("a/", "a/b"), ("a\\", "a\\b")],
)
def test_build_path(directory, expected):
    assert build_path(directory, "b") == expected


def test_indentation():
    assert indentation(1, True) == "└── "
    assert indentation(1, False) == "├── "
    assert indentation(3, True) == "│   │   └── "
    assert indentation(0, True) == ""


def test_is_hidden_folder():
    assert is_hidden_folder(".git")
    assert not is_hidden_folder(".")
    assert not is_hidden_folder("..")
    assert not is_hidden_folder("src")


def test_count_visible_entries(tmp_path):
    (tmp_path / "a").write_text("")
    (tmp_path / ".b").write_text("")
    (tmp_path / "c").mkdir()
    assert count_visible_entries(str(tmp_path), Flags()) == 2
    assert count_visible_entries(str(tmp_path), Flags(show_hidden=True)) == 3


def test_count_missing_directory(tmp_path):
    assert count_visible_entries(str(tmp_path / "nope"), Flags()) == 0


def test_nested_tree_no_colour(tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "f.txt").write_text("")
    lines = list(render_tree(str(tmp_path), Flags(no_colour=True), Config()))
    assert lines == ["└── sub/", "│   └── f.txt"]


def test_max_depth_limits_recursion(tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "f.txt").write_text("")
    flags = Flags(no_colour=True, max_depth=1)
    assert list(render_tree(str(tmp_path), flags, Config())) == ["└── sub/"]


def test_hidden_entries(tmp_path):
    (tmp_path / ".hidden").write_text("")
    flags = Flags(no_colour=True)
    assert list(render_tree(str(tmp_path), flags, Config())) == []
    flags.show_hidden = True
    assert list(render_tree(str(tmp_path), flags, Config())) == ["└── .hidden"]


def test_only_last_entry_has_corner(tmp_path):
    for name in ("a", "b", "c"):
        (tmp_path / name).write_text("")
    lines = list(render_tree(str(tmp_path), Flags(no_colour=True), Config()))
    assert len(lines) == 3
    assert lines[-1].startswith("└── ")
    assert all(line.startswith("├── ") for line in lines[:-1])
    assert sorted(line[4:] for line in lines) == ["a", "b", "c"]


def test_missing_directory_reports_error(tmp_path):
    lines = list(render_tree(str(tmp_path / "nope"), Flags(), Config()))
    assert lines == ["└── [ERROR] Could not open directory"]


def test_broken_symlink_cannot_stat(tmp_path):
    os.symlink(tmp_path / "target", tmp_path / "link")
    lines = list(render_tree(str(tmp_path), Flags(no_colour=True), Config()))
    assert lines == ["└── link [ERROR: cannot stat]"]


def test_colours_by_kind(tmp_path):
    config = _theme_config()
    theme = config.colour_theme
    (tmp_path / "d").mkdir()
    lines = list(render_tree(str(tmp_path), Flags(), config))
    assert lines == ["└── " + colourise(theme.directory, "d") + "/"]


def test_executable_and_hidden_colours(tmp_path):
    config = _theme_config()
    theme = config.colour_theme
    run = tmp_path / "run"
    run.write_text("")
    run.chmod(0o755)
    (tmp_path / ".dot").write_text("")
    (tmp_path / "plain").write_text("")
    lines = list(render_tree(str(tmp_path), Flags(show_hidden=True), config))
    bodies = {line[4:] for line in lines}
    assert bodies == {
        colourise(theme.executable, "run"),
        colourise(theme.hidden, ".dot"),
        colourise(theme.file, "plain"),
    }


def test_print_tree_writes_rendered_lines(tmp_path):
    (tmp_path / "x").mkdir()
    (tmp_path / "x" / "y").write_text("")
    flags = Flags(no_colour=True)
    out = io.StringIO()
    print_tree(str(tmp_path), flags, Config(), out=out)
    expected = "".join(line + "\n" for line in render_tree(str(tmp_path), flags, Config()))
    assert out.getvalue() == expected
    assert out.getvalue().count("\n") == 2