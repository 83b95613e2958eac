import pytest

from cubraycaster.text import (
    color_needs_after_trim,
    is_in_char_set,
    is_space,
    needs_pre_trim,
    texture_needs_after_trim,
)


@pytest.mark.parametrize("c", ["\t", " ", "\v", "\f", "\r"])
def test_whitespace_characters(c):
    assert is_space(c) is True


@pytest.mark.parametrize("c", ["\n", "a", "1", "", "-"])
def test_non_whitespace_characters(c):
    assert is_space(c) is False


@pytest.mark.parametrize("c", list(" \t10NWES"))
def test_char_set_membership(c):
    assert is_in_char_set(c, " \t10NWES") is True


@pytest.mark.parametrize("c", ["x", "2", "", "10"])
def test_char_set_non_membership(c):
    assert is_in_char_set(c, " \t10NWES") is False


@pytest.mark.parametrize(
    "line",
    [
        "   F 20,20,20",
        "\tC 1,2,3",
        "  NO ./pics/redbrick.xpm",
        " SO x.xpm",
        " WE x.xpm",
        "\t\tEA x.xpm",
    ],
)
def test_needs_pre_trim_true(line):
    assert needs_pre_trim(line) is True


@pytest.mark.parametrize(
    "line",
    ["F 20,20,20", "NO ./pics/redbrick.xpm", "   111", "  N", "", "   "],
)
def test_needs_pre_trim_false(line):
    assert needs_pre_trim(line) is False


@pytest.mark.parametrize("line", ["F     20,20,20", "C 1,2,3", "F\t20,20,20"])
def test_color_needs_after_trim_true(line):
    assert color_needs_after_trim(line) is True


@pytest.mark.parametrize("line", ["F20,20,20", "F   ", "F", "NO x.xpm", ""])
def test_color_needs_after_trim_false(line):
    assert color_needs_after_trim(line) is False


@pytest.mark.parametrize(
    "line",
    ["NO\t\t./pics/redbrick.xpm", "SO  x.xpm", "WE\tx.xpm", "EA \t x.xpm"],
)
def test_texture_needs_after_trim_true(line):
    assert texture_needs_after_trim(line) is True


@pytest.mark.parametrize(
    "line",
    ["NO ./pics/redbrick.xpm", "NO\t\t", "SO", "F  1,2,3", "", "NOx.xpm"],
)
def test_texture_needs_after_trim_false(line):
    assert texture_needs_after_trim(line) is False


def test_single_space_texture_line_is_already_clean():
    line = "NO ./pics/redbrick.xpm"
    assert not needs_pre_trim(line)
    assert not texture_needs_after_trim(line)
    assert not color_needs_after_trim(line)