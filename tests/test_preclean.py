from cubraycaster.preclean import clean_line, pre_clean


def test_clean_line_color():
    assert clean_line("F     20,20,20") == "F 20,20,20"


def test_clean_line_texture_with_tabs():
    assert clean_line("NO\t\t./pics/redbrick.xpm") == "NO ./pics/redbrick.xpm"


def test_clean_line_is_idempotent():
    once = clean_line("C \t  20,20,20")
    assert clean_line(once) == once


def test_clean_line_keeps_spaces_inside_data():
    line = clean_line("C   1, 2, 3")
    assert line.startswith("C ")
    assert line[2:] == "1, 2, 3"


def test_pre_clean_normalises_header():
    lines = [
        "   NO   ./pics/redbrick.xpm  ",
        "\tF     20,20,20",
        "SO ./pics/redbrick.xpm",
    ]
    assert pre_clean(lines) == [
        "NO ./pics/redbrick.xpm",
        "F 20,20,20",
        "SO ./pics/redbrick.xpm",
    ]


def test_pre_clean_leaves_map_lines_alone():
    lines = ["  111", " 1N1", "  111", ""]
    assert pre_clean(lines) == lines


def test_pre_clean_keeps_line_count_and_input():
    lines = ["  C\t20,20,20", "WE\t./pics/redbrick.xpm", "111"]
    copy = list(lines)
    result = pre_clean(lines)
    assert len(result) == len(lines)
    assert lines == copy
    assert result[0] == "C 20,20,20"
    assert result[1] == "WE ./pics/redbrick.xpm"


def test_pre_clean_is_stable():
    lines = ["   EA \t ./pics/redbrick.xpm", " F  1,2,3", "1111"]
    once = pre_clean(lines)
    assert pre_clean(once) == once