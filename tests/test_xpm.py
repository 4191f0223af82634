import pytest

from fractol.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    color_value,
    load_xpm,
    parse_xpm_lines,
    parse_xpm_source,
    split_words,
    strip_comments,
)

SIMPLE_LINES = ["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"]

SIMPLE_SOURCE = """/* XPM */
static char *simple[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
"a c #FF0000", // red
"b c None",
/* pixels */
"ab",
"ba"
};
"""


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb") == ["a\nb"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_block_comment_keeps_length():
    text = '/* XPM */\n"a"'
    result = strip_comments(text)
    assert result == " " * len("/* XPM */") + '\n"a"'
    assert len(result) == len(text)


def test_strip_comments_leaves_quoted_text():
    text = '"/* x */" "// y"'
    assert strip_comments(text) == text


def test_strip_line_comment_with_newline():
    text = "x // y\nz"
    assert strip_comments(text) == "x " + " " * len("// y\n") + "z"


def test_strip_unterminated_block_comment():
    assert strip_comments('"a" /* open') == '"a" ' + " " * len("/* open")


def test_color_value_hex():
    assert color_value("#FF0000") == 0xFF0000
    assert color_value("#ff8000", None) == 0xFF8000


def test_color_value_names():
    assert color_value("white") == 0xFFFFFF
    assert color_value("light", "grey") == 0xD3D3D3
    assert color_value("None") == -1


def test_color_value_unknown_is_zero():
    assert color_value("nosuchcolour") == 0
    assert color_value("white", "s") == 0


def test_color_value_wide_hex_wraps_to_no_color():
    assert color_value("#FFFFFFFF") == -1


def test_parse_lines_simple():
    image = parse_xpm_lines(SIMPLE_LINES)
    assert image == XpmImage(
        2, 2, ((0xFF0000, TRANSPARENT), (TRANSPARENT, 0xFF0000))
    )


def test_parse_two_chars_per_pixel():
    image = parse_xpm_lines(["1 1 1 2", "xy c #00FF00", "xy"])
    assert image.pixels == ((0x00FF00,),)


def test_unknown_pixel_key_is_zero():
    image = parse_xpm_lines(["2 1 1 1", "a c #0000FF", "az"])
    assert image.pixels == ((0x0000FF, 0),)


def test_duplicate_keys_wide_first_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixels == ((0x000001,),)


def test_duplicate_keys_narrow_last_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixels == ((0x000002,),)


def test_dimensions_match_pixels():
    image = parse_xpm_lines(["3 2 1 1", "a c black", "aaa", "aaa"])
    assert (image.width, image.height) == (3, 2)
    assert len(image.pixels) == image.height
    assert all(len(row) == image.width for row in image.pixels)


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1", "a c black", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a s foo", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c black", "a"],
        ["2 1 1 1", "a c black", "a"],
        ["1 1 1 2", "a", "aa"],
    ],
)
def test_malformed_lines_raise(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_xpm_error_is_value_error():
    with pytest.raises(ValueError):
        parse_xpm_lines(["x y z w"])


def test_parse_source_matches_lines():
    assert parse_xpm_source(SIMPLE_SOURCE) == parse_xpm_lines(SIMPLE_LINES)


def test_parse_source_missing_rows():
    with pytest.raises(XpmError):
        parse_xpm_source('"2 2 1 1",\n"a c black",\n"aa"')


def test_load_xpm(tmp_path):
    path = tmp_path / "simple.xpm"
    path.write_text(SIMPLE_SOURCE, encoding="latin-1")
    assert load_xpm(path) == parse_xpm_lines(SIMPLE_LINES)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_xpm(tmp_path / "absent.xpm")