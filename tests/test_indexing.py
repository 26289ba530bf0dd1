import pytest

from ouroboros.indexing import format_array, index_value, split_array


@pytest.mark.parametrize(
    "elements",
    [["1", "2", "3"], ["a"], ["x", "[1,2]", "y"], ["[a,[b,c]]", "d"]],
)
def test_format_then_split_round_trips(elements):
    assert split_array(format_array(elements)) == elements


def test_format_array_brackets_and_commas():
    text = format_array(["a", "b"])
    assert text.startswith("[") and text.endswith("]")
    assert text[1:-1].split(",") == ["a", "b"]


def test_format_array_is_bounded():
    text = format_array(["x" * 400] * 10)
    assert len(text) == 1023
    assert text.startswith("[")


def test_split_ignores_nested_commas():
    assert split_array("[1,[2,3],4]") == ["1", "[2,3]", "4"]


def test_split_stops_at_top_level_close():
    assert split_array("[a,b]c,d]") == ["a", "b"]


def test_split_empty_array_has_one_empty_element():
    assert split_array("[]") == [""]


def test_split_rejects_non_array():
    with pytest.raises(ValueError):
        split_array("abc")


def test_split_caps_element_length():
    elements = split_array(format_array(["z" * 600]))
    assert len(elements) == 1
    assert len(elements[0]) < 600
    assert set(elements[0]) == {"z"}


@pytest.mark.parametrize("position", range(3))
def test_index_pseudo_array(position):
    elements = ["alpha", "beta", "gamma"]
    assert index_value(format_array(elements), str(position)) == elements[position]


def test_index_trims_whitespace():
    assert index_value("[ a ,  b  ]", "1") == "b"


def test_index_nested_element():
    assert index_value("[1,[2,3],4]", "1") == "[2,3]"
    assert index_value(index_value("[1,[2,3],4]", "1"), "0") == "2"


def test_index_pseudo_array_out_of_bounds_warns(capsys):
    assert index_value("[a,b]", "5") == "undefined"
    assert "out of bounds" in capsys.readouterr().err


def test_index_pseudo_array_far_out_of_bounds_is_quiet(capsys):
    assert index_value("[a,b]", "99") == "undefined"
    assert capsys.readouterr().err == ""


def test_index_pseudo_array_negative():
    assert index_value("[a,b]", "-1") == "undefined"


def test_index_string():
    word = "hello"
    assert [index_value(word, str(i)) for i in range(len(word))] == list(word)


def test_index_string_out_of_bounds():
    assert index_value("abc", "3") == "undefined"
    assert index_value("abc", "-1") == "undefined"


def test_index_undefined_target():
    assert index_value(None, "0") == "undefined"
    assert index_value("undefined", "0") == "undefined"


def test_index_fallback_for_non_numeric_index():
    assert index_value("abc", "key") == "indexed_value_of_abc_at_key"
    assert index_value("abc", None) == "indexed_value_of_abc_at_null"