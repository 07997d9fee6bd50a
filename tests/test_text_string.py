import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.text_string import CharString


def test_concatenation_from_example():
    result = CharString("text") + CharString("text2")
    assert result.text() == "texttext2"
    assert len(result) == 9


def test_inequality_from_example():
    assert (CharString("text") != CharString("text2")) is True


def test_index_assignment_from_example():
    s = CharString("text")
    s[1] = "k"
    assert s[1] == "k"
    assert str(s) == "tkxt"


def test_equality():
    assert CharString("abc") == CharString("abc")
    assert not (CharString("abc") == CharString("abd"))
    assert CharString() == CharString("")


def test_add_str():
    assert (CharString("ab") + "cd").text() == "abcd"


def test_add_does_not_modify_operands():
    a = CharString("ab")
    b = CharString("cd")
    _ = a + b
    assert a.text() == "ab"
    assert b.text() == "cd"


def test_set_text_replaces_contents():
    s = CharString("first")
    s.set_text("second")
    assert s.text() == "second"
    assert len(s) == 6


def test_text_stops_at_nul():
    assert CharString("ab\0cd").text() == "ab"


def test_set_text_rejects_non_str():
    s = CharString("keep")
    with pytest.raises(TypeError):
        s.set_text(5)
    assert s.text() == "keep"


def test_index_out_of_range():
    s = CharString("ab")
    with pytest.raises(IndexError):
        s[5]
    with pytest.raises(IndexError):
        s[5] = "x"
    assert s.text() == "ab"
    assert len(s) == 2


def test_setitem_requires_single_character():
    s = CharString("ab")
    with pytest.raises(ValueError):
        s[0] = "xy"
    assert s[0] == "a"
    assert s.text() == "ab"


def test_repr_shows_text():
    assert repr(CharString("hi")) == "CharString('hi')"


def test_unhashable():
    with pytest.raises(TypeError):
        hash(CharString("x"))


@given(st.text(alphabet=st.characters(blacklist_characters="\0")),
       st.text(alphabet=st.characters(blacklist_characters="\0")))
def test_concatenation_matches_str(a, b):
    result = CharString(a) + CharString(b)
    assert result.text() == a + b
    assert len(result) == len(a) + len(b)
    assert result == CharString(a + b)