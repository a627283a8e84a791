import pytest

from mqperfkit.stringbuffer import StringBuffer


def test_new_buffer_is_empty():
    buf = StringBuffer()
    assert len(buf) == 0
    assert str(buf) == ""


def test_append_concatenates_in_order():
    buf = StringBuffer()
    buf.append("rate=").append("fast")
    assert str(buf) == "rate=" + "fast"
    assert len(buf) == len("rate=fast")


def test_append_empty_string_changes_nothing():
    buf = StringBuffer()
    buf.append("abc")
    buf.append("")
    assert str(buf) == "abc"
    assert len(buf) == 3


def test_append_rejects_non_string():
    buf = StringBuffer()
    with pytest.raises(TypeError):
        buf.append(5)


def test_append_int():
    buf = StringBuffer()
    buf.append("n=").append_int(-17)
    assert str(buf) == "n=-17"


def test_append_double_uses_two_decimals():
    buf = StringBuffer()
    buf.append_double(3.14159)
    assert str(buf) == "3.14"


def test_append_double_pads_decimals():
    buf = StringBuffer()
    buf.append_double(2)
    assert str(buf) == "2.00"


def test_set_length_zero_empties():
    buf = StringBuffer()
    buf.append("hello world")
    buf.set_length(0)
    assert str(buf) == ""
    assert len(buf) == 0
    buf.append("again")
    assert str(buf) == "again"


def test_set_length_truncates():
    text = "hello world"
    buf = StringBuffer()
    buf.append(text)
    buf.set_length(5)
    assert str(buf) == text[:5]
    assert len(buf) == 5


def test_set_length_larger_keeps_contents():
    buf = StringBuffer()
    buf.append("abc")
    buf.set_length(100)
    assert str(buf) == "abc"
    assert len(buf) == 3


def test_set_length_negative_rejected():
    buf = StringBuffer()
    buf.append("abc")
    with pytest.raises(ValueError):
        buf.set_length(-1)
    assert str(buf) == "abc"


def test_length_matches_string_after_many_appends():
    buf = StringBuffer()
    for word in ["a", "bb", "ccc"]:
        buf.append(word)
    buf.append_int(12345)
    assert len(buf) == len(str(buf))
    assert str(buf).startswith("abbccc")