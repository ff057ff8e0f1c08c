import io

import pytest

from htmlformat.constants import EOF
from htmlformat.inputstream import HTMLInputStream, HTMLUnicodeInputStream
from htmlformat.inputstream import HTMLBinaryInputStream


def test_text_source():
    stream = HTMLInputStream("ab")
    assert isinstance(stream, HTMLUnicodeInputStream)
    assert stream.char() == "a"
    assert stream.char() == "b"
    assert stream.char() is EOF


def test_text_file_source():
    stream = HTMLInputStream(io.StringIO("<p>x</p>"))
    assert stream.data == "<p>x</p>"


def test_encoding_with_text_source():
    with pytest.raises(TypeError):
        HTMLInputStream("x", encoding="utf-8")


def test_bytes_default_utf8():
    stream = HTMLInputStream("café".encode("utf-8"))
    assert isinstance(stream, HTMLBinaryInputStream)
    assert stream.data == "café"
    assert stream.charEncoding[0].name == "utf-8"


def test_bytes_file_source():
    stream = HTMLInputStream(io.BytesIO(b"<p>x</p>"))
    assert stream.data == "<p>x</p>"


def test_byte_order_mark_wins():
    stream = HTMLInputStream(b"\xff\xfeh\x00i\x00", defaultEncoding="windows-1252")
    assert stream.data == "hi"
    assert stream.charEncoding[0].name == "utf-16le"


def test_explicit_encoding():
    stream = HTMLInputStream("é".encode("iso-8859-1"), encoding="iso-8859-1")
    assert stream.data == "é"
    assert stream.charEncoding[1] == "certain"


def test_default_encoding():
    stream = HTMLInputStream("é".encode("iso-8859-1"), defaultEncoding="iso-8859-1")
    assert stream.data == "é"
    assert stream.charEncoding[1] == "tentative"


def test_undecodable_bytes_replaced():
    assert HTMLInputStream(b"a\xffb").data == "a\ufffdb"


@pytest.mark.parametrize("options", [{"encoding": "no-such-thing"},
                                     {"defaultEncoding": "no-such-thing"}])
def test_unknown_encoding(options):
    with pytest.raises(ValueError):
        HTMLInputStream(b"x", **options)


def test_chars_until():
    stream = HTMLInputStream("abc<def")
    assert stream.charsUntil(frozenset("<")) == "abc"
    assert stream.char() == "<"
    assert stream.charsUntil(frozenset("<")) == "def"
    assert stream.charsUntil(frozenset("<")) == ""


def test_chars_until_string():
    stream = HTMLInputStream("x</SCRIPT>y")
    assert stream.charsUntilString("</script", ignoreCase=True) == ("x", True)
    assert stream.startsWith("</SCRIPT")
    assert stream.consume(10) == "</SCRIPT>y"
    assert stream.charsUntilString("z") == ("", False)


def test_unget():
    stream = HTMLInputStream("ab")
    stream.unget(stream.char())
    assert stream.char() == "a"
    stream.offset = 2
    stream.unget(EOF)
    assert stream.offset == 2


def test_position():
    stream = HTMLInputStream("ab\ncd")
    assert stream.position() == (1, 0)
    stream.consume(4)
    assert stream.position() == (2, 1)
    assert stream.slice(1, 4) == "b\nc"
