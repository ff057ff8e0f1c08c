import pytest

from htmlformat.tokenizer import tokenize, HTMLTokenizer
from htmlformat.serializer import serialize


def tokenTypes(markup):
    return [token.type for token in tokenize(markup)]


@pytest.mark.parametrize("markup", [
    "",
    "plain text",
    "<p>Hello <b>world</b></p>",
    "<P CLASS=Intro data-x='1'  id=\"a\">Mixed</P>",
    "<br><br/><br /><img src=x alt>",
    "<!DOCTYPE html><!-- comment --><![CDATA[ x < y ]]><?xml version='1.0'?>",
    "<script>if (a < b) { document.write('</p>') }</script>",
    "a < b and c > d & e",
    "<p class=\"unclosed",
    "</>< /p>text<",
    "<!-- unterminated comment",
    "line\r\nbreaks\rkept\n",
])
def test_round_trip(markup):
    assert serialize(tokenize(markup)) == markup


def test_token_kinds():
    tokens = list(tokenize("<!DOCTYPE html><p>a<br>b</p><!--c-->"))
    assert [token.type for token in tokens] == [
        "Declaration", "StartTag", "Characters", "EmptyTag", "Characters",
        "EndTag", "Comment"]
    assert tokens[0].value == "!DOCTYPE html"
    assert tokens[6].value == "c"


def test_void_and_self_closing_tags_are_empty():
    assert tokenTypes("<hr>") == ["EmptyTag"]
    assert tokenTypes("<IMG src=x>") == ["EmptyTag"]
    assert tokenTypes("<widget/>") == ["EmptyTag"]
    assert tokenTypes("<span>") == ["StartTag"]


def test_attributes():
    token = tokenize("<a HREF='/x' title=\"T\" data-n=3 hidden>")[0]
    assert token.name == "a"
    assert token.data == {"HREF": "/x", "title": "T", "data-n": "3", "hidden": ""}
    assert token.raw == "<a HREF='/x' title=\"T\" data-n=3 hidden>"


def test_case_is_preserved():
    tokens = tokenize("<DIV>x</Div>")
    assert tokens[0].name == "DIV"
    assert tokens[2].name == "Div"
    assert tokens[0].lowerName == tokens[2].lowerName == "div"


def test_text_is_coalesced():
    tokens = tokenize("a < b <> c")
    assert len(tokens) == 1
    assert tokens[0].type == "Characters"
    assert tokens[0].value == "a < b <> c"


def test_entities_left_as_written():
    assert tokenize("&amp; &hellip;")[0].value == "&amp; &hellip;"


def test_rawtext_content_is_text():
    tokens = list(tokenize("<script>var a = '<b>';</SCRIPT>after"))
    assert [token.type for token in tokens] == [
        "StartTag", "Characters", "EndTag", "Characters"]
    assert tokens[1].value == "var a = '<b>';"


def test_duplicate_attribute_dropped():
    tokens = tokenize("<p id=a ID=b>")
    assert tokens[0].data == {"id": "a"}
    assert [error.code for error in tokens.errors] == ["duplicate-attribute"]


def test_eof_in_tag_becomes_text():
    tokens = tokenize("text <a href='x")
    assert tokenTypes("text <a href='x") == ["Characters"]
    assert tokens[0].value == "text <a href='x"
    assert [error.code for error in tokens.errors] == ["eof-in-tag"]


def test_errors_carry_position():
    tokens = tokenize("ok\n<p id=a id=b>")
    error = tokens.errors[0]
    assert error.position[0] == 2
    assert "id" in str(error)


def test_end_tag_with_attributes_is_reported():
    tokens = tokenize("<p></p class=x>")
    assert tokens[1].type == "EndTag"
    assert [error.code for error in tokens.errors] == ["attributes-in-end-tag"]


def test_parse_errors_are_yielded_by_tokenizer():
    types = [token.type for token in HTMLTokenizer("<p id=a id=a>")]
    assert types == ["ParseError", "StartTag"]


def test_bytes_source():
    tokens = tokenize("<p>café</p>".encode("iso-8859-1"), encoding="iso-8859-1")
    assert tokens[1].value == "café"


def test_unknown_encoding_label():
    with pytest.raises(ValueError):
        tokenize(b"<p>x</p>", encoding="latin-1-ish")
