import re

import pytest

from htmlformat.constants import ellipsis
from htmlformat.filters import lint
from htmlformat.filters.summarize import Filter
from htmlformat.summary import summarize
from htmlformat.tokenizer import tokenize

from .support import load_tests, errorMessage


@pytest.mark.parametrize("name, test", load_tests("summarize.dat"))
def test_summarize_data(name, test):
    output = summarize(test["data"], int(test["max_words"]), int(test["max_paragraphs"]))
    assert output == test["expected"], errorMessage(test["data"], test["expected"], output)


SAMPLES = [
    "",
    "plain words with no markup at all",
    "<p>one two three</p><p>four five six</p><p>seven</p>",
    "<div><p>nested <em>deeply <strong>here</strong> and</em> out</p></div><p>tail</p>",
    "<p>unclosed <b>bold and <i>italic",
    "</div>stray</span> closes <p>then text</p>",
    "<ul><li>a b</li><li>c d</li></ul>\n<p>e f g</p>",
    "<p>mis<b>matched</p> markup</b> here",
    "<p>a<br>b<img src=x>c <!-- note --> d</p>",
]


def words_in(markup):
    text = "".join(token.value for token in tokenize(markup)
                   if token.type == "Characters")
    return len(text.replace(ellipsis, " ").split())


def top_level_closes(markup):
    depth = 0
    closes = 0
    for token in tokenize(markup):
        if token.type == "StartTag":
            depth += 1
        elif token.type == "EndTag":
            depth -= 1
            if depth == 0:
                closes += 1
    return closes


@pytest.mark.parametrize("markup", SAMPLES)
@pytest.mark.parametrize("max_words", [0, 1, 2, 5, 100])
@pytest.mark.parametrize("max_paragraphs", [0, 1, 2, 10])
def test_summary_properties(markup, max_words, max_paragraphs):
    output = summarize(markup, max_words, max_paragraphs)
    # balanced: the lint filter raises on any unmatched or unclosed tag
    list(lint.Filter(tokenize(output)))
    assert words_in(output) <= max_words
    assert top_level_closes(output) <= max_paragraphs


def test_truncation_adds_single_ellipsis():
    output = summarize("<p>a b c d e f</p>", 3, 1)
    assert output == "<p>a b c&hellip;</p>"
    assert output.count(ellipsis) == 1


def test_no_ellipsis_when_text_fits():
    assert summarize("<p>a b c</p><p>d</p>", 10, 1) == "<p>a b c</p>"


def test_whitespace_is_preserved():
    assert summarize("<p>a  \n b\tc</p>", 10, 1) == "<p>a  \n b\tc</p>"


def test_words_counted_across_elements():
    output = summarize("<p>one <b>two three</b> four</p>", 2, 1)
    assert output == "<p>one <b>two&hellip;</b></p>"


def test_no_new_elements_after_truncation():
    output = summarize("<p>one two</p><p>three</p>", 2, 5)
    assert output == "<p>one two&hellip;</p>"


def test_custom_ellipsis():
    tokens = tokenize("<p>a b c</p>")
    output = "".join(str(token.value or "") for token in
                     Filter(tokens, max_words=1, ellipsis="...")
                     if token.type == "Characters")
    assert output == "a..."


def test_synthesized_close_tags_have_no_source_text():
    tokens = list(Filter(tokenize("<div><p>one two"), max_words=1))
    closes = [token for token in tokens if token.type == "EndTag"]
    assert [token.name for token in closes] == ["p", "div"]
    assert all(token.raw is None and token.data is None for token in closes)


def test_unchanged_tokens_keep_source_text():
    tokens = list(Filter(tokenize('<p class=\'x\'  id=y>a</p>'), max_words=5))
    assert tokens[0].raw == "<p class='x'  id=y>"
    assert "".join(t.raw or "" for t in tokens[:2]) == "<p class='x'  id=y>a"


def test_defaults():
    words = " ".join(["w"] * 150)
    output = summarize("<p>%s</p><p>more</p>" % words)
    assert words_in(output) == 100
    assert re.match(r"^<p>(w ){99}w&hellip;</p>$", output)


@pytest.mark.parametrize("markup, expected", [
    ("<</div>a<span>b</span>", "&lt;a<span>b</span>"),
    ("</</div>a<span>b</span>", "&lt;/a<span>b</span>"),
])
def test_dropped_close_tag_cannot_join_text_into_a_tag(markup, expected):
    output = summarize(markup, 5, 3)
    assert output == expected
    assert [token.type for token in tokenize(output)] == [
        "Characters", "StartTag", "Characters", "EndTag"]


def test_bare_angle_bracket_inside_text_is_kept():
    assert summarize("<p>a < b</p>", 5, 1) == "<p>a < b</p>"
