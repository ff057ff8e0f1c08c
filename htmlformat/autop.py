# Copyright (c) 2026 htmlformat contributors
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE
# LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION
# OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION
# WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""Paragraph formatting for markup.

Runs of text separated by two or more newlines become paragraphs, single
newlines become line breaks, and markup is passed through. Nothing inside
the elements of constants.noAutopElements is touched, and block level
elements end any paragraph that is open.
"""

import re

from .constants import blockElements, noAutopElements, tagTokenTypes
from .serializer import HTMLSerializer
from .tokenizer import tokenize

PARAGRAPH_BREAK_REGEX = re.compile(r"\s*(\n\s*){2,}")
EMPTY_PARAGRAPH_REGEX = re.compile(r"\s*<p></p>\s*")
COMMENT_PARAGRAPH_REGEX = re.compile(r"<p><!--(.*?)--></p>", re.DOTALL)

TRIM_CHARACTERS = " \t\n\r\0\x0b"


class AutoParagraph(object):

    line_break = "<br>"

    options = ("line_break",)

    def __init__(self, **kwargs):
        for attr in self.options:
            setattr(self, attr, kwargs.get(attr, getattr(self, attr)))
        self.serializer = HTMLSerializer()

    def render(self, token):
        return self.serializer.render([token])

    def format(self, tokens):
        value = ""
        open_p = False
        stream = iter(tokens)

        for token in stream:
            type = token.type
            name = token.lowerName

            if open_p and type in tagTokenTypes and name in blockElements:
                if name != "p" or type != "EndTag":
                    value += "</p>"
                open_p = False

            # bare inline markup at the very start opens a paragraph
            if type == "StartTag" and name not in blockElements and value == "":
                value = "<p>"
                open_p = True

            if type == "StartTag" and name in noAutopElements:
                value += self.render(token)
                depth = 1
                for nested in stream:
                    value += self.render(nested)
                    if nested.lowerName == name:
                        if nested.type == "StartTag":
                            depth += 1
                        elif nested.type == "EndTag":
                            depth -= 1
                            if depth == 0:
                                break
                continue

            if type != "Characters":
                value += self.render(token)
                if type == "StartTag" and name == "p":
                    open_p = True
                continue

            text = token.value
            if text:
                if not open_p:
                    text = "<p>" + text.lstrip(TRIM_CHARACTERS)
                    open_p = True
                text = PARAGRAPH_BREAK_REGEX.sub("</p><p>", text)
                text = text.replace("\n", self.line_break)
            value += text

        if open_p:
            value += "</p>"

        # removing one empty paragraph can leave another behind
        removed = True
        while removed:
            value, removed = EMPTY_PARAGRAPH_REGEX.subn("", value)
        value = COMMENT_PARAGRAPH_REGEX.sub(r"<!--\1-->", value)
        return value


def autop(value, **kwargs):
    """Wrap the text of value in paragraphs.

    >>> autop("a\\n\\nb")
    '<p>a</p><p>b</p>'
    """
    value = value.replace("\r\n", "\n").strip(TRIM_CHARACTERS)
    if not value:
        return value
    return AutoParagraph(**kwargs).format(tokenize(value))
