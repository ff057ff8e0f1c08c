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

import re

from . import base
from ..constants import ellipsis
from ..tokens import EndTag

WORDS_REGEX = re.compile(r"(\s+)")
# a text run ending in these would open a tag if text followed it directly
DANGLING_TAG_OPEN_REGEX = re.compile(r"<(/?)\Z")


class Filter(base.Filter):
    """Cuts a token stream down to a word and paragraph budget.

    Every element opened in the output is closed in the output, whatever
    the source looks like: close tags pop the stack of open elements until
    the matching one is found, and anything still open when the stream
    stops is closed at the end. Close tags with nothing open are dropped.
    This is lenient recovery, not validation. A text run ending in a bare
    "<" or "</" has it escaped, so dropping a close tag cannot turn the text
    around it into a tag.

    A paragraph is an element closed at depth zero.
    """

    max_words = 100
    max_paragraphs = 1
    ellipsis = ellipsis

    options = ("max_words", "max_paragraphs", "ellipsis")

    def __init__(self, source, **kwargs):
        base.Filter.__init__(self, source)
        for attr in self.options:
            setattr(self, attr, kwargs.get(attr, getattr(self, attr)))

    def __iter__(self):
        stack = []
        remaining_words = self.max_words
        paragraphs = 0
        truncated = False

        for token in base.Filter.__iter__(self):
            type = token.type

            if type == "EndTag":
                if not stack:
                    continue
                while stack:
                    start = stack.pop()
                    yield EndTag(start.name)
                    if not truncated and start.lowerName == token.lowerName:
                        break
                if not stack:
                    paragraphs += 1
                    if truncated or paragraphs >= self.max_paragraphs:
                        break
                continue

            if truncated:
                continue

            if type == "StartTag":
                if not stack and paragraphs >= self.max_paragraphs:
                    break
                stack.append(token)
                yield token

            elif type == "Characters":
                text, words = self.takeWords(token.value, remaining_words)
                text = DANGLING_TAG_OPEN_REGEX.sub(r"&lt;\1", text)
                remaining_words -= words
                if remaining_words <= 0:
                    text += self.ellipsis
                    truncated = True
                if text != token.value:
                    token = token.replace(value=text)
                yield token

            else:
                yield token

        while stack:
            yield EndTag(stack.pop().name)

    def takeWords(self, text, count):
        """Return the start of text holding at most count words, and the
        number of words it holds. Whitespace is kept as it was, except the
        run following the last word when the text had to be cut."""
        kept = []
        words = 0
        for part in WORDS_REGEX.split(text):
            if not part:
                continue
            if words >= count:
                break
            kept.append(part)
            if not part.isspace():
                words += 1
        return "".join(kept), words
