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

from collections import namedtuple


class Token(namedtuple("Token", "type name data value raw")):
    """One markup event.

    type  - a key of constants.tokenTypes
    name  - tag name as written, None for non-tag tokens
    data  - ordered attribute dict for StartTag/EmptyTag, otherwise None
    value - raw text (Characters), comment body (Comment) or declaration
            body (Declaration), otherwise None
    raw   - exact source text for tokens produced by the tokenizer, None for
            synthesized tokens
    """
    __slots__ = ()

    @property
    def lowerName(self):
        if self.name is None:
            return None
        return self.name.lower()

    def replace(self, **kwargs):
        """Return a copy with some fields changed. The copy no longer
        corresponds to any source text so raw is dropped."""
        kwargs.setdefault("raw", None)
        return self._replace(**kwargs)


def Characters(value, raw=None):
    return Token("Characters", None, None, value, raw)


def StartTag(name, data=None, raw=None):
    return Token("StartTag", name, dict(data or {}), None, raw)


def EndTag(name, raw=None):
    return Token("EndTag", name, None, None, raw)


def EmptyTag(name, data=None, raw=None):
    return Token("EmptyTag", name, dict(data or {}), None, raw)


def Comment(value, raw=None):
    return Token("Comment", None, None, value, raw)


def Declaration(value, raw=None):
    return Token("Declaration", None, None, value, raw)


class TokenSet(object):
    """A position addressable sequence of tokens with a cursor.

    Positions are plain integer offsets into the sequence. The cursor is
    invalid (current() returns None) once it has moved past the last token.
    Iterating over a TokenSet rewinds it and walks the cursor to the end.
    """

    def __init__(self, tokens=(), errors=None):
        self.tokens = list(tokens)
        self.errors = list(errors or [])
        self.index = 0

    def __len__(self):
        return len(self.tokens)

    def __getitem__(self, key):
        return self.tokens[key]

    def __iter__(self):
        token = self.rewind()
        while token is not None:
            yield token
            token = self.advance()

    def __str__(self):
        from .serializer import HTMLSerializer
        return HTMLSerializer().render(self.tokens)

    def __repr__(self):
        return "<%s %r>" % (self.__class__.__name__, self.tokens)

    def current(self):
        if 0 <= self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self):
        if self.index < len(self.tokens):
            self.index += 1
        return self.current()

    def rewind(self):
        self.index = 0
        return self.current()

    def end(self):
        """Move the cursor to the last token and return it."""
        self.index = max(len(self.tokens) - 1, 0)
        return self.current()

    def position(self):
        return self.index

    def is_at_end(self):
        return self.index >= len(self.tokens)

    def append(self, token):
        self.tokens.append(token)

    def splice(self, other, at):
        """Insert the tokens of other immediately before position at.

        Positions before at are not affected. A cursor at or beyond at keeps
        addressing the same token it did before the insertion.
        """
        inserted = list(other)
        at = min(max(at, 0), len(self.tokens))
        self.tokens[at:at] = inserted
        if self.index >= at:
            self.index += len(inserted)
