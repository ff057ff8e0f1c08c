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

import webencodings

from .constants import EOF

# Cache for charsUntil()
charsUntilRegEx = {}


def HTMLInputStream(source, encoding=None, defaultEncoding="utf-8"):
    """Build the input stream matching the type of source.

    Text (or a file object reading text) gives a HTMLUnicodeInputStream,
    anything else is treated as bytes and decoded by HTMLBinaryInputStream.
    """
    if hasattr(source, "read"):
        isUnicode = isinstance(source.read(0), str)
    else:
        isUnicode = isinstance(source, str)

    if isUnicode:
        if encoding is not None:
            raise TypeError("Cannot explicitly set an encoding with a unicode string")
        return HTMLUnicodeInputStream(source)
    else:
        return HTMLBinaryInputStream(source, encoding, defaultEncoding)


class HTMLUnicodeInputStream(object):
    """Provides a unicode stream of characters to the HTMLTokenizer.

    The whole source is held in memory. Unlike a browser-grade stream no
    newline or codepoint normalisation takes place: every character of the
    source reaches the tokenizer untouched, so tokens can carry their exact
    source text.
    """

    def __init__(self, source):
        self.data = self.openStream(source)
        self.charEncoding = (webencodings.lookup("utf-8"), "certain")
        self.reset()

    def reset(self):
        self.offset = 0

    def openStream(self, source):
        """Produces the source text from a string or file object."""
        if hasattr(source, "read"):
            return source.read()
        return source

    def position(self):
        """Returns (line, col) of the current position in the stream."""
        line = self.data.count("\n", 0, self.offset)
        lastLinePos = self.data.rfind("\n", 0, self.offset)
        return (line + 1, self.offset - (lastLinePos + 1))

    def char(self):
        """Read one character from the stream. Return EOF when EOF is reached."""
        if self.offset >= len(self.data):
            return EOF
        char = self.data[self.offset]
        self.offset += 1
        return char

    def charsUntil(self, characters, opposite=False):
        """Returns a string of characters from the stream up to but not
        including any character in 'characters' or EOF. 'characters' must be
        a container that supports the 'in' method and iteration over its
        characters.
        """
        # Use a cache of regexps to find the required characters
        try:
            chars = charsUntilRegEx[(characters, opposite)]
        except KeyError:
            regex = "".join(["\\x%02x" % ord(c) for c in characters])
            if not opposite:
                regex = "^%s" % regex
            chars = charsUntilRegEx[(characters, opposite)] = re.compile("[%s]+" % regex)

        m = chars.match(self.data, self.offset)
        if m is None:
            return ""
        self.offset = m.end()
        return m.group()

    def charsUntilString(self, string, ignoreCase=False):
        """Consume up to (not including) the next occurrence of string.

        Returns (text, found). When string does not occur the rest of the
        stream is consumed and found is False.
        """
        if ignoreCase:
            index = self.data.lower().find(string.lower(), self.offset)
        else:
            index = self.data.find(string, self.offset)
        if index == -1:
            rv = self.data[self.offset:]
            self.offset = len(self.data)
            return rv, False
        rv = self.data[self.offset:index]
        self.offset = index
        return rv, True

    def startsWith(self, string, ignoreCase=False):
        """Whether the unconsumed input begins with string."""
        upcoming = self.data[self.offset:self.offset + len(string)]
        if ignoreCase:
            return upcoming.lower() == string.lower()
        return upcoming == string

    def consume(self, count):
        rv = self.data[self.offset:self.offset + count]
        self.offset += len(rv)
        return rv

    def unget(self, char):
        # Only one character is allowed to be ungotten at once - it must
        # be consumed again before any further call to unget
        if char is not EOF:
            self.offset -= 1
            assert self.data[self.offset] == char

    def slice(self, start, end=None):
        if end is None:
            end = self.offset
        return self.data[start:end]


class HTMLBinaryInputStream(HTMLUnicodeInputStream):
    """Provides a unicode stream of characters from a byte source.

    A byte order mark wins over defaultEncoding; an explicit encoding wins
    over both. Undecodable bytes are replaced with U+FFFD.
    """

    def __init__(self, source, encoding=None, defaultEncoding="utf-8"):
        if hasattr(source, "read"):
            rawData = source.read()
        else:
            rawData = source

        if encoding is not None:
            override = lookupEncoding(encoding)
            if override is None:
                raise ValueError("Unknown encoding %r" % (encoding,))
            text = override.codec_info.decode(rawData, "replace")[0]
            charEncoding = (override, "certain")
        else:
            fallback = lookupEncoding(defaultEncoding)
            if fallback is None:
                raise ValueError("Unknown encoding %r" % (defaultEncoding,))
            text, detected = webencodings.decode(rawData, fallback, errors="replace")
            charEncoding = (detected, "tentative")

        HTMLUnicodeInputStream.__init__(self, text)
        self.charEncoding = charEncoding


def lookupEncoding(encoding):
    """Return the webencodings Encoding for a label, or None."""
    if isinstance(encoding, bytes):
        try:
            encoding = encoding.decode("ascii")
        except UnicodeDecodeError:
            return None

    if encoding is not None:
        return webencodings.lookup(encoding)
    else:
        return None
