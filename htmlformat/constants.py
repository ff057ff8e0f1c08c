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

import gettext
import re

_ = gettext.gettext

EOF = None

E = {
    "expected-tag-name":
        _("Expected tag name. Got something else instead."),
    "expected-tag-name-but-got-right-bracket":
        _("Expected tag name. Got '>' instead."),
    "expected-closing-tag-but-got-right-bracket":
        _("Expected closing tag. Got '>' instead. Ignoring '</>'."),
    "expected-closing-tag-but-got-eof":
        _("Expected closing tag. Unexpected end of file."),
    "expected-closing-tag-but-got-char":
        _("Expected closing tag. Unexpected character '%(data)s' found."),
    "eof-in-tag":
        _("Unexpected end of file in tag <%(name)s>."),
    "eof-in-comment":
        _("Unexpected end of file in comment."),
    "eof-in-declaration":
        _("Unexpected end of file in markup declaration."),
    "eof-in-raw-text":
        _("Unexpected end of file in <%(name)s> content."),
    "duplicate-attribute":
        _("Dropped duplicate attribute '%(name)s' on tag <%(tag)s>."),
    "attributes-in-end-tag":
        _("End tag </%(name)s> contains unexpected attributes."),
    "self-closing-flag-on-end-tag":
        _("End tag </%(name)s> has a self-closing flag."),
    "unexpected-character-after-solidus-in-tag":
        _("Unexpected character after / found in tag <%(name)s>."),
    "unexpected-character-after-attribute-value":
        _("Unexpected character after attribute value in tag <%(name)s>."),
}

tokenTypes = {
    "Characters": 0,
    "StartTag": 1,
    "EndTag": 2,
    "EmptyTag": 3,
    "Comment": 4,
    "Declaration": 5,
    "ParseError": 6
}

tagTokenTypes = frozenset(("StartTag", "EndTag", "EmptyTag"))

spaceCharacters = frozenset((
    "\t",
    "\n",
    "\u000C",
    " ",
    "\r"
))

asciiLowercase = frozenset("abcdefghijklmnopqrstuvwxyz")
asciiUppercase = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
asciiLetters = asciiLowercase | asciiUppercase

voidElements = frozenset((
    "area",
    "base",
    "br",
    "col",
    "command",
    "embed",
    "hr",
    "img",
    "input",
    "keygen",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr"
))

# Content of these elements is not tokenized for markup.
rawtextElements = frozenset((
    "script",
    "style",
    "xmp"
))

headingElements = (
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6"
)

# autop never touches anything inside these.
noAutopElements = frozenset((
    "pre",
    "code",
    "ul",
    "ol",
    "li",
    "table",
    "i",
    "b",
    "em",
    "strong"
) + headingElements)

blockElements = frozenset((
    "address",
    "blockquote",
    "center",
    "dir",
    "div",
    "dl",
    "fieldset",
    "form",
    "hr",
    "isindex",
    "menu",
    "noframes",
    "noscript",
    "ol",
    "p",
    "pre",
    "table",
    "ul"
) + headingElements)

ellipsis = "&hellip;"

moreMarker = re.compile(r"<!--\s*more\s*-->", re.IGNORECASE)

# Stand-in for "no limit" when only one of the summary limits is given.
UNLIMITED = 9999999
