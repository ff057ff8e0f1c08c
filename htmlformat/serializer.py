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

from .constants import voidElements

_ = gettext.gettext


class SerializeError(Exception):
    """Error in serialized token stream"""
    pass


class HTMLSerializer(object):
    """Turns a token sequence back into markup.

    Tokens that came from the tokenizer carry their source text and are
    written out exactly as they were read. Synthesized tokens are written
    from their fields.
    """

    # attribute quoting options
    quote_char = '"'

    # tag syntax options
    use_trailing_solidus = False
    space_before_trailing_solidus = True

    # miscellaneous options
    strict = False

    options = ("quote_char", "use_trailing_solidus",
               "space_before_trailing_solidus", "strict")

    def __init__(self, **kwargs):
        """Initialize HTMLSerializer.

        Keyword options (default given first unless specified) include:

        quote_char='"'|"'"
          Use given quote character for attribute values of synthesized
          tags.
        use_trailing_solidus=False|True
          Includes a close-tag slash at the end of synthesized empty tags.
          E.g. <hr/>.
        space_before_trailing_solidus=True|False
          Places a space immediately before the closing slash in a tag
          using a trailing solidus. E.g. <hr />. Requires use_trailing_solidus.
        strict=False|True
          Raise SerializeError on the first problem instead of recording it
          in the errors list.
        """
        unexpected_args = frozenset(kwargs) - frozenset(self.options)
        if len(unexpected_args) > 0:
            raise TypeError("__init__() got an unexpected keyword argument '%s'" % next(iter(unexpected_args)))
        for attr in self.options:
            setattr(self, attr, kwargs.get(attr, getattr(self, attr)))
        self.errors = []

    def serialize(self, tokens):
        self.errors = []
        for token in tokens:
            if token.raw is not None:
                yield token.raw
                continue

            type = token.type
            if type == "Characters":
                yield token.value

            elif type in ("StartTag", "EmptyTag"):
                name = token.name
                yield "<%s" % name
                for attr_name, attr_value in (token.data or {}).items():
                    yield " "
                    yield attr_name
                    if attr_value is not None:
                        yield "=%s" % self.quoteAttributeValue(attr_value)
                if type == "EmptyTag" and self.use_trailing_solidus:
                    if self.space_before_trailing_solidus:
                        yield " /"
                    else:
                        yield "/"
                yield ">"

            elif type == "EndTag":
                if token.lowerName in voidElements:
                    self.serializeError(_("Void element %s given an end tag") % token.name)
                yield "</%s>" % token.name

            elif type == "Comment":
                data = token.value
                if data.find("--") >= 0:
                    self.serializeError(_("Comment contains --"))
                yield "<!--%s-->" % data

            elif type == "Declaration":
                yield "<%s>" % token.value

            else:
                self.serializeError(_("Unknown token type %s") % type)

    def quoteAttributeValue(self, value):
        value = value.replace("&", "&amp;")
        if self.quote_char == "'":
            value = value.replace("'", "&#39;")
        else:
            value = value.replace('"', "&quot;")
        return "%s%s%s" % (self.quote_char, value, self.quote_char)

    def render(self, tokens):
        """Serializes the token sequence into a string."""
        return "".join(list(self.serialize(tokens)))

    def serializeError(self, data):
        self.errors.append(data)
        if self.strict:
            raise SerializeError(data)


def serialize(tokens, **serializer_opts):
    """Serializes a token sequence (a TokenSet or any iterable of tokens)."""
    return HTMLSerializer(**serializer_opts).render(tokens)
