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

from . import base
from ..constants import tokenTypes, voidElements


class LintError(Exception):
    pass


class Filter(base.Filter):
    """Passes tokens through unchanged, raising LintError on the first
    token that breaks the token invariants or leaves tags unbalanced."""

    def __iter__(self):
        open_elements = []
        for token in base.Filter.__iter__(self):
            type = token.type
            if type not in tokenTypes or type == "ParseError":
                raise LintError("Unknown token type: %(type)s" % {"type": type})

            if type in ("StartTag", "EmptyTag"):
                name = token.name
                if not isinstance(name, str):
                    raise LintError("Tag name is not a string: %(tag)r" % {"tag": name})
                if not name:
                    raise LintError("Empty tag name")
                if token.value is not None:
                    raise LintError("Tag carries text: %(tag)s" % {"tag": name})
                if type == "StartTag" and token.lowerName in voidElements:
                    raise LintError("Void element reported as StartTag token: %(tag)s" % {"tag": name})
                for attr_name, value in (token.data or {}).items():
                    if not isinstance(attr_name, str) or not attr_name:
                        raise LintError("Attribute name is not a string: %(name)r" % {"name": attr_name})
                    if value is not None and not isinstance(value, str):
                        raise LintError("Attribute value is not a string: %(value)r" % {"value": value})
                if type == "StartTag":
                    open_elements.append(token.lowerName)

            elif type == "EndTag":
                name = token.name
                if not isinstance(name, str) or not name:
                    raise LintError("Tag name is not a string: %(tag)r" % {"tag": name})
                if token.data or token.value is not None:
                    raise LintError("EndTag carries attributes or text: %(tag)s" % {"tag": name})
                if not open_elements:
                    raise LintError("EndTag (%(end)s) without StartTag" % {"end": name})
                start_name = open_elements.pop()
                if start_name != token.lowerName:
                    raise LintError("EndTag (%(end)s) does not match StartTag (%(start)s)" % {"end": name, "start": start_name})

            elif type in ("Characters", "Comment", "Declaration"):
                if not isinstance(token.value, str):
                    raise LintError("%(type)s token without text" % {"type": type})

            yield token

        if open_elements:
            raise LintError("Unclosed elements: %(names)s" % {"names": ", ".join(open_elements)})
