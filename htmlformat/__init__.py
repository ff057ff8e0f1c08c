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

"""
HTML-aware text formatting: paragraph wrapping, summaries that keep their
markup balanced, and "read more" links, all working on a token stream
rather than on raw strings.

Example usage:

import htmlformat
htmlformat.autop("First paragraph.\\n\\nSecond paragraph.")
htmlformat.summarize(content, max_words=50, max_paragraphs=2)
htmlformat.more(content, "http://example.com/post", "max_words=50")
"""

from .autop import autop, AutoParagraph
from .format import getFormatter, apply
from .more import more, compose, AnchorSpec
from .serializer import serialize, HTMLSerializer
from .summary import summarize
from .tokenizer import tokenize, HTMLTokenizer
from .tokens import Token, TokenSet

__all__ = ["autop", "AutoParagraph", "summarize", "more", "compose",
           "AnchorSpec", "getFormatter", "apply", "tokenize",
           "HTMLTokenizer", "serialize", "HTMLSerializer", "Token",
           "TokenSet"]

__version__ = "1.0.0"
