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

"""The "read more" treatment of long content.

Content is cut either at an explicit ``<!--more-->`` comment or, failing
that, by the summarizer, and a link to the full content is added at the
point where it was cut.
"""

import re
from collections import namedtuple
from urllib.parse import parse_qsl

from .constants import moreMarker, UNLIMITED
from .serializer import serialize
from .summary import summarize
from .tokenizer import tokenize
from .tokens import Characters, StartTag, EndTag

LEADING_INTEGER_REGEX = re.compile(r"\s*[-+]?\d+")


class AnchorSpec(namedtuple("AnchorSpec", "href text title css_class",
                            defaults=(None, None))):
    """The link shown after cut content.

    text is markup and is used as-is. title and css_class are optional
    attribute values.
    """
    __slots__ = ()

    def tokens(self):
        attributes = {}
        if self.title is not None:
            attributes["title"] = self.title
        if self.css_class is not None:
            attributes["class"] = self.css_class
        attributes["href"] = self.href
        return [StartTag("a", attributes), Characters(self.text), EndTag("a")]

    def render(self):
        return serialize(self.tokens())


def compose(content, link, max_words=None, max_paragraphs=None,
            split_on_marker=True):
    """Shorten content and add link to it.

    An explicit more marker wins over the word and paragraph limits. With
    no marker and no limits the content is returned unchanged, and so is
    content the limits would not shorten.
    """
    if split_on_marker:
        parts = [part for part in moreMarker.split(content, 1) if part]
        if len(parts) > 1:
            if link.text:
                return parts[0] + " " + link.render()
            return parts[0]

    if max_words is None and max_paragraphs is None:
        return content

    if max_words is None:
        max_words = UNLIMITED
    if max_paragraphs is None:
        max_paragraphs = UNLIMITED

    summary = summarize(content, max_words, max_paragraphs)
    if len(summary) >= len(content):
        return content
    if not link.text:
        return summary

    summary_set = tokenize(summary)
    link_set = tokenize(link.render())
    # inside the last open element when the summary ends by closing one
    last = summary_set.end()
    if last is not None and last.type == "EndTag":
        at = summary_set.position()
    else:
        at = len(summary_set)
    summary_set.splice(link_set, at)
    return serialize(summary_set)


def parse_properties(properties):
    """Read more() properties given as a mapping or a query string."""
    if properties is None:
        return {}
    if isinstance(properties, str):
        return dict(parse_qsl(properties, keep_blank_values=True))
    return dict(properties)


def _limit(value):
    # unset, empty, zero and non-numeric limits all mean "no limit"
    if value is None:
        return None
    match = LEADING_INTEGER_REGEX.match(str(value))
    if match is None or int(match.group()) == 0:
        return None
    return int(match.group())


def more(content, permalink, properties=None, title=None, more_text="Read More"):
    """Return content cut for display in a listing, with a link to
    permalink.

    properties may hold:

    more_text       - link text, "" for no link (default more_text)
    max_words       - word limit
    max_paragraphs  - paragraph limit
    title:before    - text starting the link title
    title           - if present, title is added to the link title
    title:after     - text ending the link title
    class           - class of the link
    """
    params = parse_properties(properties)

    link_title = None
    if "title:before" in params or "title" in params or "title:after" in params:
        link_title = params.get("title:before", "")
        if "title" in params and title is not None:
            link_title += title
        link_title += params.get("title:after", "")

    link = AnchorSpec(permalink, params.get("more_text", more_text),
                      title=link_title, css_class=params.get("class"))
    return compose(content, link,
                   max_words=_limit(params.get("max_words")),
                   max_paragraphs=_limit(params.get("max_paragraphs")))
