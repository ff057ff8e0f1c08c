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

"""Named formatters.

Themes and plugins refer to formatters by name. The names are fixed here
rather than discovered at runtime; register additional formatters by adding
them to the formatters mapping.
"""

import json

from .autop import autop
from .more import more
from .summary import summarize


def html_messages(notices, errors):
    """Creates HTML unordered lists of error and success messages."""
    output = ""
    if errors:
        output += '<ul class="error">'
        for error in errors:
            output += "<li>%s</li>" % error
        output += "</ul>"
    if notices:
        output += '<ul class="success">'
        for notice in notices:
            output += "<li>%s</li>" % notice
        output += "</ul>"
    return output


def _addslashes(text):
    return (text.replace("\\", "\\\\")
                .replace("'", "\\'")
                .replace('"', '\\"')
                .replace("\0", "\\0"))


def humane_messages(notices, errors):
    """Creates the JavaScript calls displaying each message."""
    output = ""
    for message in list(errors) + list(notices):
        output += 'human_msg.display_msg("%s");' % _addslashes(message)
    return output


def json_messages(notices, errors):
    """Creates a JSON list of the messages, errors first."""
    return json.dumps(list(errors) + list(notices))


formatters = {
    "autop": autop,
    "summarize": summarize,
    "more": more,
    "html_messages": html_messages,
    "humane_messages": humane_messages,
    "json_messages": json_messages,
}


def getFormatter(name):
    """Get a formatter function by name.

    name - the name of the formatter (case-insensitive), one of the keys
           of formatters.
    """
    formatter = formatters.get(name.lower())
    if formatter is None:
        raise ValueError("""Unrecognised formatter "%s" """ % name)
    return formatter


def apply(name, value, *args, **kwargs):
    """Run the named formatter on value."""
    return getFormatter(name)(value, *args, **kwargs)
