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

from collections import deque

from .constants import E, EOF, spaceCharacters, asciiLetters
from .constants import voidElements, rawtextElements
from .inputstream import HTMLInputStream
from .tokens import TokenSet, Characters, StartTag, EndTag, EmptyTag
from .tokens import Comment, Declaration

tagNameEnd = frozenset(spaceCharacters | frozenset("/>"))
attributeNameEnd = frozenset(spaceCharacters | frozenset("=/>"))
unquotedAttributeValueEnd = frozenset(spaceCharacters | frozenset(">"))


class ParseError(object):
    """A recoverable problem found while tokenizing.

    code is a key of constants.E, datavars fills in its message and
    position is the (line, col) of the stream when the error was found.
    """
    type = "ParseError"

    def __init__(self, code, datavars=None, position=None):
        self.code = code
        self.datavars = datavars or {}
        self.position = position

    def __str__(self):
        return E[self.code] % self.datavars

    def __repr__(self):
        return "ParseError(%r, position=%r)" % (self.code, self.position)


class HTMLTokenizer(object):
    """ This class takes care of tokenizing markup.

    It is not a validating HTML5 tokenizer: tag and attribute names keep
    their case, entities are left as written and every token remembers the
    exact text it was produced from, so serializing the tokens gives back
    the input unchanged. Anything that cannot be read as markup becomes
    text and a ParseError is reported alongside it.

    * self.currentToken
      Holds the tag that is currently being built.

    * self.state
      Holds a reference to the method to be invoked for the next character.

    * self.stream
      Points to HTMLInputStream object.
    """

    def __init__(self, stream, **kwargs):
        self.stream = HTMLInputStream(stream, **kwargs)

        # Setup the initial tokenizer state
        self.state = self.dataState
        self.currentToken = None
        self.tokenStart = 0
        self.rawtextName = None

    def __iter__(self):
        """ This is where the magic happens.

        We do our usually processing through the states and when we have a token
        to return we yield the token which pauses processing until the next token
        is requested. Consecutive runs of text are merged into one Characters
        token.
        """
        self.tokenQueue = deque([])
        pending = []
        # Start processing. When EOF is reached self.state will return False
        # instead of True and the loop will terminate.
        while True:
            running = self.state()
            while self.tokenQueue:
                token = self.tokenQueue.popleft()
                if token.type == "Characters":
                    pending.append(token.value)
                    continue
                if pending and token.type != "ParseError":
                    text = "".join(pending)
                    pending = []
                    yield Characters(text, raw=text)
                yield token
            if not running:
                break
        if pending:
            text = "".join(pending)
            yield Characters(text, raw=text)

    def parseError(self, code, datavars=None):
        self.tokenQueue.append(ParseError(code, datavars, self.stream.position()))

    def emitCurrentToken(self):
        """This method is a generic handler for emitting the tags. It also sets
        the state to "data" because that's what's needed after a token has been
        emitted.
        """
        token = self.currentToken
        name = token["name"]
        raw = self.stream.slice(self.tokenStart)
        self.state = self.dataState

        if token["type"] == "EndTag":
            if token["data"]:
                self.parseError("attributes-in-end-tag", {"name": name})
            if token["selfClosing"]:
                self.parseError("self-closing-flag-on-end-tag", {"name": name})
            self.tokenQueue.append(EndTag(name, raw=raw))
            return

        attributes = {}
        seen = set()
        for attrName, attrValue in token["data"]:
            if attrName.lower() in seen:
                self.parseError("duplicate-attribute", {"name": attrName, "tag": name})
                continue
            seen.add(attrName.lower())
            attributes[attrName] = attrValue

        if token["selfClosing"] or name.lower() in voidElements:
            self.tokenQueue.append(EmptyTag(name, attributes, raw=raw))
        else:
            self.tokenQueue.append(StartTag(name, attributes, raw=raw))
            if name.lower() in rawtextElements:
                self.rawtextName = name
                self.state = self.rawtextState

    def eofInTag(self):
        """The input ended inside a tag: give the partial tag back as text."""
        self.parseError("eof-in-tag", {"name": self.currentToken["name"]})
        self.tokenQueue.append(Characters(self.stream.slice(self.tokenStart)))
        self.state = self.dataState

    # Below are the various tokenizer states worked out.
    def dataState(self):
        data = self.stream.char()
        if data == "<":
            self.tokenStart = self.stream.offset - 1
            self.state = self.tagOpenState
        elif data is EOF:
            # Tokenization ends.
            return False
        else:
            chars = self.stream.charsUntil(frozenset("<"))
            self.tokenQueue.append(Characters(data + chars))
        return True

    def rawtextState(self):
        data, found = self.stream.charsUntilString("</" + self.rawtextName, ignoreCase=True)
        if data:
            self.tokenQueue.append(Characters(data))
        if not found:
            self.parseError("eof-in-raw-text", {"name": self.rawtextName})
        self.rawtextName = None
        self.state = self.dataState
        return True

    def tagOpenState(self):
        data = self.stream.char()
        if data == "!":
            self.state = self.markupDeclarationOpenState
        elif data == "/":
            self.state = self.closeTagOpenState
        elif data in asciiLetters:
            self.currentToken = {"type": "StartTag",
                                 "name": data, "data": [],
                                 "selfClosing": False}
            self.state = self.tagNameState
        elif data == "?":
            self.state = self.processingInstructionState
        else:
            if data == ">":
                self.parseError("expected-tag-name-but-got-right-bracket")
            else:
                self.parseError("expected-tag-name")
            self.tokenQueue.append(Characters("<"))
            self.stream.unget(data)
            self.state = self.dataState
        return True

    def closeTagOpenState(self):
        data = self.stream.char()
        if data in asciiLetters:
            self.currentToken = {"type": "EndTag", "name": data,
                                 "data": [], "selfClosing": False}
            self.state = self.tagNameState
        elif data == ">":
            self.parseError("expected-closing-tag-but-got-right-bracket")
            self.tokenQueue.append(Characters("</>"))
            self.state = self.dataState
        elif data is EOF:
            self.parseError("expected-closing-tag-but-got-eof")
            self.tokenQueue.append(Characters("</"))
            self.state = self.dataState
        else:
            self.parseError("expected-closing-tag-but-got-char", {"data": data})
            self.tokenQueue.append(Characters("</"))
            self.stream.unget(data)
            self.state = self.dataState
        return True

    def tagNameState(self):
        data = self.stream.char()
        if data in spaceCharacters:
            self.state = self.beforeAttributeNameState
        elif data == ">":
            self.emitCurrentToken()
        elif data is EOF:
            self.eofInTag()
        elif data == "/":
            self.state = self.selfClosingStartTagState
        else:
            self.currentToken["name"] += data + self.stream.charsUntil(tagNameEnd)
        return True

    def beforeAttributeNameState(self):
        data = self.stream.char()
        if data in spaceCharacters:
            self.stream.charsUntil(spaceCharacters, True)
        elif data == ">":
            self.emitCurrentToken()
        elif data == "/":
            self.state = self.selfClosingStartTagState
        elif data is EOF:
            self.eofInTag()
        else:
            self.currentToken["data"].append([data, ""])
            self.state = self.attributeNameState
        return True

    def attributeNameState(self):
        data = self.stream.char()
        if data == "=":
            self.state = self.beforeAttributeValueState
        elif data == ">":
            self.emitCurrentToken()
        elif data in spaceCharacters:
            self.state = self.afterAttributeNameState
        elif data == "/":
            self.state = self.selfClosingStartTagState
        elif data is EOF:
            self.eofInTag()
        else:
            self.currentToken["data"][-1][0] += data + self.stream.charsUntil(attributeNameEnd)
        return True

    def afterAttributeNameState(self):
        data = self.stream.char()
        if data in spaceCharacters:
            self.stream.charsUntil(spaceCharacters, True)
        elif data == "=":
            self.state = self.beforeAttributeValueState
        elif data == ">":
            self.emitCurrentToken()
        elif data == "/":
            self.state = self.selfClosingStartTagState
        elif data is EOF:
            self.eofInTag()
        else:
            self.currentToken["data"].append([data, ""])
            self.state = self.attributeNameState
        return True

    def beforeAttributeValueState(self):
        data = self.stream.char()
        if data in spaceCharacters:
            self.stream.charsUntil(spaceCharacters, True)
        elif data == "\"":
            self.state = self.attributeValueDoubleQuotedState
        elif data == "'":
            self.state = self.attributeValueSingleQuotedState
        elif data == ">":
            self.emitCurrentToken()
        elif data is EOF:
            self.eofInTag()
        else:
            self.currentToken["data"][-1][1] += data
            self.state = self.attributeValueUnQuotedState
        return True

    def attributeValueDoubleQuotedState(self):
        data = self.stream.char()
        if data == "\"":
            self.state = self.afterAttributeValueState
        elif data is EOF:
            self.eofInTag()
        else:
            self.currentToken["data"][-1][1] += data + self.stream.charsUntil(frozenset("\""))
        return True

    def attributeValueSingleQuotedState(self):
        data = self.stream.char()
        if data == "'":
            self.state = self.afterAttributeValueState
        elif data is EOF:
            self.eofInTag()
        else:
            self.currentToken["data"][-1][1] += data + self.stream.charsUntil(frozenset("'"))
        return True

    def attributeValueUnQuotedState(self):
        data = self.stream.char()
        if data in spaceCharacters:
            self.state = self.beforeAttributeNameState
        elif data == ">":
            self.emitCurrentToken()
        elif data is EOF:
            self.eofInTag()
        else:
            self.currentToken["data"][-1][1] += data + \
                self.stream.charsUntil(unquotedAttributeValueEnd)
        return True

    def afterAttributeValueState(self):
        data = self.stream.char()
        if data in spaceCharacters:
            self.state = self.beforeAttributeNameState
        elif data == ">":
            self.emitCurrentToken()
        elif data == "/":
            self.state = self.selfClosingStartTagState
        elif data is EOF:
            self.eofInTag()
        else:
            self.parseError("unexpected-character-after-attribute-value",
                            {"name": self.currentToken["name"]})
            self.stream.unget(data)
            self.state = self.beforeAttributeNameState
        return True

    def selfClosingStartTagState(self):
        data = self.stream.char()
        if data == ">":
            self.currentToken["selfClosing"] = True
            self.emitCurrentToken()
        elif data is EOF:
            self.eofInTag()
        else:
            self.parseError("unexpected-character-after-solidus-in-tag",
                            {"name": self.currentToken["name"]})
            self.stream.unget(data)
            self.state = self.beforeAttributeNameState
        return True

    def markupDeclarationOpenState(self):
        if self.stream.startsWith("--"):
            self.stream.consume(2)
            self.state = self.commentState
        elif self.stream.startsWith("[CDATA["):
            self.state = self.cdataSectionState
        else:
            self.state = self.declarationState
        return True

    def commentState(self):
        data, found = self.stream.charsUntilString("-->")
        if found:
            self.stream.consume(3)
        else:
            self.parseError("eof-in-comment")
        self.tokenQueue.append(Comment(data, raw=self.stream.slice(self.tokenStart)))
        self.state = self.dataState
        return True

    def cdataSectionState(self):
        data, found = self.stream.charsUntilString("]]>")
        if found:
            self.stream.consume(2)
            data += "]]"
            self.stream.consume(1)
        else:
            self.parseError("eof-in-declaration")
        self.tokenQueue.append(Declaration("!" + data, raw=self.stream.slice(self.tokenStart)))
        self.state = self.dataState
        return True

    def declarationState(self):
        data, found = self.stream.charsUntilString(">")
        if found:
            self.stream.consume(1)
        else:
            self.parseError("eof-in-declaration")
        self.tokenQueue.append(Declaration("!" + data, raw=self.stream.slice(self.tokenStart)))
        self.state = self.dataState
        return True

    def processingInstructionState(self):
        data, found = self.stream.charsUntilString(">")
        if found:
            self.stream.consume(1)
        else:
            self.parseError("eof-in-declaration")
        self.tokenQueue.append(Declaration("?" + data, raw=self.stream.slice(self.tokenStart)))
        self.state = self.dataState
        return True


def tokenize(source, **kwargs):
    """Tokenize source into a TokenSet.

    Parse errors are collected in the TokenSet's errors list rather than
    kept in the token sequence.
    """
    tokens = []
    errors = []
    for token in HTMLTokenizer(source, **kwargs):
        if token.type == "ParseError":
            errors.append(token)
        else:
            tokens.append(token)
    return TokenSet(tokens, errors)
