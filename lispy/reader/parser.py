"""
  Lispy Lexer and Parser

- Streaming, lazy tokenizing
- Produces a generic parse tree of ParseNode objects rather than values:

    - root          -> ParseNode(">"), bracketed by two "regex" metadata nodes
    - ( ... )       -> ParseNode("sexpr"), delimiters kept as "char" children
    - { ... }       -> ParseNode("qexpr"), delimiters kept as "char" children
    - numbers       -> ParseNode("number", text)
    - symbols       -> ParseNode("symbol", text)

  Numbers are tried before symbols at every position, so `5-3` lexes as the
  numbers 5 and -3, while `x1` and a lone `-` are symbols.

  Turning the tree into values is the job of lispy.reader.read.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from lispy.errors import LispySyntaxError

TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<number>-?(\d+\.)?\d+)"
    r"|(?P<symbol>[a-zA-Z0-9_%+*\-/\\=<>!&]+)"
    r")",
)

CLOSING = {"lparen": "rparen", "lbrace": "rbrace"}
GROUP_TAGS = {"lparen": "sexpr", "lbrace": "qexpr"}


class ParseNode:
    """A node of the generic parse tree: a tag, literal text, ordered children."""

    __slots__ = ("tag", "contents", "children")

    def __init__(self, tag: str, contents: str = "", children: list[ParseNode] | None = None):
        self.tag = tag
        self.contents = contents
        self.children: list[ParseNode] = children if children is not None else []

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, ParseNode)
            and self.tag == other.tag
            and self.contents == other.contents
            and self.children == other.children
        )

    __hash__ = None

    def __repr__(self) -> str:
        if self.children:
            return f"ParseNode({self.tag!r}, {self.contents!r}, {self.children!r})"
        return f"ParseNode({self.tag!r}, {self.contents!r})"


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            raise LispySyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        for nm in TOKEN_RE.groupindex:
            value = m.group(nm)
            if value is None or nm == "comment":
                continue
            yield nm, value
            break


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[ParseNode]:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type in ("number", "symbol"):
            self.advance()
            return ParseNode(tok_type, tok_val)

        # S-group or Q-group
        if tok_type in CLOSING:
            self.advance()
            closing = CLOSING[tok_type]
            node = ParseNode(GROUP_TAGS[tok_type], children=[ParseNode("char", tok_val)])
            while True:
                next_type, next_val = self.peek()
                if next_type is None:
                    raise LispySyntaxError(f"Unmatched '{tok_val}'")
                if next_type == closing:
                    self.advance()
                    node.children.append(ParseNode("char", next_val))
                    return node
                if next_type in ("rparen", "rbrace"):
                    raise LispySyntaxError(f"Mismatched '{next_val}' for '{tok_val}'")
                node.children.append(self.parse_expr())

        raise LispySyntaxError(f"Unexpected '{tok_val}'")

    def parse_all(self) -> Iterator[ParseNode]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> ParseNode:
    """Parse a whole line/program into a root node holding every expression."""
    stream = TokenStream(lex(source))
    children = [ParseNode("regex")]
    children.extend(stream.parse_all())
    children.append(ParseNode("regex"))
    return ParseNode(">", children=children)
