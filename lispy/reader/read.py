"""Conversion from the generic parse tree to Lispy values."""

from __future__ import annotations

import math

from lispy.errors import LispyInvalidNumber
from lispy.reader.parser import ParseNode, parse
from lispy.types.error import Error
from lispy.types.expressions import QExpr, SExpr
from lispy.types.symbol import Symbol
from lispy.types.value import Value

# Delimiter tokens and parser bookkeeping nodes carry no value.
SKIPPED_CONTENTS = frozenset({"(", ")", "{", "}"})
SKIPPED_TAGS = frozenset({"regex", "char"})


def read_number(text: str) -> Value:
    try:
        x = float(text)
    except ValueError:
        x = math.inf
    if math.isinf(x):
        # Not representable as a double.
        return Error.from_exception(LispyInvalidNumber("invalid number"))
    return x


def read(node: ParseNode) -> Value:
    """Build a value tree from `node`.

    The root node (">") and "sexpr" groups become SExpr, "qexpr" groups
    become QExpr, leaves become numbers or symbols.
    """
    if node.tag == "number":
        return read_number(node.contents)
    if node.tag == "symbol":
        return Symbol(node.contents)

    if node.tag in (">", "sexpr"):
        expr = SExpr()
    elif node.tag == "qexpr":
        expr = QExpr()
    else:
        raise ValueError(f"Cannot read parse node tagged {node.tag!r}")

    for child in node.children:
        if child.contents in SKIPPED_CONTENTS or child.tag in SKIPPED_TAGS:
            continue
        expr.append(read(child))
    return expr


def read_str(source: str) -> SExpr:
    """Parse and read `source`; the result is an SExpr of every expression."""
    return read(parse(source))
