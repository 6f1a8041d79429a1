# -*- coding: utf-8 -*-
"""
Tuple-based AST for tinybasic.

Every node is a tuple whose first item is its tag:

    ('VAR', 'A')                      variable
    ('NUM', 10)                       number literal
    ('STR', b'text')                  string literal (PRINT only)
    ('GROUP', expr)                   parenthesised expression
    ('TERM', factor, [(op, factor)])  op in '*', '/'
    ('EXPR', sign, term, [(op, term)])   sign in '+', '-', None; op in '+', '-'

Statements:

    ('PRINT', [elem, ...])            elem is ('STR', ...) or an expression
    ('IF', left, relop, right, then)
    ('GOTO', expr)   ('GOSUB', expr)
    ('INPUT', [var, ...])
    ('LET', var, expr)
    ('RETURN',) ('CLEAR',) ('LIST',) ('RUN',) ('END',)

A line is (lineno, stmt); lineno is None for direct mode.
"""

from typing import Any, Optional, Tuple

Stmt = Tuple[Any, ...]
Line = Tuple[Optional[int], Optional[Stmt]]


# ---- leaves ----
def variable(letter):
    if not (isinstance(letter, str) and len(letter) == 1 and 'A' <= letter <= 'Z'):
        raise ValueError(f"variable name must be one uppercase ASCII letter, not {letter!r}")
    return ('VAR', letter)

def number(value): return ('NUM', value)
def string(raw: bytes): return ('STR', bytes(raw))
def group(expr): return ('GROUP', expr)


# ---- expression levels ----
def term(first, rest=None):
    return ('TERM', first, list(rest or []))

def expression(first_term, rest=None, sign=None):
    return ('EXPR', sign, first_term, list(rest or []))

def simple(factor):
    """Wrap a single factor into a full expression node."""
    return expression(term(factor))


# ---- statements ----
def print_stmt(*elements): return ('PRINT', list(elements))
def if_stmt(left, op, right, then): return ('IF', left, op, right, then)
def goto_stmt(expr): return ('GOTO', expr)
def input_stmt(*variables): return ('INPUT', list(variables))
def let_stmt(var, expr): return ('LET', var, expr)
def gosub_stmt(expr): return ('GOSUB', expr)

RETURN = ('RETURN',)
CLEAR = ('CLEAR',)
LIST = ('LIST',)
RUN = ('RUN',)
END = ('END',)


def line(lineno, stmt) -> Line:
    return (lineno, stmt)

