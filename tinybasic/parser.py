# -*- coding: utf-8 -*-
"""
Recursive descent parser: token list -> (lineno, stmt).

    Line       := [NUMBER] Statement
    Statement  := PRINT ExprListElem (',' ExprListElem)*
                | IF Expression RelOp Expression THEN Statement
                | GOTO Expression
                | INPUT Variable (',' Variable)*
                | LET Variable '=' Expression
                | GOSUB Expression
                | RETURN | CLEAR | LIST | RUN | END
    ExprListElem := STRING | Expression
    Expression := ['+'|'-'] Term (('+'|'-') Term)*
    Term       := Factor (('*'|'/') Factor)*
    Factor     := VAR | NUMBER | '(' Expression ')'
"""

from . import nodes
from .errors import (
    ExpectedVariable,
    InvalidLineNumber,
    MissingLineNumber,
    MissingRelationalOperator,
    NoMoreTokens,
    TrailingTokens,
    UnexpectedToken,
    UnknownStatement,
)

MAX_LINENO = 255

RELOP_TOKENS = {'EQ': '=', 'NE': '<>', 'LT': '<', 'LE': '<=', 'GT': '>', 'GE': '>='}
ADD_TOKENS = {'PLUS': '+', 'MINUS': '-'}
MUL_TOKENS = {'MUL': '*', 'DIV': '/'}


class Parser:
    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.i = 0

    # ----- cursor -----
    def peek(self):
        return self.tokens[self.i] if self.i < len(self.tokens) else None

    def match(self, *types):
        t = self.peek()
        if t is None or t.type not in types:
            return None
        self.i += 1
        return t

    def expect(self, typ):
        t = self.peek()
        if t is None:
            raise NoMoreTokens(typ)
        if t.type != typ:
            raise UnexpectedToken(typ, t)
        self.i += 1
        return t

    def finish(self):
        t = self.peek()
        if t is not None:
            raise TrailingTokens(t)

    # ----- lines -----
    def parse_program_line(self):
        t = self.peek()
        if t is None or t.type != 'NUMBER':
            raise MissingLineNumber(t)
        self.i += 1
        if t.val > MAX_LINENO:
            raise InvalidLineNumber(t.val)
        # 번호만 있는 줄 = 해당 줄 삭제
        if self.peek() is None:
            return nodes.line(t.val, None)
        stmt = self.parse_statement()
        self.finish()
        return nodes.line(t.val, stmt)

    def parse_direct(self):
        stmt = self.parse_statement()
        self.finish()
        return stmt

    def parse_line(self):
        t = self.peek()
        if t is not None and t.type == 'NUMBER':
            return self.parse_program_line()
        return nodes.line(None, self.parse_direct())

    # ----- statements -----
    def parse_statement(self):
        t = self.peek()
        if t is None:
            raise NoMoreTokens('statement')
        kw = t.type
        if kw == 'PRINT': self.i+=1; return nodes.print_stmt(*self.parse_print_list())
        if kw == 'IF': self.i+=1; return self.parse_if()
        if kw == 'GOTO': self.i+=1; return nodes.goto_stmt(self.parse_expr())
        if kw == 'INPUT': self.i+=1; return nodes.input_stmt(*self.parse_var_list())
        if kw == 'LET': self.i+=1; return self.parse_let()
        if kw == 'GOSUB': self.i+=1; return nodes.gosub_stmt(self.parse_expr())
        if kw == 'RETURN': self.i+=1; return nodes.RETURN
        if kw == 'CLEAR': self.i+=1; return nodes.CLEAR
        if kw == 'LIST': self.i+=1; return nodes.LIST
        if kw == 'RUN': self.i+=1; return nodes.RUN
        if kw == 'END': self.i+=1; return nodes.END
        raise UnknownStatement(t)

    def parse_print_list(self):
        items = [self.parse_print_item()]
        while self.match('COMMA'):
            items.append(self.parse_print_item())
        return items

    def parse_print_item(self):
        t = self.match('STRING')
        if t is not None:
            return nodes.string(t.val)
        return self.parse_expr()

    def parse_if(self):
        left = self.parse_expr()
        t = self.match(*RELOP_TOKENS)
        if t is None:
            raise MissingRelationalOperator(self.peek())
        right = self.parse_expr()
        self.expect('THEN')
        then = self.parse_statement()
        return nodes.if_stmt(left, RELOP_TOKENS[t.type], right, then)

    def parse_let(self):
        var = self.parse_variable()
        self.expect('EQ')
        return nodes.let_stmt(var, self.parse_expr())

    def parse_var_list(self):
        vars_ = [self.parse_variable()]
        while self.match('COMMA'):
            vars_.append(self.parse_variable())
        return vars_

    def parse_variable(self):
        t = self.match('VAR')
        if t is None:
            raise ExpectedVariable(self.peek())
        return nodes.variable(t.val)

    # ----- expressions -----
    def parse_expr(self):
        sign = self.match(*ADD_TOKENS)
        first = self.parse_term()
        rest = []
        while True:
            t = self.match(*ADD_TOKENS)
            if t is None:
                break
            rest.append((ADD_TOKENS[t.type], self.parse_term()))
        return nodes.expression(first, rest, ADD_TOKENS[sign.type] if sign else None)

    def parse_term(self):
        first = self.parse_factor()
        rest = []
        while True:
            t = self.match(*MUL_TOKENS)
            if t is None:
                break
            rest.append((MUL_TOKENS[t.type], self.parse_factor()))
        return nodes.term(first, rest)

    def parse_factor(self):
        t = self.match('VAR', 'NUMBER')
        if t is not None:
            if t.type == 'VAR':
                return nodes.variable(t.val)
            return nodes.number(t.val)
        self.expect('LPAR')
        node = self.parse_expr()
        self.expect('RPAR')
        return nodes.group(node)


# -------------- high-level helpers --------------
def parse_program_line(tokens):
    """Parse a line that must start with its line number."""
    return Parser(tokens).parse_program_line()


def parse_statement(tokens):
    """Parse a direct statement (no line number)."""
    return Parser(tokens).parse_direct()


def parse_line(tokens):
    """Interactive entry: the line number is optional."""
    return Parser(tokens).parse_line()
