# -*- coding: utf-8 -*-
"""
tinybasic interpreter: stored program + variables + GOSUB stack.

    it = Interpreter()
    it.feed('10 PRINT "HELLO"')
    it.feed('RUN')
"""

import logging
import re
import sys

from .errors import (
    ArithmeticOverflow,
    BasicRuntimeError,
    CannotParseNumber,
    DivisionByZero,
    LineNumberOutOfRange,
    StepLimitExceeded,
    UnknownLineNumber,
    WrongUserInput,
)
from .parser import parse_line
from .render import render_statement
from .tokenizer import INT16_MAX, INT16_MIN, tokenize

log = logging.getLogger(__name__)

PROGRAM_SIZE = 256
NUM_VARIABLES = 26

# GOSUB issued from direct mode: RETURN goes back to the prompt
DIRECT = None

_INPUT_SPLIT = re.compile(r'[\s,]+')
_INTEGER = re.compile(r'[+-]?[0-9]+$')


def _checked(value):
    if value < INT16_MIN or value > INT16_MAX:
        raise ArithmeticOverflow(value)
    return value


def _divide(a, b):
    if b == 0:
        raise DivisionByZero()
    # 0 방향으로 버림 (파이썬 // 는 내림)
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return _checked(q)


def _compare(op, a, b):
    if op == '=': return a == b
    if op == '<>': return a != b
    if op == '<': return a < b
    if op == '<=': return a <= b
    if op == '>': return a > b
    if op == '>=': return a >= b
    raise ValueError(f"Unknown relational operator {op}")


class Interpreter:
    def __init__(self, output=None, input_fn=input, max_steps=None):
        self.output = output
        self.input_fn = input_fn
        self.max_steps = max_steps

        self.program = [None] * PROGRAM_SIZE   # lineno -> (lineno, stmt)
        self.vars = [0] * NUM_VARIABLES
        self.call_stack = []                   # GOSUB return addresses (pc)
        self.pc = 0
        self.running = False
        self._jumped = False

    # Utilities
    def _write(self, text, end='\n'):
        print(text, end=end, file=self.output if self.output is not None else sys.stdout)

    def load(self, var):
        return self.vars[ord(var[1]) - ord('A')]

    def store(self, var, value):
        self.vars[ord(var[1]) - ord('A')] = value

    def _jump_target(self, expr):
        target = self.eval_expr(expr)
        if target < 0 or target >= PROGRAM_SIZE:
            raise LineNumberOutOfRange(target)
        if self.program[target] is None:
            raise UnknownLineNumber(target)
        return target

    def _jump(self, target):
        log.debug("jump %d -> %d", self.pc, target)
        if self.running:
            self.pc = target
            self._jumped = True
        else:
            self._run_from(target)

    # Entry points
    def feed(self, text):
        """Tokenize, parse and process one line of source text."""
        self.process(parse_line(tokenize(text)))

    def process(self, line):
        lineno, st = line
        if lineno is None:
            self.execute(st)
        elif st is None:
            log.debug("delete line %d", lineno)
            self.program[lineno] = None
        else:
            log.debug("store line %d", lineno)
            self.program[lineno] = line

    def listing(self):
        return [f"{ln} {render_statement(st)}" for ln, st in filter(None, self.program)]

    def run(self):
        self.call_stack = []
        self._run_from(0)

    def _run_from(self, start):
        self.pc = start
        self.running = True
        steps = 0
        log.debug("run from line %d", start)
        try:
            while self.running and self.pc < PROGRAM_SIZE:
                ln = self.program[self.pc]
                if ln is None:
                    self.pc += 1
                    continue
                self._jumped = False
                try:
                    if self.max_steps is not None and steps >= self.max_steps:
                        raise StepLimitExceeded(self.max_steps)
                    steps += 1
                    self.execute(ln[1])
                except BasicRuntimeError as e:
                    if e.line_number is None:
                        e.line_number = ln[0]
                    raise
                if not self._jumped:
                    self.pc += 1
        finally:
            self.running = False
            log.debug("run stopped at line %d after %d steps", self.pc, steps)

    # Expression evaluation
    def eval_expr(self, node):
        _, sign, first, rest = node
        value = self.eval_term(first)
        if sign == '-':
            value = _checked(-value)
        for op, t in rest:
            rhs = self.eval_term(t)
            value = _checked(value + rhs if op == '+' else value - rhs)
        return value

    def eval_term(self, node):
        _, first, rest = node
        value = self.eval_factor(first)
        for op, factor in rest:
            rhs = self.eval_factor(factor)
            if op == '*':
                value = _checked(value * rhs)
            else:
                value = _divide(value, rhs)
        return value

    def eval_factor(self, node):
        typ = node[0]
        if typ == 'NUM': return node[1]
        if typ == 'VAR': return self.load(node)
        if typ == 'GROUP': return self.eval_expr(node[1])
        raise ValueError(f"Unknown factor node {node}")

    # Statement execution
    def execute(self, st):
        typ = st[0]
        if typ == 'PRINT':
            for i, item in enumerate(st[1]):
                if item[0] == 'STR':
                    text = item[1].decode('utf-8', errors='replace')
                else:
                    text = str(self.eval_expr(item))
                self._write(text if i == 0 else ' ' + text, end='')
            self._write('')
        elif typ == 'IF':
            _, left, op, right, then = st
            if _compare(op, self.eval_expr(left), self.eval_expr(right)):
                self.execute(then)
        elif typ == 'GOTO':
            self._jump(self._jump_target(st[1]))
        elif typ == 'INPUT':
            self._input(st[1])
        elif typ == 'LET':
            self.store(st[1], self.eval_expr(st[2]))
        elif typ == 'GOSUB':
            target = self._jump_target(st[1])
            self.call_stack.append(self.pc if self.running else DIRECT)
            log.debug("gosub %d, stack depth %d", target, len(self.call_stack))
            self._jump(target)
        elif typ == 'RETURN':
            self._return()
        elif typ == 'CLEAR':
            log.debug("clear program")
            self.program = [None] * PROGRAM_SIZE
        elif typ == 'LIST':
            for text in self.listing():
                self._write(text)
        elif typ == 'RUN':
            if self.running:
                self.call_stack = []
                self._jump(0)
            else:
                self.run()
        elif typ == 'END':
            self.running = False
        else:
            raise ValueError(f"Unknown stmt {st}")

    def _return(self):
        if not self.call_stack:
            # GOSUB 없이 RETURN: 실행 종료
            self.running = False
            return
        saved = self.call_stack.pop()
        log.debug("return to %s, stack depth %d", saved, len(self.call_stack))
        if saved is DIRECT:
            self.running = False
        elif self.running:
            self.pc = saved + 1
            self._jumped = True
        else:
            self._run_from(saved + 1)

    def _input(self, variables):
        try:
            s = self.input_fn("? ")
        except EOFError:
            raise WrongUserInput(len(variables), 0) from None
        parts = [p for p in _INPUT_SPLIT.split(s.strip()) if p]
        values = []
        for p in parts:
            if not _INTEGER.match(p):
                raise CannotParseNumber(p)
            v = int(p)
            if v < INT16_MIN or v > INT16_MAX:
                raise CannotParseNumber(p)
            values.append(v)
        if len(values) != len(variables):
            raise WrongUserInput(len(variables), len(values))
        for var, v in zip(variables, values):
            self.store(var, v)
