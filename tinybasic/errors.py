# -*- coding: utf-8 -*-
"""
Error hierarchy for tinybasic.

Source problems (lexing / parsing) derive from SyntaxError,
execution problems from RuntimeError.
"""


def _lex_window(text, pos, width=120):
    a = max(0, pos-width//2); b = min(len(text), pos+width//2)
    caret = ' ' * (pos-a) + '^'
    return text[a:b] + "\n" + caret


def describe(token):
    """Human readable name of a token (or of the end of the line)."""
    if token is None:
        return "end of line"
    return str(token)


# =========================
# Syntax errors
# =========================
class BasicSyntaxError(SyntaxError):
    pass


class LexError(BasicSyntaxError):
    def __init__(self, msg, pos=None, text=None):
        self.pos = pos
        self.text = text
        if text is not None and pos is not None:
            msg = f"{msg}\n{_lex_window(text, pos)}"
        super().__init__(msg)


class InvalidCharacter(LexError):
    def __init__(self, char, pos, text=None):
        self.char = char
        super().__init__(f"invalid character {char!r} at column {pos}", pos, text)


class UnknownIdentifier(LexError):
    def __init__(self, word, pos, text=None):
        self.word = word
        super().__init__(f"unknown identifier {word!r}", pos, text)


class NonTerminatedString(LexError):
    def __init__(self, pos, text=None):
        super().__init__("non-terminated string", pos, text)


class NumberOutOfRange(LexError):
    def __init__(self, digits, pos, text=None):
        self.digits = digits
        super().__init__(f"number {digits} does not fit in 16 bits", pos, text)


class ParseError(BasicSyntaxError):
    pass


class UnexpectedToken(ParseError):
    def __init__(self, expected, found):
        self.expected = expected
        self.found = found
        super().__init__(f"expected {expected} but got {describe(found)}")


class NoMoreTokens(ParseError):
    def __init__(self, expected):
        self.expected = expected
        super().__init__(f"no more tokens, expected {expected}")


class ExpectedVariable(ParseError):
    def __init__(self, found):
        self.found = found
        super().__init__(f"expected a variable but got {describe(found)}")


class MissingRelationalOperator(ParseError):
    def __init__(self, found):
        self.found = found
        super().__init__(f"IF needs a relational operator, got {describe(found)}")


class UnknownStatement(ParseError):
    def __init__(self, found):
        self.found = found
        super().__init__(f"unknown statement {describe(found)}")


class MissingLineNumber(ParseError):
    def __init__(self, found):
        self.found = found
        super().__init__(f"line must start with line number, got {describe(found)}")


class InvalidLineNumber(ParseError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"line number {value} is not in 0..255")


class TrailingTokens(ParseError):
    def __init__(self, found):
        self.found = found
        super().__init__(f"unexpected {describe(found)} after end of statement")


# =========================
# Runtime errors
# =========================
class BasicRuntimeError(RuntimeError):
    # filled in by the RUN loop with the line being executed
    line_number = None


class LineNumberOutOfRange(BasicRuntimeError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"line number {value} out of range")


class UnknownLineNumber(BasicRuntimeError):
    def __init__(self, number):
        self.number = number
        super().__init__(f"line {number} not found")


class WrongUserInput(BasicRuntimeError):
    def __init__(self, expected, got):
        self.expected = expected
        self.got = got
        super().__init__(f"wrong user input: expected {expected} number(s), got {got}")


class CannotParseNumber(BasicRuntimeError):
    def __init__(self, text):
        self.text = text
        super().__init__(f"cannot parse number {text!r}")


class DivisionByZero(BasicRuntimeError):
    def __init__(self):
        super().__init__("division by zero")


class ArithmeticOverflow(BasicRuntimeError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"arithmetic overflow ({value} does not fit in 16 bits)")


class StepLimitExceeded(BasicRuntimeError):
    def __init__(self, limit):
        self.limit = limit
        super().__init__(f"program did not stop after {limit} steps")
