# -*- coding: utf-8 -*-
"""
tinybasic 토크나이저 (한 줄 단위)
필요 패키지: pip install lark

Lark의 basic lexer로 문자열을 잘라낸 뒤, 숫자/키워드/변수/문자열을
BASIC 토큰으로 분류한다.
"""

from typing import List

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from .errors import (
    InvalidCharacter,
    NonTerminatedString,
    NumberOutOfRange,
    UnknownIdentifier,
)

INT16_MIN = -32768
INT16_MAX = 32767

KEYWORDS = {
    'PRINT', 'IF', 'THEN', 'GOTO', 'INPUT', 'LET',
    'GOSUB', 'RETURN', 'CLEAR', 'LIST', 'RUN', 'END',
}

# -----------------------------
# Lark lexicon (lexer="basic")
# -----------------------------
# 규칙(rule)에 쓰이지 않는 터미널은 Lark가 버리므로 item에 전부 나열한다.
LEXICON = r"""
start: item*

item: COMMA | LPAR | RPAR
    | LE | GE | NE | LT | GT | EQ
    | PLUS | MINUS | MUL | DIV
    | NUMBER | WORD | STRING

COMMA: ","
LPAR: "("
RPAR: ")"

LE: "<="
GE: ">="
NE: "<>" | "><"
LT: "<"
GT: ">"
EQ: "="

PLUS: "+"
MINUS: "-"
MUL: "*"
DIV: "/"

NUMBER: /[0-9]+/
WORD: /[A-Za-z][A-Za-z0-9]*/
STRING: /"[^"]*"/

%ignore /[ \t\n\r\f\v]+/
"""

_lexer = Lark(LEXICON, parser="lalr", lexer="basic")

# lark terminal name -> token type, for tokens that carry no value
PUNCTUATION = {
    'COMMA', 'LPAR', 'RPAR',
    'EQ', 'NE', 'LT', 'LE', 'GT', 'GE',
    'PLUS', 'MINUS', 'MUL', 'DIV',
}

SYMBOLS = {
    'COMMA': ',', 'LPAR': '(', 'RPAR': ')',
    'EQ': '=', 'NE': '<>', 'LT': '<', 'LE': '<=', 'GT': '>', 'GE': '>=',
    'PLUS': '+', 'MINUS': '-', 'MUL': '*', 'DIV': '/',
}


class Token:
    __slots__ = ('type', 'val', 'pos')

    def __init__(self, typ, val=None, pos=None):
        self.type = typ
        self.val = val
        self.pos = pos

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.val == other.val

    def __hash__(self):
        return hash((self.type, self.val))

    def __repr__(self):
        if self.val is None:
            return f"Token({self.type})"
        return f"Token({self.type},{self.val!r})"

    def __str__(self):
        if self.type in SYMBOLS:
            return f"'{SYMBOLS[self.type]}'"
        if self.type == 'NUMBER':
            return f"number {self.val}"
        if self.type == 'VAR':
            return f"variable {self.val}"
        if self.type == 'STRING':
            return "string literal"
        return self.type


def _number(digits, pos, text):
    value = 0
    for d in digits:
        value = value * 10 + (ord(d) - ord('0'))
        if value > INT16_MAX:
            raise NumberOutOfRange(digits, pos, text)
    return value


def _classify(tok, text):
    kind = tok.type
    pos = tok.start_pos
    if kind in PUNCTUATION:
        return Token(kind, pos=pos)
    if kind == 'NUMBER':
        return Token('NUMBER', _number(str(tok), pos, text), pos)
    if kind == 'STRING':
        # latin-1 로 돌려서 원래 바이트 그대로 복원
        return Token('STRING', str(tok)[1:-1].encode('latin-1'), pos)
    # WORD
    word = str(tok).upper()
    if len(word) == 1:
        return Token('VAR', word, pos)
    if word in KEYWORDS:
        return Token(word, pos=pos)
    raise UnknownIdentifier(word, pos, text)


def tokenize(line) -> List[Token]:
    """Split one source line (bytes or str) into a list of tokens."""
    if isinstance(line, str):
        line = line.encode('utf-8')
    # one char per byte, so columns are byte offsets
    text = bytes(line).decode('latin-1')

    tokens = []
    try:
        for tok in _lexer.lex(text):
            tokens.append(_classify(tok, text))
    except UnexpectedCharacters as e:
        pos = e.pos_in_stream
        if text[pos] == '"':
            raise NonTerminatedString(pos, text) from e
        raise InvalidCharacter(text[pos], pos, text) from e
    return tokens
