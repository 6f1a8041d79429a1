import pytest

from tinybasic.parser import parse_program_line, parse_statement
from tinybasic.render import render_line, render_statement
from tinybasic.tokenizer import tokenize

STATEMENTS = [
    'PRINT "Hello, World!"',
    'PRINT "A = ", A, "B = ", B * 2',
    'IF A < B THEN PRINT Z',
    'IF A + 1 <> (B - 2) * C THEN IF B >= 0 THEN GOTO 10',
    'IF -A <= 3 THEN END',
    'IF A > B THEN RETURN',
    'IF A = B THEN LET C = 1',
    'GOTO 100',
    'GOTO A * 10 + 5',
    'INPUT A, B, C',
    'LET X = -(A + B) / 2',
    'LET Y = +7',
    'GOSUB 200',
    'RETURN',
    'CLEAR',
    'LIST',
    'RUN',
    'END',
]


@pytest.mark.parametrize('source', STATEMENTS)
def test_render_is_canonical(source):
    assert render_statement(parse_statement(tokenize(source))) == source


@pytest.mark.parametrize('source', STATEMENTS)
def test_round_trip(source):
    st = parse_statement(tokenize(source))
    again = parse_statement(tokenize(render_statement(st)))
    assert again == st


def test_compact_source_is_spaced_out():
    st = parse_statement(tokenize('let a=(1+2)*b/c'))
    assert render_statement(st) == 'LET A = (1 + 2) * B / C'


def test_render_line():
    assert render_line(parse_program_line(tokenize('10 print 2+3'))) == '10 PRINT 2 + 3'
