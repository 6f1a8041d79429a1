import pytest

from tinybasic import nodes
from tinybasic.errors import (
    ExpectedVariable,
    InvalidLineNumber,
    MissingLineNumber,
    MissingRelationalOperator,
    NoMoreTokens,
    TrailingTokens,
    UnexpectedToken,
    UnknownStatement,
)
from tinybasic.parser import parse_line, parse_program_line, parse_statement
from tinybasic.tokenizer import Token, tokenize


def num(n):
    return nodes.simple(nodes.number(n))


def var(letter):
    return nodes.simple(nodes.variable(letter))


def test_numbered_print():
    two_plus_three = nodes.expression(
        nodes.term(nodes.number(2)), [('+', nodes.term(nodes.number(3)))])
    assert parse_program_line(tokenize('10 PRINT 2+3')) == (10, ('PRINT', [two_plus_three]))


def test_print_list_mixes_strings_and_expressions():
    st = parse_statement(tokenize('PRINT "A", B, "C"'))
    assert st == ('PRINT', [('STR', b'A'), var('B'), ('STR', b'C')])


def test_precedence_shape():
    st = parse_statement(tokenize('LET X = 2 + 3 * 4'))
    expected = nodes.expression(
        nodes.term(nodes.number(2)),
        [('+', nodes.term(nodes.number(3), [('*', nodes.number(4))]))],
    )
    assert st == ('LET', ('VAR', 'X'), expected)


def test_parenthesised_factor():
    st = parse_statement(tokenize('GOTO (1 + 2) * 4'))
    inner = nodes.expression(nodes.term(nodes.number(1)), [('+', nodes.term(nodes.number(2)))])
    expected = nodes.expression(nodes.term(nodes.group(inner), [('*', nodes.number(4))]))
    assert st == ('GOTO', expected)


def test_leading_sign():
    assert parse_statement(tokenize('GOSUB -A'))[1][1] == '-'
    assert parse_statement(tokenize('GOSUB +A'))[1][1] == '+'
    assert parse_statement(tokenize('GOSUB A'))[1][1] is None


def test_left_associative_terms():
    expr = parse_statement(tokenize('GOTO 8 - 4 - 2'))[1]
    assert [op for op, _ in expr[3]] == ['-', '-']


def test_if_then_nested():
    st = parse_statement(tokenize('IF A >= 1 THEN IF B <> 2 THEN GOTO 10'))
    assert st[0] == 'IF'
    assert st[2] == '>='
    inner = st[4]
    assert inner[0] == 'IF' and inner[2] == '<>'
    assert inner[4] == ('GOTO', num(10))


def test_input_list():
    assert parse_statement(tokenize('INPUT A, B, C')) == (
        'INPUT', [('VAR', 'A'), ('VAR', 'B'), ('VAR', 'C')])


@pytest.mark.parametrize('kw', ['RETURN', 'CLEAR', 'LIST', 'RUN', 'END'])
def test_bare_keywords(kw):
    assert parse_statement(tokenize(kw)) == (kw,)


def test_parse_line_direct_and_numbered():
    assert parse_line(tokenize('RUN')) == (None, ('RUN',))
    assert parse_line(tokenize('20 END')) == (20, ('END',))


def test_bare_line_number_means_delete():
    assert parse_program_line(tokenize('30')) == (30, None)


def test_missing_line_number():
    with pytest.raises(MissingLineNumber) as exc:
        parse_program_line(tokenize('PRINT 1'))
    assert exc.value.found == Token('PRINT')
    with pytest.raises(MissingLineNumber):
        parse_program_line([])


def test_line_number_above_255():
    with pytest.raises(InvalidLineNumber) as exc:
        parse_program_line(tokenize('256 END'))
    assert exc.value.value == 256


def test_unexpected_token_records_expected_and_found():
    with pytest.raises(UnexpectedToken) as exc:
        parse_statement(tokenize('LET A 5'))
    assert exc.value.expected == 'EQ'
    assert exc.value.found == Token('NUMBER', 5)


def test_missing_then():
    with pytest.raises(UnexpectedToken) as exc:
        parse_statement(tokenize('IF A = 1 PRINT A'))
    assert exc.value.expected == 'THEN'


def test_no_more_tokens():
    with pytest.raises(NoMoreTokens):
        parse_statement(tokenize('LET A ='))
    with pytest.raises(NoMoreTokens):
        parse_statement(tokenize('GOTO (1 + 2'))
    with pytest.raises(NoMoreTokens):
        parse_statement([])


def test_expected_variable():
    with pytest.raises(ExpectedVariable):
        parse_statement(tokenize('INPUT 5'))
    with pytest.raises(ExpectedVariable):
        parse_statement(tokenize('INPUT A,'))


def test_missing_relational_operator():
    with pytest.raises(MissingRelationalOperator) as exc:
        parse_statement(tokenize('IF A THEN END'))
    assert exc.value.found == Token('THEN')


def test_unknown_statement():
    with pytest.raises(UnknownStatement):
        parse_statement(tokenize('A = 1'))
    with pytest.raises(UnknownStatement):
        parse_statement(tokenize('THEN'))


def test_trailing_tokens():
    with pytest.raises(TrailingTokens):
        parse_statement(tokenize('PRINT 1 2'))
    with pytest.raises(TrailingTokens):
        parse_program_line(tokenize('10 END END'))


def test_string_outside_print_is_rejected():
    with pytest.raises(UnexpectedToken) as exc:
        parse_statement(tokenize('LET A = "X"'))
    assert exc.value.expected == 'LPAR'


def test_variable_constructor_rejects_bad_letters():
    for bad in ('a', 'AB', '1', '', b'A'):
        with pytest.raises(ValueError):
            nodes.variable(bad)
