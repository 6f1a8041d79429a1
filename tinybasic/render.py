# -*- coding: utf-8 -*-
"""AST -> BASIC source text (used by LIST)."""


def render_factor(node):
    typ = node[0]
    if typ == 'VAR': return node[1]
    if typ == 'NUM': return str(node[1])
    if typ == 'GROUP': return '(' + render_expr(node[1]) + ')'
    raise ValueError(f"Unknown factor node {node}")


def render_term(node):
    _, first, rest = node
    out = render_factor(first)
    for op, factor in rest:
        out += f" {op} {render_factor(factor)}"
    return out


def render_expr(node):
    _, sign, first, rest = node
    out = (sign or '') + render_term(first)
    for op, t in rest:
        out += f" {op} {render_term(t)}"
    return out


def render_string(raw: bytes):
    return '"' + raw.decode('utf-8', errors='replace') + '"'


def render_statement(st):
    typ = st[0]
    if typ == 'PRINT':
        parts = []
        for item in st[1]:
            if item[0] == 'STR':
                parts.append(render_string(item[1]))
            else:
                parts.append(render_expr(item))
        return 'PRINT ' + ', '.join(parts)
    if typ == 'IF':
        _, left, op, right, then = st
        return f"IF {render_expr(left)} {op} {render_expr(right)} THEN {render_statement(then)}"
    if typ == 'GOTO': return 'GOTO ' + render_expr(st[1])
    if typ == 'GOSUB': return 'GOSUB ' + render_expr(st[1])
    if typ == 'INPUT': return 'INPUT ' + ', '.join(v[1] for v in st[1])
    if typ == 'LET': return f"LET {st[1][1]} = {render_expr(st[2])}"
    if typ in ('RETURN', 'CLEAR', 'LIST', 'RUN', 'END'):
        return typ
    raise ValueError(f"Unknown stmt {st}")


def render_line(ln):
    lineno, st = ln
    if lineno is None:
        return render_statement(st)
    return f"{lineno} {render_statement(st)}"
