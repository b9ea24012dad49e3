import pytest

from lispy.peg import Cursor
from lispy.sexpr import (
    Symbol, List, SexprGrammar, parse_line,
    symbol, sexpr, expr, expr_list, symbol_character, whitespace,
)


def S(text):
    return Symbol(text)


def L(*elements):
    return List(tuple(elements))


# ---- example lines ----

@pytest.mark.parametrize('line, expected, leftover', [
    ('abc', S('abc'), ''),
    ('(a b c)', L(S('a'), S('b'), S('c')), ''),
    ('(a (b c) d)', L(S('a'), L(S('b'), S('c')), S('d')), ''),
    ('a)', S('a'), ')'),
    ('  (x) tail', L(S('x')), ' tail'),
    ('a b', S('a'), ' b'),
    ('((a))', L(L(S('a'))), ''),
    ('(  a\t b  )', L(S('a'), S('b')), ''),
    ('λ-x→y', S('λ-x→y'), ''),
])
def test_parse_line(line, expected, leftover):
    assert parse_line(line) == (expected, leftover)


@pytest.mark.parametrize('line', ['', '   ', '(a', ')', ')a', "'a", '()', '(  )', '(()'])
def test_parse_line_no_match(line):
    assert parse_line(line) is None


# ---- symbol ----

@pytest.mark.parametrize('text', ['a', 'abc', 'foo-bar', '+', '1.5e3', '日本語', 'a"b'])
def test_symbol_consumes_whole_token(text):
    value, tail = symbol(text)
    assert value == S(text)
    assert tail.at_end


@pytest.mark.parametrize('text', ['', ' a', '(a', ')a', "'a"])
def test_symbol_rejects_excluded_first_char(text):
    assert symbol(text) is None


def test_symbol_stops_at_delimiter():
    value, tail = symbol("ab'c")
    assert value == S('ab')
    assert tail.rest == "'c"


def test_symbol_character_and_whitespace_matchers():
    assert symbol_character(Cursor.of('x'))[0] == 'x'
    assert symbol_character(Cursor.of('(')) is None
    assert whitespace(Cursor.of('\tx'))[0] == '\t'
    assert whitespace(Cursor.of('x')) is None


# ---- sexpr ----

def test_sexpr_leftover_is_text_after_closing_paren():
    value, tail = sexpr('(a (b)) (c)')
    assert value == L(S('a'), L(S('b')))
    assert tail.rest == ' (c)'


def test_sexpr_trims_leading_whitespace():
    value, tail = sexpr('   (a)')
    assert value == L(S('a'))
    assert tail.at_end


@pytest.mark.parametrize('text', ['(a', '((a)', '(a (b c)', 'a)', ')', 'abc', ''])
def test_sexpr_unbalanced_or_not_a_group(text):
    assert sexpr(text) is None


def test_sexpr_extra_closing_paren_is_left_over():
    value, tail = sexpr('(a))')
    assert value == L(S('a'))
    assert tail.rest == ')'


def test_sexpr_empty_group_is_no_match():
    assert sexpr('()') is None
    assert sexpr('( \t )') is None
    # one-or-more applies at every level
    assert sexpr('(a ())')[0] == L(S('a'))


def test_sexpr_stops_at_unparseable_inner_text():
    # no full-consumption check inside a group
    value, tail = sexpr("(a 'b c)")
    assert value == L(S('a'))
    assert tail.at_end


# ---- expr / expr_list ----

def test_expr_prefers_symbol():
    value, tail = expr('a(b)')
    assert value == S('a')
    assert tail.rest == '(b)'


def test_expr_falls_back_to_sexpr():
    value, _ = expr(' (b)')
    assert value == L(S('b'))


def test_expr_list_collects_sequence():
    value, tail = expr_list(' a (b c)  d ')
    assert value == L(S('a'), L(S('b'), S('c')), S('d'))
    assert tail.rest == ' '


@pytest.mark.parametrize('text', ['', '    ', ')', "'"])
def test_expr_list_no_match(text):
    assert expr_list(text) is None


def test_expr_list_terminates_on_long_input():
    text = ' '.join(['x'] * 5000) + ' )'
    value, tail = expr_list(text)
    assert len(value) == 5000
    assert tail.rest == ' )'


def test_rules_accept_cursor_windows():
    c = Cursor.of('[(a b)]').window(1, 6)
    value, tail = expr(c)
    assert value == L(S('a'), S('b'))
    assert tail.at_end and tail.end == 6


# ---- nesting bound ----

def test_max_depth_allows_up_to_bound(shallow):
    assert shallow.expr('((a))')[0] == L(L(S('a')))


def test_max_depth_rejects_deeper_group(shallow):
    assert shallow.expr('(((a)))') is None
    # a too-deep group ends the enclosing list like any other unparseable text
    assert shallow.expr('(a ((b)))')[0] == L(S('a'))


def test_max_depth_zero_allows_only_symbols():
    g = SexprGrammar(max_depth=0)
    assert g.expr('(a)') is None
    assert g.expr('a')[0] == S('a')


def test_max_depth_negative_rejected():
    with pytest.raises(ValueError):
        SexprGrammar(max_depth=-1)


def test_deep_input_is_clean_no_match_when_bounded():
    g = SexprGrammar(max_depth=64)
    line = '(' * 5000 + 'a' + ')' * 5000
    assert g.expr(line) is None


def test_unbounded_grammar_follows_nesting(unbounded):
    line = '(' * 20 + 'a' + ')' * 20
    value, tail = unbounded.expr(line)
    assert tail.at_end
    for _ in range(20):
        assert isinstance(value, List) and len(value) == 1
        value = value.elements[0]
    assert value == S('a')


def test_parse_line_uses_given_grammar(shallow):
    assert parse_line('(((a)))') is not None
    assert parse_line('(((a)))', shallow) is None


def test_unbounded_grammar_parses_thousand_levels(unbounded):
    line = '(' * 1000 + 'a' + ')' * 1000 + ' rest'
    value, tail = unbounded.expr(line)
    assert tail.rest == ' rest'
    for _ in range(1000):
        assert isinstance(value, List) and len(value) == 1
        value = value.elements[0]
    assert value == S('a')


def test_deep_group_keeps_sibling_elements():
    inner = '(' * 500 + 'x' + ')' * 500
    value, tail = expr_list(f'a {inner} b')
    assert tail.at_end
    assert len(value) == 3
    assert value.elements[0] == S('a') and value.elements[2] == S('b')
    assert value.elements[1].to_source() == inner


def test_deep_unbalanced_is_no_match():
    assert parse_line('(' * 1000 + 'a' + ')' * 999) is None
