import pytest

from webcalc.cells import Operator, ParseResult, Value, Variable
from webcalc.errors import AssignmentError, ParseError
from webcalc.parser import parse_number, parse_prefix


def test_equation_cells_are_classified():
    equation, bindings = parse_prefix("+ 2 / pi 35")
    assert equation == [Operator('+'), Value(2.0), Operator('/'), Variable('pi'), Value(35.0)]
    assert bindings == {}


def test_parentheses_are_dropped():
    equation, _ = parse_prefix("/ ( + a 1 ) ( - b 2.5 )")
    assert equation == [
        Operator('/'), Operator('+'), Variable('a'), Value(1.0),
        Operator('-'), Variable('b'), Value(2.5),
    ]


def test_assignment_yields_single_binding():
    result = parse_prefix("= a 1")
    assert result == ParseResult([], {'a': 1.0})
    assert result.is_assignment
    assert not result.is_empty


def test_assignment_with_negative_value():
    assert parse_prefix("= a -3").bindings == {'a': -3.0}


def test_signed_literal_in_equation_is_a_value():
    equation, _ = parse_prefix("* 2 -3")
    assert equation == [Operator('*'), Value(2.0), Value(-3.0)]


def test_signed_identifier_splits_into_operator_and_variable():
    equation, _ = parse_prefix("/ h -i")
    assert equation == [Operator('/'), Variable('h'), Operator('-'), Variable('i')]


def test_empty_input_is_empty_result():
    result = parse_prefix("   ")
    assert result.is_empty
    assert result == ParseResult([], {})


@pytest.mark.parametrize("text", [
    "= a",        # missing value
    "=",          # missing name and value
    "= a b",      # non-numeric value
    "= 3 4",      # numeric name
    "= ( 4",      # parenthesis as name
])
def test_malformed_assignment(text):
    with pytest.raises(AssignmentError) as e:
        parse_prefix(text)
    assert "Equals can only take the form of variable = value." in str(e.value)


def test_assignment_with_trailing_tokens():
    with pytest.raises(AssignmentError) as e:
        parse_prefix("= a 1 2")
    assert "Cannot solve for value." in str(e.value)


def test_equals_inside_equation_is_rejected():
    with pytest.raises(ParseError):
        parse_prefix("+ a = b 2")


def test_parse_number():
    assert parse_number("2") == 2.0
    assert parse_number("-2.5") == -2.5
    assert parse_number("x") is None


def test_structure_is_not_validated():
    # operand checking happens at evaluation time
    equation, _ = parse_prefix("+ +")
    assert equation == [Operator('+'), Operator('+')]


def test_digit_separators_are_not_numbers():
    assert parse_number("1_000") is None
    equation, _ = parse_prefix("+ 1_000 inf")
    assert equation == [Operator('+'), Variable('1_000'), Value(float('inf'))]
