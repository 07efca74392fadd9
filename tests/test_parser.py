import pytest

from simple_lang.parser import (
    Assignment,
    BinaryOperation,
    BinaryOperator,
    Expression,
    NumberLiteral,
    ParserError,
    Variable,
    parse,
)
from simple_lang.tokenizer import Token, TokenType, tokenize


@pytest.mark.parametrize(
    "code, expected_ast",
    [
        pytest.param("4", NumberLiteral(4.0)),
        pytest.param("x", Variable("x")),
        pytest.param(
            "a - b - c",
            BinaryOperation(
                BinaryOperator.SUB,
                BinaryOperation(BinaryOperator.SUB, Variable("a"), Variable("b")),
                Variable("c"),
            ),
        ),
        pytest.param(
            "1 + 2 * 3",
            BinaryOperation(
                BinaryOperator.ADD,
                NumberLiteral(1.0),
                BinaryOperation(BinaryOperator.MUL, NumberLiteral(2.0), NumberLiteral(3.0)),
            ),
        ),
        pytest.param(
            "(1 + 2) / 3",
            BinaryOperation(
                BinaryOperator.DIV,
                BinaryOperation(BinaryOperator.ADD, NumberLiteral(1.0), NumberLiteral(2.0)),
                NumberLiteral(3.0),
            ),
        ),
        pytest.param(
            "x = 1 + 2",
            Assignment("x", BinaryOperation(BinaryOperator.ADD, NumberLiteral(1.0), NumberLiteral(2.0))),
        ),
        pytest.param("a = b = 1", Assignment("a", Assignment("b", NumberLiteral(1.0)))),
        pytest.param("1 2 3", NumberLiteral(1.0)),
    ],
)
def test_parse(code: str, expected_ast: Expression) -> None:
    assert parse(tokenize(code)) == expected_ast


@pytest.mark.parametrize(
    "code, expected_errmsg, expected_idx",
    [
        pytest.param("(1 + 2", "Expected ')'", 4),
        pytest.param("1 * )", "Unexpected token: )", 2),
        pytest.param("= 1", "Unexpected token: =", 0),
        pytest.param("", "Unexpected token: ", 0),
    ],
)
def test_parse_errors(code: str, expected_errmsg: str, expected_idx: int) -> None:
    with pytest.raises(ParserError) as exc_info:
        parse(tokenize(code))
    assert exc_info.value.errmsg == expected_errmsg
    assert exc_info.value.error_token_idx == expected_idx


def test_parse_without_end_token() -> None:
    tokens = [Token(TokenType.NUMBER, "1"), Token(TokenType.PLUS, "+"), Token(TokenType.NUMBER, "2")]
    assert parse(tokens) == BinaryOperation(BinaryOperator.ADD, NumberLiteral(1.0), NumberLiteral(2.0))


def test_parser_error_points_at_token() -> None:
    with pytest.raises(ParserError) as exc_info:
        parse(tokenize("1 * )"))
    assert str(exc_info.value).splitlines() == ["Parser error: Unexpected token: )", "1 *)", "    ^"]


def test_malformed_number() -> None:
    tokens = [Token(TokenType.NUMBER, "1e"), Token(TokenType.EXPR_END, "")]
    with pytest.raises(ParserError) as exc_info:
        parse(tokens)
    assert exc_info.value.errmsg == "Malformed number: 1e"
    assert exc_info.value.error_token_idx == 0
