import enum
import logging
from dataclasses import dataclass

from simple_lang.tokenizer import Token, TokenType, untokenize
from simple_lang.utils import PrintableEnum

logger = logging.getLogger(__name__)


@dataclass
class ParserError(Exception):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        parsed_code = untokenize(self.tokens[: self.error_token_idx])
        filler_whitespace = " " * (len(parsed_code) + 1) if parsed_code else ""
        return "\n".join([f"Parser error: {self.errmsg}", untokenize(self.tokens), filler_whitespace + "^"])


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()


@dataclass(frozen=True)
class NumberLiteral:
    value: float


@dataclass(frozen=True)
class BinaryOperation:
    operator: BinaryOperator
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Variable:
    name: str


@dataclass(frozen=True)
class Assignment:
    name: str
    value: "Expression"


Expression = NumberLiteral | BinaryOperation | Variable | Assignment


TERM_OPERATORS = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
}

FACTOR_OPERATORS = {
    TokenType.STAR: BinaryOperator.MUL,
    TokenType.SLASH: BinaryOperator.DIV,
}


def parse(tokens: list[Token]) -> Expression:
    """Parse a single top-level expression.

    Parsing stops after the first complete expression: any tokens left before
    the end of input are ignored, so "1 + 2 3" parses as "1 + 2".
    """
    expr, i = _consume_expression(tokens, 0)
    if _peek(tokens, i).type is not TokenType.EXPR_END:
        logger.debug("ignoring trailing tokens: %s", untokenize(tokens[i:]))
    logger.debug("ast: %s", expr)
    return expr


def _peek(tokens: list[Token], i: int) -> Token:
    if i < len(tokens):
        return tokens[i]
    return Token(type=TokenType.EXPR_END, lexeme="")


def _consume_expression(tokens: list[Token], i: int) -> tuple[Expression, int]:
    result, i = _consume_term(tokens, i)
    while _peek(tokens, i).type in TERM_OPERATORS:
        operator = TERM_OPERATORS[tokens[i].type]
        right, i = _consume_term(tokens, i + 1)
        result = BinaryOperation(operator=operator, left=result, right=right)
    return result, i


def _consume_term(tokens: list[Token], i: int) -> tuple[Expression, int]:
    result, i = _consume_factor(tokens, i)
    while _peek(tokens, i).type in FACTOR_OPERATORS:
        operator = FACTOR_OPERATORS[tokens[i].type]
        right, i = _consume_factor(tokens, i + 1)
        result = BinaryOperation(operator=operator, left=result, right=right)
    return result, i


def _consume_factor(tokens: list[Token], i: int) -> tuple[Expression, int]:
    first = _peek(tokens, i)
    if first.type is TokenType.NUMBER:
        try:
            value = float(first.lexeme)
        except ValueError:
            raise ParserError(f"Malformed number: {first.lexeme}", tokens=tokens, error_token_idx=i)
        return NumberLiteral(value), i + 1
    elif first.type is TokenType.IDENTIFIER:
        # assignment is a factor-level production, so "a = b = 1" nests as "a = (b = 1)"
        if _peek(tokens, i + 1).type is TokenType.EQUAL:
            value, i = _consume_expression(tokens, i + 2)
            return Assignment(name=first.lexeme, value=value), i
        return Variable(first.lexeme), i + 1
    elif first.type is TokenType.BRACKET_OPEN:
        expr, i = _consume_expression(tokens, i + 1)
        if _peek(tokens, i).type is not TokenType.BRACKET_CLOSE:
            raise ParserError("Expected ')'", tokens=tokens, error_token_idx=i)
        return expr, i + 1
    else:
        raise ParserError(f"Unexpected token: {first.lexeme}", tokens=tokens, error_token_idx=i)
