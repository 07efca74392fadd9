import logging
import operator
from dataclasses import dataclass
from typing import Callable

from simple_lang.parser import Assignment, BinaryOperation, BinaryOperator, Expression, NumberLiteral, Variable

logger = logging.getLogger(__name__)

Variables = dict[str, float]
BinaryOperationImpl = Callable[[float, float], float]


@dataclass
class CalcRuntimeError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return f"Runtime error: {self.errmsg}"


def _divide(a: float, b: float) -> float:
    if b == 0.0:
        raise CalcRuntimeError("Division by zero")
    return a / b


BINARY_OPERATION_IMPLS: dict[BinaryOperator, BinaryOperationImpl] = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUB: operator.sub,
    BinaryOperator.MUL: operator.mul,
    BinaryOperator.DIV: _divide,
}


def evaluate(expression: Expression, variables: Variables) -> float:
    """Evaluate an expression tree, reading and assigning variables in place."""
    if isinstance(expression, NumberLiteral):
        return expression.value
    elif isinstance(expression, Variable):
        if expression.name not in variables:
            raise CalcRuntimeError(f"Undefined variable: {expression.name}")
        return variables[expression.name]
    elif isinstance(expression, Assignment):
        value = evaluate(expression.value, variables)
        variables[expression.name] = value
        logger.debug("%s = %s", expression.name, value)
        return value
    elif isinstance(expression, BinaryOperation):
        left_res = evaluate(expression.left, variables)
        right_res = evaluate(expression.right, variables)
        return eval_binary_operation(expression.operator, left_res, right_res)
    else:
        raise CalcRuntimeError(f"Unexpected expression type: {expression}")


def eval_binary_operation(
    op: BinaryOperator, a: float, b: float, table: dict[BinaryOperator, BinaryOperationImpl] | None = None
) -> float:
    impl = (BINARY_OPERATION_IMPLS if table is None else table).get(op)
    if impl is None:
        raise CalcRuntimeError(f"Unknown operator: {op}")
    return impl(a, b)
