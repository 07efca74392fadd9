"""Differential fuzzer: compares simple_lang with Python's eval on random well-formed expressions."""
import math
import random
import warnings

from simple_lang.interpreter import evaluate_code
from simple_lang.parser import ParserError
from simple_lang.runtime import CalcRuntimeError

warnings.filterwarnings("ignore")

OPERATORS = "+-*/"


def generate(rng: random.Random, depth: int = 3) -> str:
    if depth <= 0 or rng.random() < 0.3:
        number = str(rng.randint(0, 99))
        if rng.random() < 0.3:
            number += "." + str(rng.randint(0, 99))
        return number
    left = generate(rng, depth - 1)
    right = generate(rng, depth - 1)
    code = f"{left}{' ' * rng.randint(0, 1)}{rng.choice(OPERATORS)}{' ' * rng.randint(0, 1)}{right}"
    return f"({code})" if rng.random() < 0.4 else code


def eval_py(code: str) -> float | str:
    try:
        return float(eval(code))
    except ZeroDivisionError as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return evaluate_code(code, variables={})
    except (ParserError, CalcRuntimeError) as e:
        return str(e)


def results_agree(res_py: float | str, res_my: float | str) -> bool:
    if isinstance(res_py, float) and isinstance(res_my, float):
        return math.isclose(res_my, res_py, rel_tol=1e-9, abs_tol=1e-9)
    return isinstance(res_py, str) and isinstance(res_my, str)


if __name__ == "__main__":
    rng = random.Random()
    while True:
        code = generate(rng)
        res_py = eval_py(code)
        res_my = eval_my(code)
        if not results_agree(res_py, res_my):
            print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
