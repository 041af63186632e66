"""Evaluating and converting arithmetic expressions, and related string checks."""

import operator
from collections.abc import Callable
from string import ascii_letters, digits


def _truncating_div(left: int, right: int) -> int:
    """Integer division that rounds toward zero."""
    if right == 0:
        raise ZeroDivisionError("division by zero in expression")
    quotient = abs(left) // abs(right)
    return quotient if (left >= 0) == (right >= 0) else -quotient


_INTEGER_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}

_FLOAT_OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands with integer arithmetic.

    Division truncates toward zero. An operator met when only one operand is
    on the stack ends the evaluation and yields that operand.
    """
    stack: list[int] = []
    for char in expression:
        if char in digits:
            stack.append(int(char))
            continue
        if not stack:
            raise ValueError(f"operator {char!r} has no operands")
        right = stack.pop()
        if not stack:
            return right
        try:
            apply = _INTEGER_OPERATORS[char]
        except KeyError:
            raise ValueError(f"unknown operator {char!r}") from None
        left = stack.pop()
        stack.append(apply(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def evaluate_prefix(expression: str) -> float:
    """Evaluate a prefix expression of single-digit operands."""
    stack: list[float] = []
    for char in reversed(expression):
        if char in digits:
            stack.append(float(char))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {char!r} needs two operands")
        try:
            apply = _FLOAT_OPERATORS[char]
        except KeyError:
            raise ValueError(f"unknown operator {char!r}") from None
        first = stack.pop()
        second = stack.pop()
        stack.append(apply(first, second))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def precedence(operator: str) -> int:
    """Return the binding strength of an operator, or -1 for anything else."""
    if operator == "^":
        return 3
    if operator in ("*", "/"):
        return 2
    if operator in ("+", "-"):
        return 1
    return -1


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over single-letter operands to postfix.

    Every character that is neither a letter nor a parenthesis is treated as
    an operator; operators of equal precedence associate to the left.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char in ascii_letters:
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(char) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def is_balanced(text: str) -> bool:
    """Return True if the parentheses in ``text`` are balanced.

    Every character other than ``(`` is taken as a closing parenthesis.
    """
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif depth == 0:
            return False
        else:
            depth -= 1
    return depth == 0


_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

# A symbol preceded by its subtractive partner: the value it then contributes.
_SUBTRACTIVE = {
    ("C", "M"): 800,
    ("C", "D"): 300,
    ("X", "C"): 80,
    ("X", "L"): 30,
    ("I", "X"): 8,
    ("I", "V"): 3,
}


def roman_to_int(numeral: str) -> int:
    """Convert a Roman numeral to an integer."""
    total = 0
    previous = ""
    for char in numeral:
        if char not in _ROMAN_VALUES:
            raise ValueError(f"invalid Roman numeral character {char!r}")
        total += _SUBTRACTIVE.get((previous, char), _ROMAN_VALUES[char])
        previous = char
    return total