# ExpressionTree.py
"""
Expression tree nodes and their evaluation.

A tree is built from two node types:
- Value: an integer literal (leaf).
- BinaryOp: an Operator applied to a left and a right subtree.

Evaluation always computes the left subtree before the right one.
"""

import math
from enum import IntEnum

from . import error as E


class Operator(IntEnum):
    """Binary operators. The value is the precedence rank used while splitting."""
    POWER = 0
    PRODUCT = 1
    DIVISION = 2
    ADDITION = 3
    SUBTRACTION = 4

    @property
    def symbol(self):
        return _SYMBOLS[self]

    @property
    def binding_level(self):
        """0 binds tightest. Product/Division and Addition/Subtraction share a level."""
        return _BINDING_LEVELS[self]

    @classmethod
    def from_symbol(cls, symbol):
        try:
            return OPERATORS[symbol]
        except KeyError:
            raise E.ParseError(E.message("2005", repr(symbol)), code="2005") from None


OPERATORS = {
    "^": Operator.POWER,
    "*": Operator.PRODUCT,
    "/": Operator.DIVISION,
    "+": Operator.ADDITION,
    "-": Operator.SUBTRACTION,
}

_SYMBOLS = {oper: symbol for symbol, oper in OPERATORS.items()}

_BINDING_LEVELS = {
    Operator.POWER: 0,
    Operator.PRODUCT: 1,
    Operator.DIVISION: 1,
    Operator.ADDITION: 2,
    Operator.SUBTRACTION: 2,
}


def truncating_division(left_value, right_value):
    """Integer division rounding toward zero (Python's // rounds toward -inf)."""
    if right_value == 0:
        raise E.ArithmeticError(E.message("3003"), code="3003")
    quotient = abs(left_value) // abs(right_value)
    if (left_value < 0) != (right_value < 0):
        return -quotient
    return quotient


def truncating_power(base, exponent):
    """base ** exponent through a float intermediate, truncated back to int."""
    try:
        return int(math.pow(base, exponent))
    except OverflowError:
        raise E.ArithmeticError(E.message("3026"), code="3026") from None
    except ValueError:
        # math.pow raises ValueError for 0 ** negative
        raise E.ArithmeticError(E.message("3027", f"{base} ^ {exponent}"), code="3027") from None


def apply(operator, left_value, right_value):
    """Apply one binary operator to two evaluated operands."""
    if operator == Operator.POWER:
        return truncating_power(left_value, right_value)
    elif operator == Operator.PRODUCT:
        return left_value * right_value
    elif operator == Operator.DIVISION:
        return truncating_division(left_value, right_value)
    elif operator == Operator.ADDITION:
        return left_value + right_value
    elif operator == Operator.SUBTRACTION:
        return left_value - right_value
    else:
        raise E.MathError(E.message("9999", f"unknown operator {operator}"), code="9999")


def left_spine(node):
    """Return (leftmost non-BinaryOp node, BinaryOps from the bottom of the spine up to node)."""
    spine = []
    while isinstance(node, BinaryOp):
        spine.append(node)
        node = node.left
    spine.reverse()
    return node, spine


class Value:
    """Leaf node holding an integer literal."""
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = int(value)

    def evaluate(self):
        return self.value

    def to_infix(self):
        return str(self.value)

    def __repr__(self):
        return f"Value({self.value})"


class BinaryOp:
    """Interior node: left <operator> right. Owns both subtrees."""
    __slots__ = ("operator", "left", "right")

    def __init__(self, operator, left, right):
        self.operator = Operator(operator)
        self.left = left
        self.right = right

    def evaluate(self):
        """Evaluate left, then right, then apply the operator.

        Left-nested chains such as '1 + 2 + 3 + ...' are walked in a loop,
        bottom up, so their length is not bound by the recursion limit.
        """
        leaf, spine = left_spine(self)
        value = leaf.evaluate()
        for node in spine:
            value = apply(node.operator, value, node.right.evaluate())
        return value

    def to_infix(self):
        """Render the subtree fully parenthesized, e.g. '((1 + 2) * 3)'."""
        leaf, spine = left_spine(self)
        text = leaf.to_infix()
        for node in spine:
            text = f"({text} {node.operator.symbol} {node.right.to_infix()})"
        return text

    def __repr__(self):
        return f"BinaryOp({self.operator.symbol!r}, left={self.left!r}, right={self.right!r})"


def evaluate(node):
    """Return the integer value of the tree rooted at node."""
    return node.evaluate()
