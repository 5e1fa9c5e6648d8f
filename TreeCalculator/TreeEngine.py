# TreeEngine.py
"""""
Core engine for the Expression Tree Calculator.

Pipeline
--------
1) Splitter: finds the lowest priority operator of a single-space separated expression.
2) Tree: builds a binary tree recursively from the splitter output.
3) Evaluator: walks the tree bottom-up (left before right) and returns a float.
4) Renderer: draws the tree as indented ASCII art.

Malformed input is never rejected while building: an operator with a missing side
gets a 0.0 operand during evaluation, everything else surfaces as InvalidExpression.
"""""

import math

from . import Splitter
from . import error as E

# Debug toggle for optional prints in this module (main.py sets it from config.json)
debug = False


# -----------------------------
# Utilities / small helpers
# -----------------------------

def parse_operand(text):
    """Parse a leaf value as float, exactly as it was typed.

    float() is more lenient than a numeric literal ("1_0", " 1", arabic digits),
    those are rejected here.
    """
    if text != text.strip() or "_" in text or not text.isascii():
        raise E.InvalidExpression(text)
    try:
        return float(text)
    except ValueError:
        raise E.InvalidExpression(text) from None


def _is_odd_integer(value):
    return value.is_integer() and abs(value) % 2 == 1


def power(base, exponent):
    """IEEE-754 pow: NaN for invalid domains and infinities for poles / overflow."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # math.pow raises for 0 ** negative and negative ** fraction
        if base == 0.0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def execute_operation(operator, left_value, right_value):
    """Apply a single operator to two float operands."""
    if operator == '+':
        return left_value + right_value
    elif operator == '-':
        return left_value - right_value
    elif operator == '*':
        return left_value * right_value
    elif operator == '/':
        if right_value == 0.0:
            raise E.DivideByZero()
        return left_value / right_value
    elif operator == '^':
        return power(left_value, right_value)
    else:
        raise E.InvalidExpression(f"{left_value} {operator} {right_value}")


def _indent(rendered, first_prefix, other_prefix):
    rows = rendered.rstrip().split("\n")
    lines = []
    for i, row in enumerate(rows):
        prefix = first_prefix if i == 0 else other_prefix
        lines.append(prefix + row + "\n")
    return "".join(lines)


# -----------------------------
# Tree node types
# -----------------------------

class Operand:
    """Leaf node: a numeric literal kept as the original text until evaluation."""
    left = None
    right = None

    def __init__(self, value):
        self.value = value

    def has_children(self):
        return False

    def evaluate(self):
        """Return the literal as float."""
        return parse_operand(self.value)

    def render(self):
        return self.value

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"Operand({self.value!r})"


class BinOp:
    """Internal node: value <operator> with an optional left and right subtree.

    At least one child is present. Malformed input can produce a BinOp whose value
    is not an operator, or that misses one side.
    """
    def __init__(self, left, operator, right):
        self.left = left
        self.value = operator
        self.right = right

    @property
    def operator(self):
        return self.value

    def has_children(self):
        return True

    def evaluate(self):
        """Evaluate both subtrees (missing side counts as 0.0) and apply the operator."""
        left_value = self.left.evaluate() if self.left is not None else 0.0
        right_value = self.right.evaluate() if self.right is not None else 0.0
        return execute_operation(self.value, left_value, right_value)

    def render(self):
        """Render the subtree as indented ASCII art, every line ends with a newline."""
        result = self.value + "\n"

        if self.left is not None and self.right is not None:
            result += _indent(self.left.render(), "|-- ", "|   ")
            result += _indent(self.right.render(), "`-- ", "    ")
        else:
            # Degenerate node: the single child is drawn as the last branch
            only_child = self.left if self.left is not None else self.right
            result += _indent(only_child.render(), "`-- ", "    ")

        return result

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"BinOp({self.value!r}, left={self.left!r}, right={self.right!r})"


# -----------------------------
# Tree construction
# -----------------------------

def build(expression):
    """Build a tree from a single-space separated expression.

    Never raises: degenerate splits produce nodes with a missing child.
    """
    operator, left_expression, right_expression = Splitter.split(expression)

    if debug == True:
        print(f"Split {expression!r} -> {left_expression!r} {operator!r} {right_expression!r}")

    left = build(left_expression) if left_expression != "" else None
    right = build(right_expression) if right_expression != "" else None

    if left is None and right is None:
        return Operand(operator)
    return BinOp(left, operator, right)


def count_branches(node):
    """Return (two_child_nodes, one_child_nodes) of a tree."""
    if not node.has_children():
        return (0, 0)

    children = [child for child in (node.left, node.right) if child is not None]
    two = 1 if len(children) == 2 else 0
    one = 1 if len(children) == 1 else 0
    for child in children:
        child_two, child_one = count_branches(child)
        two += child_two
        one += child_one
    return (two, one)


# -----------------------------
# Public entry point
# -----------------------------

def calculate(problem):
    """Main API: build -> evaluate.

    Returns:
        (tree, result)
    Raises MathError (with .equation set to problem) on failure.
    """
    try:
        tree = build(problem)

        if debug == True:
            print("Final tree:")
            print(repr(tree))

        result = tree.evaluate()
        return tree, result

    # Re-raise our domain errors after attaching the source equation
    except E.MathError as e:
        e.equation = problem
        raise e
    # Deep right-leaning trees ("1 + 1 + 1 ...") hit the interpreter recursion limit
    except RecursionError as e:
        raise E.CalculationError("Expression nested too deeply.", code="3026", equation=problem) from e
    # Convert unexpected Python exceptions to our unified error type
    except Exception as e:
        raise E.MathError(message=f"Unexpected crash: {e}", code="9999", equation=problem) from e
