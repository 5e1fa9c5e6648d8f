# Splitter.py
"""""
Operator splitter for the Expression Tree Calculator.

The splitter looks at a single-space separated expression and finds the operator
the tree should be rooted at. Priorities:

    + -   1   (first occurrence wins, scan stops immediately)
    * /   2   (first occurrence wins unless a + or - follows)
    ^     3   (only chosen when nothing looser exists)

Everything left of the chosen token becomes the left sub-expression, everything
right of it the right sub-expression.
"""""

# Supported operators (kept as a simple list for quick membership checks)
Operations = ["+", "-", "*", "/", "^"]

PRIORITY = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
NO_PRIORITY = 4


def has_operator(expression):
    """Return True if any operator character appears anywhere in the expression."""
    for operator in Operations:
        if operator in expression:
            return True
    return False


def find_split_index(tokens):
    """Return the index of the lowest priority operator token (0 if there is none)."""
    split_index = 0
    current_priority = NO_PRIORITY

    for index, token in enumerate(tokens):
        priority = PRIORITY.get(token)
        if priority is None:
            continue

        if priority == 1:
            # Additive operators bind loosest, nothing later can beat them
            return index

        if current_priority > priority:
            split_index = index
            current_priority = priority

    return split_index


def split(expression):
    """Split an expression at its lowest priority operator.

    Returns:
        (operator_or_value, left_expression, right_expression)
    where the remainders are "" when nothing is on that side.
    """
    if not has_operator(expression):
        return (expression, "", "")

    tokens = expression.split(" ")
    index = find_split_index(tokens)

    return (tokens[index], " ".join(tokens[:index]), " ".join(tokens[index + 1:]))
