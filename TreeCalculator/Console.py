# Console.py
"""""
Text front end for the Expression Tree Calculator.

Reads one expression per line until 'end' (or end of input), prints the tree and
the result, or a single error line. A bad expression never stops the loop.
"""""

from . import error as E
from . import config_manager as config_manager
from . import TreeEngine as TreeEngine
from . import FibonacciEngine as FibonacciEngine

PROMPT = "Input the expression to be parsed or 'end' to exit"
EXIT_COMMAND = "end"


def format_result(tree, result, show_tree=True):
    lines = []
    if show_tree:
        lines.append("The tree representing the operation:")
        lines.append(tree.render().rstrip("\n"))
    lines.append(f"The entered expression evaluates to: {result}")
    return "\n".join(lines)


def process_line(problem, settings=None):
    """Run one input line and return the text to show for it."""
    if settings is None:
        settings = config_manager.load_setting_value("all")

    try:
        if FibonacciEngine.is_fib_command(problem):
            return FibonacciEngine.run_command(problem, settings["fib_limit"])

        tree, result = TreeEngine.calculate(problem)

    except E.MathError as e:
        return f"Error: {e}"

    return format_result(tree, result, settings["show_tree"])


def run(read=input, write=print, settings=None):
    if settings is None:
        settings = config_manager.load_setting_value("all")

    while True:
        write(PROMPT)

        try:
            problem = read().strip()
        except EOFError:
            return

        if problem == EXIT_COMMAND:
            return

        write(process_line(problem, settings))
