# FibonacciEngine
from . import error as E


COMMAND = "fib"


def is_fib_command(problem):
    return problem.startswith(COMMAND)


def parse_argument(problem):
    """Return N from 'fib N'. Anything unreadable falls back to 1."""
    argument = problem[len(COMMAND):].strip()
    try:
        n = int(argument)
    except ValueError:
        return 1
    if n < 0:
        return 1
    return n


def _fill(n, cache):
    # cache[i] holds fib(i + 1); grows bottom-up until it covers n
    while len(cache) < n:
        cache.append(cache[-1] + cache[-2])
    return cache[n - 1]


def fib(n, limit=None):
    if n < 1:
        raise E.ArgumentError(f"fib is only defined from 1 upwards, got {n}", code="2001")
    if limit is not None and n > limit:
        raise E.ArgumentError(f"{n} is above the configured limit of {limit}", code="2001")

    cache = [1, 1]
    return _fill(n, cache)


def run_command(problem, limit=None):
    n = parse_argument(problem)
    try:
        value = fib(n, limit)
        # int -> str is capped by sys.get_int_max_str_digits() (4300 digits by default)
        value_text = str(value)
    except ValueError as e:
        raise E.ArgumentError(f"fib({n}) has too many digits to display", code="2001", equation=problem) from e
    except E.MathError as e:
        e.equation = problem
        raise e
    return f"fib({n}) = {value_text}"
