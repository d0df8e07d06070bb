# PatternEngine.py
"""""
Structural detectors for simple arithmetic expressions.

Every detector takes the raw input string, builds the AST through
ExpressionParser.parse and answers one yes/no question about its shape:

    Add1    isAddInput      contains an addition (or: even whole number)
    Sub1    isSubInput      contains a subtraction (or: negative number)
    Exp1    isExpInput      contains a power, a repeated factor, or is a perfect power
    Var1    isVariable      is exactly one identifier
    VarNum  isVarAndisNum   mixes numbers and identifiers

Detectors never raise: input that does not form an expression is simply
not a match.
"""""

import functools
import math
import re
from collections import Counter

from . import ExpressionParser as ExpressionParser
from . import config_manager as config_manager
from . import error as E

# Debug toggle for optional prints in this module
debug = config_manager.load_setting_value("debug") == True

# Closed set of detector keys, in display order
PATTERN_KEYS = ["Add1", "Sub1", "Exp1", "Var1", "VarNum"]

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
# Signed decimal or exponent literal, or the spelled-out "Infinity"
PLAIN_NUMBER_PATTERN = re.compile(r"[+-]?((\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|Infinity)")


def no_match_on_overflow(detector):
    """Very deeply nested input can exhaust the recursion limit; that is a no-match too."""
    @functools.wraps(detector)
    def wrapper(problem):
        try:
            return detector(problem)
        except RecursionError:
            if debug == True:
                print(f"{detector.__name__}: expression nested too deeply")
            return False
    return wrapper


# -----------------------------
# Small numeric helpers
# -----------------------------

def is_whole_number(value):
    """True for finite floats without a fractional part."""
    return value is not None and math.isfinite(value) and value.is_integer()


def integer_root(value, degree):
    """Largest integer r with r ** degree <= value (value >= 1)."""
    guess = int(round(value ** (1.0 / degree)))
    while guess ** degree > value:
        guess -= 1
    while (guess + 1) ** degree <= value:
        guess += 1
    return guess


def is_perfect_power(value):
    """True if value == base ** k for integers base >= 2, k >= 2.

    1 counts as a power (1 = 1^k). Same answer as dividing by every base up
    to sqrt(value) until it reaches 1, without walking every base.
    """
    if value < 1:
        return False
    if value == 1:
        return True
    for degree in range(2, value.bit_length() + 1):
        base = integer_root(value, degree)
        if base < 2:
            break
        if base ** degree == value:
            return True
    return False


def factor_key(node):
    """Key under which equal multiplicative factors compare equal."""
    if isinstance(node, ExpressionParser.Number):
        return f"#{node.value!r}"
    if isinstance(node, ExpressionParser.Identifier):
        return f"@{node.name}"
    return repr(node)


# -----------------------------
# Detectors
# -----------------------------

@no_match_on_overflow
def isAddInput(problem):
    """Contains a '+'; for purely numeric input: the value is an even whole number."""
    baum = ExpressionParser.parse(problem)
    if ExpressionParser.contains_binary_op(baum, "+"):
        return True
    value = ExpressionParser.evaluate_if_numeric(baum)
    if is_whole_number(value):
        return value % 2 == 0
    return False


@no_match_on_overflow
def isSubInput(problem):
    """Contains a binary '-'; for purely numeric input: the value is negative."""
    baum = ExpressionParser.parse(problem)
    if ExpressionParser.contains_binary_op(baum, "-"):
        return True
    value = ExpressionParser.evaluate_if_numeric(baum)
    if value is not None and math.isfinite(value):
        return value < 0
    return False


@no_match_on_overflow
def isExpInput(problem):
    """Contains '^', repeats a factor ("x*x", "3*3*3"), or is a whole perfect power ("8", "1")."""
    baum = ExpressionParser.parse(problem)
    if baum is None:
        return False
    if ExpressionParser.contains_binary_op(baum, "^"):
        return True

    if isinstance(baum, ExpressionParser.BinOp) and baum.operator == "*":
        factors = ExpressionParser.flatten_multiplication(baum)
        counts = Counter(factor_key(factor) for factor in factors)
        if debug == True:
            print("Factors:", dict(counts))
        if any(count >= 2 for count in counts.values()):
            return True

    value = ExpressionParser.evaluate_if_numeric(baum)
    if is_whole_number(value):
        return is_perfect_power(int(value))
    return False


def isVariable(problem):
    """The whole trimmed input is exactly one identifier (and not a number)."""
    text = problem.strip()
    if not text:
        return False
    if PLAIN_NUMBER_PATTERN.fullmatch(text):
        return False
    return IDENTIFIER_PATTERN.fullmatch(text) is not None


@no_match_on_overflow
def isVarAndisNum(problem):
    """The expression has at least one number and at least one identifier leaf."""
    if not problem.strip():
        return False
    baum = ExpressionParser.parse(problem)
    if baum is None:
        return False
    number_count, identifier_count = ExpressionParser.count_leaves(baum)
    return number_count > 0 and identifier_count > 0


# -----------------------------
# Dispatch by key
# -----------------------------

def run_pattern(key, problem):
    """Run the detector selected by key (one of PATTERN_KEYS) on problem."""
    if key == "Add1":
        return isAddInput(problem)
    elif key == "Sub1":
        return isSubInput(problem)
    elif key == "Exp1":
        return isExpInput(problem)
    elif key == "Var1":
        return isVariable(problem)
    elif key == "VarNum":
        return isVarAndisNum(problem)
    else:
        raise E.PatternError(f"Unknown pattern: {key}", code="3030", equation=problem)


def run_all_patterns(problem):
    """Result of every detector for one input, keyed like PATTERN_KEYS."""
    return {key: run_pattern(key, problem) for key in PATTERN_KEYS}


def test_main():
    """Simple REPL-like runner for manual testing of the detectors."""
    print("Enter the expression: ")
    problem = input()
    for key, result in run_all_patterns(problem).items():
        print(f"{key}: {result}")


if __name__ == "__main__":
    # Allow running this module directly for quick CLI tests:
    #   python -m PatternTester.PatternEngine
    test_main()
