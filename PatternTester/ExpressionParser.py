# ExpressionParser.py
"""""
Parser and AST for the pattern engine.

Pipeline
--------
1) Tokenizer.tokenize: raw string -> token list.
2) to_rpn: shunting-yard conversion to postfix, resolving unary signs,
   precedence and associativity.
3) rpn_to_ast: operand-stack reconstruction of the tree (None if malformed).
4) Tree queries used by the detectors: contains_binary_op,
   flatten_multiplication, evaluate_if_numeric.
"""""

import math

from . import Tokenizer
from . import config_manager as config_manager
from . import error as E

# Debug toggle for optional prints in this module
debug = config_manager.load_setting_value("debug") == True

PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
RIGHT_ASSOC = ["^"]
UNARY_OPS = ["u+", "u-"]


# -----------------------------
# AST node types
# -----------------------------

class Number:
    """AST node for a numeric literal."""
    def __init__(self, value):
        self.value = float(value)

    def evaluate(self):
        return self.value

    def __repr__(self):
        return f"Number({self.value!r})"


class Identifier:
    """AST node for a named symbol such as 'x' or 'rate_2'."""
    def __init__(self, name):
        self.name = name

    def evaluate(self):
        """Identifiers are never bound to a value."""
        raise E.CalculationError(f"Identifier has no value: {self.name}", code="3005")

    def __repr__(self):
        return f"Identifier({self.name!r})"


class UnaryOp:
    """AST node for a sign applied to one operand: 'u+' or 'u-'."""
    def __init__(self, operator, operand):
        self.operator = operator
        self.operand = operand

    def evaluate(self):
        value = self.operand.evaluate()
        if self.operator == "u-":
            return -value
        return value

    def __repr__(self):
        return f"UnaryOp({self.operator!r}, {self.operand})"


class BinOp:
    """AST node for a binary operation: left <operator> right."""
    def __init__(self, left, operator, right):
        self.left = left
        self.operator = operator
        self.right = right

    def evaluate(self):
        """Evaluate both subtrees and apply the operator with float semantics."""
        left_value = self.left.evaluate()
        right_value = self.right.evaluate()

        if self.operator == '+':
            return left_value + right_value
        elif self.operator == '-':
            return left_value - right_value
        elif self.operator == '*':
            return left_value * right_value
        elif self.operator == '^':
            return real_power(left_value, right_value)
        elif self.operator == '/':
            if right_value == 0:
                # Division by zero is not an error here, it just has no value
                return math.nan
            return left_value / right_value
        else:
            raise E.CalculationError(f"Unknown operator: {self.operator}", code="3004")

    def __repr__(self):
        return f"BinOp({self.operator!r}, left={self.left}, right={self.right})"


def real_power(base, exponent):
    """base ** exponent on real numbers, giving inf / nan instead of raising."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and exponent.is_integer() and exponent % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        # 0 to a negative power, or a negative base with a fractional exponent
        if base == 0:
            return math.inf
        return math.nan


# -----------------------------
# Shunting-yard (infix -> RPN)
# -----------------------------

def precedence_of(operator):
    """Binding strength of an operator; unary markers rank like their sign."""
    if operator in UNARY_OPS:
        operator = operator[1:]
    return PRECEDENCE.get(operator, 0)


def to_rpn(tokens):
    """Convert an infix token list to postfix (RPN).

    Operators in the output are op tokens; '+'/'-' in prefix position become
    'u+'/'u-'. 'x' and '×' are emitted as '*'. An unmatched '(' ends up in the
    output as a paren token so that rpn_to_ast can reject it.
    """
    output = []
    stack = []

    for b, token in enumerate(tokens):
        if token.kind in ("number", "ident"):
            output.append(token)

        elif token.kind == "op":
            operator = "*" if token.value in ("x", "×") else token.value
            previous = tokens[b - 1] if b > 0 else None
            is_unary = operator in ("+", "-") and (
                    previous is None or previous.kind == "op"
                    or (previous.kind == "paren" and previous.value == "("))

            if is_unary:
                # Prefix signs bind tighter than anything already stacked
                stack.append(Tokenizer.op_token("u" + operator))
                continue

            current = precedence_of(operator)
            while stack and stack[-1].kind == "op":
                top = precedence_of(stack[-1].value)
                if (operator in RIGHT_ASSOC and current < top) or \
                        (operator not in RIGHT_ASSOC and current <= top):
                    output.append(stack.pop())
                else:
                    break
            stack.append(Tokenizer.op_token(operator))

        elif token.kind == "paren":
            if token.value == "(":
                stack.append(token)
            else:
                while stack and stack[-1].kind == "op":
                    output.append(stack.pop())
                if stack:
                    stack.pop()

    while stack:
        output.append(stack.pop())

    if debug == True:
        print("RPN:", [token.value for token in output])

    return output


# -----------------------------
# RPN -> AST
# -----------------------------

def rpn_to_ast(rpn):
    """Rebuild the tree from a postfix list; None unless exactly one root remains."""
    stack = []

    for token in rpn:
        if token.kind == "number":
            stack.append(Number(token.value))
        elif token.kind == "ident":
            stack.append(Identifier(token.value))
        elif token.kind == "paren":
            # Left over from an unmatched '('
            return None
        elif token.value in UNARY_OPS:
            if not stack:
                return None
            stack.append(UnaryOp(token.value, stack.pop()))
        else:
            if len(stack) < 2:
                return None
            right = stack.pop()
            left = stack.pop()
            stack.append(BinOp(left, token.value, right))

    if len(stack) != 1:
        return None
    return stack[0]


def parse(problem):
    """Raw string -> AST root, or None for input that does not form one expression."""
    finaler_baum = rpn_to_ast(to_rpn(Tokenizer.tokenize(problem)))

    if debug == True:
        print("Final AST:")
        print(finaler_baum)

    return finaler_baum


# -----------------------------
# Tree queries
# -----------------------------

def contains_binary_op(node, operator):
    """True if any BinOp below node (through UnaryOp wrappers too) uses operator."""
    if isinstance(node, BinOp):
        if node.operator == operator:
            return True
        return contains_binary_op(node.left, operator) or contains_binary_op(node.right, operator)
    if isinstance(node, UnaryOp):
        return contains_binary_op(node.operand, operator)
    return False


def flatten_multiplication(node):
    """Ordered factors of a '*' chain; any other node is its own single factor."""
    if node is None:
        return []
    if isinstance(node, BinOp) and node.operator == "*":
        return flatten_multiplication(node.left) + flatten_multiplication(node.right)
    return [node]


def evaluate_if_numeric(node):
    """Value of the tree if all of its leaves are numbers, otherwise None.

    Division by zero gives NaN rather than failing.
    """
    if node is None:
        return None
    try:
        return node.evaluate()
    except E.CalculationError:
        return None


def count_leaves(node):
    """Return (number_leaves, identifier_leaves) anywhere in the tree."""
    if isinstance(node, Number):
        return 1, 0
    if isinstance(node, Identifier):
        return 0, 1
    if isinstance(node, UnaryOp):
        return count_leaves(node.operand)
    if isinstance(node, BinOp):
        left_numbers, left_idents = count_leaves(node.left)
        right_numbers, right_idents = count_leaves(node.right)
        return left_numbers + right_numbers, left_idents + right_idents
    return 0, 0
