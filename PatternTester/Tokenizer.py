# Tokenizer.py
"""""
Tokenizer for the pattern engine.

Turns a raw input string such as "2x + 1" into a flat list of tokens:

    number  - float value plus the literal it was read from
    ident   - identifier name ([A-Za-z_][A-Za-z0-9_]*)
    op      - + - * / ^ x × or any other single character
    paren   - ( or )

The tokenizer never raises. Fragments it cannot read as a number degrade to
identifier tokens and unknown characters become single-character operators,
so malformed input is left for the parser / AST builder to reject.
"""""

import string
from collections import namedtuple

from . import config_manager as config_manager

# Debug toggle for optional prints in this module
debug = config_manager.load_setting_value("debug") == True

Token = namedtuple("Token", ["kind", "value", "raw"])

DIGITS = set(string.digits)
IDENT_START = set(string.ascii_letters + "_")
IDENT_CHARS = set(string.ascii_letters + string.digits + "_")

Operations = ["+", "-", "*", "/", "^", "×"]

# A failed number literal swallows characters up to one of these
NUMBER_FALLBACK_STOP = set("()+-*/^×x")


def number_token(value, raw):
    return Token("number", value, raw)


def ident_token(name):
    return Token("ident", name, name)


def op_token(symbol):
    return Token("op", symbol, symbol)


def paren_token(symbol):
    return Token("paren", symbol, symbol)


def is_operand(token):
    """True for tokens that can end an operand: numbers, identifiers, ')'."""
    return token.kind in ("number", "ident") or (token.kind == "paren" and token.value == ")")


def starts_operand(token):
    """True for tokens that can start an operand: numbers, identifiers, '('."""
    return token.kind in ("number", "ident") or (token.kind == "paren" and token.value == "(")


def x_is_operator(text, b):
    """Decide whether the 'x' at text[b] means multiplication.

    'x' is an operator only with an operand on both sides: a digit, ')' or
    identifier character to the left and a digit, '(' or identifier start to
    the right ("3x4", "a x b"). Otherwise it is (the start of) an identifier.
    """
    left = b - 1
    while left >= 0 and text[left].isspace():
        left -= 1
    has_left_operand = left >= 0 and (text[left] == ")" or text[left] in IDENT_CHARS)

    right = b + 1
    while right < len(text) and text[right].isspace():
        right += 1
    has_right_operand = right < len(text) and (text[right] == "(" or text[right] in DIGITS
                                               or text[right] in IDENT_START)

    return has_left_operand and has_right_operand


def scan_number(text, b):
    """Return the end index of the number literal starting at text[b].

    Grammar: digits, optional '.' + digits, optional exponent
    ('e'/'E', optional sign, digits).
    """
    j = b
    while j < len(text) and text[j] in DIGITS:
        j += 1
    if j < len(text) and text[j] == ".":
        j += 1
        while j < len(text) and text[j] in DIGITS:
            j += 1
    if j < len(text) and text[j] in "eE":
        j += 1
        if j < len(text) and text[j] in "+-":
            j += 1
        while j < len(text) and text[j] in DIGITS:
            j += 1
    return j


def scan_identifier(text, b):
    """Return the end index of the identifier run starting at text[b]."""
    j = b + 1
    while j < len(text) and text[j] in IDENT_CHARS:
        j += 1
    return j


def insert_implicit_multiplication(tokens):
    """Insert '*' between adjacent operands: "2(x+1)", "2 y", ")(".

    number / identifier / ')' followed by number / identifier / '('.
    """
    result = []
    for b, token in enumerate(tokens):
        result.append(token)
        if b + 1 < len(tokens) and is_operand(token) and starts_operand(tokens[b + 1]):
            result.append(op_token("*"))
    return result


def tokenize(problem):
    """Convert a raw input string into a token list.

    Notes:
    - 'x' is context sensitive (see x_is_operator).
    - Implicit multiplication is inserted after the scan ('5y' -> 5, '*', y).
    """
    problem = problem.strip()
    full_problem = []
    b = 0

    while b < len(problem):
        current_char = problem[b]

        # --- Whitespace (ignored) ---
        if current_char.isspace():
            b += 1

        # --- Parentheses ---
        elif current_char in "()":
            full_problem.append(paren_token(current_char))
            b += 1

        # --- Operators (signs included, the parser decides unary vs binary) ---
        elif current_char in Operations:
            full_problem.append(op_token(current_char))
            b += 1

        # --- Numbers: digits or decimal separator ---
        elif current_char in DIGITS or current_char == ".":
            end = scan_number(problem, b)
            raw = problem[b:end]
            try:
                full_problem.append(number_token(float(raw), raw))
                b = end
            except ValueError:
                # "." or "1e" on its own: keep going with an identifier instead
                end = b + 1
                while end < len(problem) and not problem[end].isspace() \
                        and problem[end] not in NUMBER_FALLBACK_STOP:
                    end += 1
                full_problem.append(ident_token(problem[b:end]))
                b = end

        # --- 'x': multiplication sign or identifier ---
        elif current_char == "x" and x_is_operator(problem, b):
            full_problem.append(op_token("x"))
            b += 1

        # --- Identifiers ---
        elif current_char in IDENT_START:
            end = scan_identifier(problem, b)
            full_problem.append(ident_token(problem[b:end]))
            b = end

        # --- Anything else becomes a one-character operator ---
        else:
            full_problem.append(op_token(current_char))
            b += 1

    full_problem = insert_implicit_multiplication(full_problem)

    if debug == True:
        print("Tokens:", [token.raw for token in full_problem])

    return full_problem
