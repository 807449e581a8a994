"""Arithmetic expression parsing, checking, evaluation and formatting."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping

NUM_PARAMS = {"pow": 2, "sin": 1, "sqrt": 1}


class ExprError(Exception):
    """Raised for syntax errors and failed static checks."""


def _quote_rune(ch: str) -> str:
    if ch == "'":
        return "'\\''"
    if ch == "\\":
        return "'\\\\'"
    if ch == "\n":
        return "'\\n'"
    if ch == "\t":
        return "'\\t'"
    return f"'{ch}'"


def _format_g(value: float) -> str:
    """Format a float the way a shortest-precision %g does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    text = "".join(map(str, digits)).rstrip("0") or "0"
    # decimal point position relative to the start of the significant digits
    dp = len(digits) + exponent
    nd = len(text)
    exp = dp - 1
    prefix = "-" if sign else ""
    if exp < -4 or exp >= 6:
        mantissa = text[0] + ("." + text[1:] if nd > 1 else "")
        esign = "-" if exp < 0 else "+"
        return f"{prefix}{mantissa}e{esign}{abs(exp):02d}"
    if dp <= 0:
        return f"{prefix}0.{'0' * -dp}{text}"
    if dp >= nd:
        return prefix + text + "0" * (dp - nd)
    return f"{prefix}{text[:dp]}.{text[dp:]}"


def _safe(fn, *args: float) -> float:
    try:
        return fn(*args)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


def _divide(x: float, y: float) -> float:
    if y != 0:
        return x / y
    if x == 0 or math.isnan(x):
        return math.nan
    return math.copysign(math.inf, x) * math.copysign(1.0, y)


class Expr:
    """An arithmetic expression."""

    def eval(self, env: Mapping[str, float] | None) -> float:
        """Return the value of this expression in env."""
        raise NotImplementedError

    def check(self, variables: set) -> None:
        """Raise ExprError on problems; add variable names to the set."""
        raise NotImplementedError


@dataclass(frozen=True)
class Var(Expr):
    name: str

    def eval(self, env):
        return float((env or {}).get(self.name, 0.0))

    def check(self, variables):
        variables.add(self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Literal(Expr):
    value: float

    def eval(self, env):
        return float(self.value)

    def check(self, variables):
        return None


@dataclass(frozen=True)
class Unary(Expr):
    op: str
    x: Expr

    def eval(self, env):
        if self.op == "+":
            return +self.x.eval(env)
        if self.op == "-":
            return -self.x.eval(env)
        raise ValueError(f"unsupported unary operator: {_quote_rune(self.op)}")

    def check(self, variables):
        if self.op not in ("+", "-"):
            raise ExprError(f"unexpected unary op {_quote_rune(self.op)}")
        self.x.check(variables)


@dataclass(frozen=True)
class Binary(Expr):
    op: str
    x: Expr
    y: Expr

    def eval(self, env):
        a, b = self.x.eval(env), self.y.eval(env)
        if self.op == "+":
            return a + b
        if self.op == "-":
            return a - b
        if self.op == "*":
            return a * b
        if self.op == "/":
            return _divide(a, b)
        raise ValueError(f"unsupported binary operator: {_quote_rune(self.op)}")

    def check(self, variables):
        if self.op not in ("+", "-", "*", "/"):
            raise ExprError(f"unexpected binary op {_quote_rune(self.op)}")
        self.x.check(variables)
        self.y.check(variables)


@dataclass(frozen=True)
class Call(Expr):
    fn: str
    args: tuple = field(default_factory=tuple)

    def eval(self, env):
        values = [arg.eval(env) for arg in self.args]
        if self.fn == "pow":
            return _safe(math.pow, values[0], values[1])
        if self.fn == "sin":
            return _safe(math.sin, values[0])
        if self.fn == "sqrt":
            return _safe(math.sqrt, values[0])
        raise ValueError(f"unsupported function call: {self.fn}")

    def check(self, variables):
        if self.fn not in NUM_PARAMS:
            raise ExprError(f'unknown function "{self.fn}"')
        arity = NUM_PARAMS[self.fn]
        if len(self.args) != arity:
            raise ExprError(
                f"call to {self.fn} has {len(self.args)} args, want {arity}"
            )
        for arg in self.args:
            arg.check(variables)


# ---- lexer ----

_EOF, _IDENT, _NUMBER, _CHAR = "eof", "ident", "number", "char"
_NUMBER_RE = re.compile(r"\d+(\.\d*)?([eE][+-]?\d+)?|\.\d+([eE][+-]?\d+)?")


def _tokenize(text: str):
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch in " \t\r\n":
            pos += 1
            continue
        if ch.isalpha() or ch == "_":
            end = pos + 1
            while end < len(text) and (text[end].isalnum() or text[end] == "_"):
                end += 1
            yield _IDENT, text[pos:end]
            pos = end
            continue
        match = _NUMBER_RE.match(text, pos)
        if match:
            yield _NUMBER, match.group()
            pos = match.end()
            continue
        yield _CHAR, ch
        pos += 1
    yield _EOF, ""


def _precedence(kind: str, text: str) -> int:
    if kind != _CHAR:
        return 0
    if text in ("*", "/"):
        return 2
    if text in ("+", "-"):
        return 1
    return 0


class _Parser:
    def __init__(self, text: str):
        self._tokens = _tokenize(text)
        self.next()

    def next(self) -> None:
        self.kind, self.text = next(self._tokens)

    def is_char(self, ch: str) -> bool:
        return self.kind == _CHAR and self.text == ch

    def describe(self) -> str:
        if self.kind == _EOF:
            return "end of file"
        if self.kind == _IDENT:
            return f"identifier {self.text}"
        if self.kind == _NUMBER:
            return f"number {self.text}"
        return _quote_rune(self.text)

    def expect_close(self) -> None:
        if not self.is_char(")"):
            raise ExprError(f"got {self.describe()}, want ')'")
        self.next()

    def expr(self) -> Expr:
        return self.binary(1)

    def binary(self, prec1: int) -> Expr:
        lhs = self.unary()
        prec = _precedence(self.kind, self.text)
        while prec >= prec1:
            while _precedence(self.kind, self.text) == prec:
                op = self.text
                self.next()
                lhs = Binary(op, lhs, self.binary(prec + 1))
            prec -= 1
        return lhs

    def unary(self) -> Expr:
        if self.is_char("+") or self.is_char("-"):
            op = self.text
            self.next()
            return Unary(op, self.unary())
        return self.primary()

    def primary(self) -> Expr:
        if self.kind == _IDENT:
            name = self.text
            self.next()
            if not self.is_char("("):
                return Var(name)
            self.next()
            args = []
            if not self.is_char(")"):
                args.append(self.expr())
                while self.is_char(","):
                    self.next()
                    args.append(self.expr())
            self.expect_close()
            return Call(name, tuple(args))
        if self.kind == _NUMBER:
            value = float(self.text)
            self.next()
            return Literal(value)
        if self.is_char("("):
            self.next()
            inner = self.expr()
            self.expect_close()
            return inner
        raise ExprError(f"unexpected {self.describe()}")


def parse(text: str) -> Expr:
    """Parse text as an arithmetic expression, raising ExprError on failure."""
    parser = _Parser(text)
    result = parser.expr()
    if parser.kind != _EOF:
        raise ExprError(f"unexpected {parser.describe()}")
    return result


def format_expr(expr: Expr) -> str:
    """Format an expression fully parenthesised."""
    if isinstance(expr, Literal):
        return _format_g(expr.value)
    if isinstance(expr, Var):
        return expr.name
    if isinstance(expr, Unary):
        return f"({expr.op}{format_expr(expr.x)})"
    if isinstance(expr, Binary):
        return f"({format_expr(expr.x)} {expr.op} {format_expr(expr.y)})"
    if isinstance(expr, Call):
        return f"{expr.fn}({', '.join(format_expr(a) for a in expr.args)})"
    raise TypeError(f"unknown Expr: {type(expr).__name__}")