import math
from dataclasses import dataclass
from typing import Callable

from deskcalc import errors
from deskcalc.tokenizer import TokenType

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@dataclass
class BuiltinFunc:
    name: str
    arity: int
    fn: Callable[..., float]


BUILTIN_FUNCS: dict[TokenType, BuiltinFunc] = dict()


def register_builtin_func(keyword: TokenType, name: str, arity: int):
    def decorator(fn: Callable[..., float]) -> Callable[..., float]:
        BUILTIN_FUNCS[keyword] = BuiltinFunc(name=name, arity=arity, fn=fn)
        return fn

    return decorator


def narrow_to_int(value: float) -> int:
    """Truncates towards zero; the result must fit a 32-bit int"""
    if not math.isfinite(value) or not INT_MIN <= math.trunc(value) <= INT_MAX:
        raise errors.narrowing_conversion()
    return math.trunc(value)


@register_builtin_func(TokenType.POW, name="pow", arity=2)
def pow_(base: float, exponent: float) -> float:
    n = narrow_to_int(exponent)
    if base == 0.0 and n < 0:
        return math.copysign(math.inf, base) if n % 2 else math.inf
    try:
        return base**n
    except OverflowError:
        return -math.inf if base < 0 and n % 2 else math.inf


@register_builtin_func(TokenType.SQRT, name="sqrt", arity=1)
def sqrt_(x: float) -> float:
    if x < 0:
        raise errors.negative_sqrt()
    return math.sqrt(x)
