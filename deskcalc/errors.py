import enum
from dataclasses import dataclass

from deskcalc.utils import PrintableEnum


class ErrorKind(PrintableEnum):
    DUPLICATE_DECLARATION = enum.auto()
    UNDEFINED_VARIABLE = enum.auto()
    BAD_TOKEN = enum.auto()
    PUSHBACK_OVERFLOW = enum.auto()
    EXPECTED_TOKEN = enum.auto()
    EXPECTED_PRIMARY = enum.auto()
    EXPECTED_NAME = enum.auto()
    EXPECTED_ASSIGNMENT = enum.auto()
    DIVIDE_BY_ZERO = enum.auto()
    MODULO_BY_ZERO = enum.auto()
    NEGATIVE_SQRT = enum.auto()
    NARROWING_CONVERSION = enum.auto()
    NESTED_TOO_DEEPLY = enum.auto()


@dataclass
class CalcError(Exception):
    kind: ErrorKind
    errmsg: str

    def __str__(self) -> str:
        return f"[{self.kind.title}] {self.errmsg}"


def duplicate_declaration(name: str) -> CalcError:
    return CalcError(ErrorKind.DUPLICATE_DECLARATION, f"{name} declared twice")


def undefined_variable(name: str, op: str = "get") -> CalcError:
    return CalcError(ErrorKind.UNDEFINED_VARIABLE, f"{op}: undefined variable {name}")


def bad_token(ch: str) -> CalcError:
    return CalcError(ErrorKind.BAD_TOKEN, f"Bad token {ch!r}")


def pushback_overflow() -> CalcError:
    return CalcError(ErrorKind.PUSHBACK_OVERFLOW, "putback() into full buffer")


def expected_token(ch: str) -> CalcError:
    return CalcError(ErrorKind.EXPECTED_TOKEN, f"'{ch}' expected")


def expected_primary() -> CalcError:
    return CalcError(ErrorKind.EXPECTED_PRIMARY, "primary expected")


def expected_name() -> CalcError:
    return CalcError(ErrorKind.EXPECTED_NAME, "name expected in declaration")


def expected_assignment(name: str) -> CalcError:
    return CalcError(ErrorKind.EXPECTED_ASSIGNMENT, f"= missing in declaration of {name}")


def divide_by_zero() -> CalcError:
    return CalcError(ErrorKind.DIVIDE_BY_ZERO, "divide by zero")


def modulo_by_zero() -> CalcError:
    return CalcError(ErrorKind.MODULO_BY_ZERO, "%: divide by zero")


def negative_sqrt() -> CalcError:
    return CalcError(ErrorKind.NEGATIVE_SQRT, "value is negative")


def narrowing_conversion() -> CalcError:
    return CalcError(ErrorKind.NARROWING_CONVERSION, "info loss")


def nested_too_deeply() -> CalcError:
    return CalcError(ErrorKind.NESTED_TOO_DEEPLY, "expression nested too deeply")
