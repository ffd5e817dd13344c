import pytest

from deskcalc.errors import CalcError, ErrorKind
from deskcalc.symbols import SymbolTable


def test_declare_and_lookup() -> None:
    symbols = SymbolTable()
    assert symbols.declare("a", 1.5) == 1.5
    assert symbols.lookup("a") == 1.5
    assert symbols.is_declared("a")
    assert "a" in symbols
    assert len(symbols) == 1


def test_declare_twice_keeps_first_value() -> None:
    symbols = SymbolTable()
    symbols.declare("a", 1.0)
    with pytest.raises(CalcError) as exc_info:
        symbols.declare("a", 2.0)
    assert exc_info.value.kind is ErrorKind.DUPLICATE_DECLARATION
    assert str(exc_info.value) == "[Duplicate declaration] a declared twice"
    assert symbols.lookup("a") == 1.0


def test_lookup_undefined() -> None:
    with pytest.raises(CalcError) as exc_info:
        SymbolTable().lookup("nope")
    assert exc_info.value.kind is ErrorKind.UNDEFINED_VARIABLE
    assert exc_info.value.errmsg == "get: undefined variable nope"


def test_set_overwrites() -> None:
    symbols = SymbolTable()
    symbols.declare("a", 1.0)
    symbols.set("a", -4.0)
    assert symbols.lookup("a") == -4.0
    assert len(symbols) == 1


def test_set_undefined() -> None:
    symbols = SymbolTable()
    with pytest.raises(CalcError) as exc_info:
        symbols.set("a", 1.0)
    assert exc_info.value.kind is ErrorKind.UNDEFINED_VARIABLE
    assert exc_info.value.errmsg == "set: undefined variable a"
    assert not symbols.is_declared("a")


def test_names_keep_declaration_order() -> None:
    symbols = SymbolTable()
    for name in ["pi", "e", "r"]:
        symbols.declare(name, 0.0)
    assert list(symbols.names()) == ["pi", "e", "r"]


def test_names_are_case_sensitive() -> None:
    symbols = SymbolTable()
    symbols.declare("A", 1.0)
    assert not symbols.is_declared("a")
