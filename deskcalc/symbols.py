from typing import Iterator

from deskcalc import errors


class SymbolTable:
    """Variables of one calculator session, name -> value.

    Names are declared once and never removed.
    """

    def __init__(self) -> None:
        self._values: dict[str, float] = dict()

    def declare(self, name: str, value: float) -> float:
        if name in self._values:
            raise errors.duplicate_declaration(name)
        self._values[name] = value
        return value

    def lookup(self, name: str) -> float:
        if name not in self._values:
            raise errors.undefined_variable(name)
        return self._values[name]

    def set(self, name: str, value: float) -> None:
        if name not in self._values:
            raise errors.undefined_variable(name, op="set")
        self._values[name] = value

    def is_declared(self, name: str) -> bool:
        return name in self._values

    def names(self) -> Iterator[str]:
        return iter(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)
