import sys
from dataclasses import dataclass
from typing import Mapping, Optional, TextIO

from deskcalc import errors
from deskcalc.errors import CalcError
from deskcalc.parser import Parser
from deskcalc.symbols import SymbolTable
from deskcalc.tokenizer import PRINT, QUIT, CharStream, Token, TokenStream, TokenType

CONSTANTS: Mapping[str, float] = {
    "pi": 3.1415926535,
    "e": 2.7182818284,
}

HELP_TEXT = "\n".join(
    [
        "",
        "You are allowed to use +,-,*,/,%,sqrt(), and pow()",
        "",
        "Once you are done entering an expression, enter a '=' to execute the expression. Quit= 'exit' or 'x'.",
        "pow() is used in the following syntax: pow(<number to be raised>,<number to raise it to>)",
        "",
    ]
)


@dataclass
class Ok:
    value: float


@dataclass
class Err:
    error: CalcError


Result = Ok | Err


class Session:
    """One calculator session: a symbol table and the token stream feeding the parser.

    Statements are read from `source` one at a time with `evaluate_next`, which
    returns None once the input is exhausted or a quit token was read.
    """

    def __init__(self, source: TextIO, constants: Mapping[str, float] = CONSTANTS) -> None:
        self.symbols = SymbolTable()
        for name, value in constants.items():
            self.symbols.declare(name, value)
        self.tokens = TokenStream(CharStream(source), self.symbols)
        self.parser = Parser(self.tokens, self.symbols)
        self.finished = False

    def evaluate_next(self) -> Optional[Result]:
        if self.finished:
            return None
        try:
            token = self.tokens.get()
            while token.type is TokenType.PRINT:
                token = self.tokens.get()
            if _is_quit(token):
                self.quit()
                return None
            self.tokens.putback(token)
            return Ok(self.parser.statement())
        except CalcError as e:
            self.recover()
            return Err(e)
        except RecursionError:
            # the descent ran out of interpreter stack
            self.recover()
            return Err(errors.nested_too_deeply())

    def recover(self) -> None:
        """Drops the rest of a failed statement, up to and including the next `=`"""
        self.tokens.ignore_until(PRINT)

    def quit(self) -> None:
        self.finished = True

    def run(self, out: TextIO = sys.stdout, err: TextIO = sys.stderr) -> None:
        while True:
            result = self.evaluate_next()
            if result is None:
                return
            if isinstance(result, Ok):
                print(f"{PRINT}{format_value(result.value)}", file=out)
            else:
                print(result.error, file=err)


def _is_quit(token: Token) -> bool:
    # a bare `x` quits unless it was declared as a variable
    if token.type is TokenType.NAME:
        return token.lexeme == QUIT
    return token.type in (TokenType.QUIT, TokenType.END)


def format_value(value: float) -> str:
    return f"{value:g}"
