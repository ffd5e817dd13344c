import math

from deskcalc import errors
from deskcalc.builtins import BUILTIN_FUNCS, BuiltinFunc
from deskcalc.symbols import SymbolTable
from deskcalc.tokenizer import Token, TokenStream, TokenType


class Parser:
    """Recursive descent evaluator, one method per grammar rule:

        Statement   := Declaration | Expression
        Declaration := "let" Name "=" Expression
        Expression  := Term (("+"|"-") Term)*
        Term        := Primary (("*"|"/"|"%") Primary)*
        Primary     := Number | "(" Expression ")" | ("-"|"+") Primary
                     | "pow" "(" Expression "," Expression ")"
                     | "sqrt" "(" Expression ")"

    Each rule returns the value it computed. A token that ends a rule is put
    back into the token stream for the caller to inspect.
    """

    def __init__(self, tokens: TokenStream, symbols: SymbolTable) -> None:
        self.tokens = tokens
        self.symbols = symbols

    def statement(self) -> float:
        token = self.tokens.get()
        if token.type is TokenType.LET:
            return self.declaration()
        self.tokens.putback(token)
        return self.expression()

    def declaration(self) -> float:
        name_token = self.tokens.get()
        # a name that is already declared arrives as a number, and fails in declare
        if name_token.type is not TokenType.NAME and not name_token.is_variable:
            raise errors.expected_name()
        name = name_token.lexeme

        if self.tokens.get().type is not TokenType.PRINT:
            raise errors.expected_assignment(name)

        value = self.expression()
        return self.symbols.declare(name, value)

    def expression(self) -> float:
        left = self.term()
        while True:
            token = self.tokens.get()
            if token.type is TokenType.PLUS:
                left += self.term()
            elif token.type is TokenType.MINUS:
                left -= self.term()
            else:
                self.tokens.putback(token)
                return left

    def term(self) -> float:
        left = self.primary()
        while True:
            token = self.tokens.get()
            if token.type is TokenType.STAR:
                left *= self.primary()
            elif token.type is TokenType.SLASH:
                divisor = self.primary()
                if divisor == 0:
                    raise errors.divide_by_zero()
                left /= divisor
            elif token.type is TokenType.PERCENT:
                divisor = self.primary()
                if divisor == 0:
                    raise errors.modulo_by_zero()
                left = _fmod(left, divisor)
            else:
                self.tokens.putback(token)
                return left

    def primary(self) -> float:
        token = self.tokens.get()
        if token.type is TokenType.BRACKET_OPEN:
            value = self.expression()
            self._expect(TokenType.BRACKET_CLOSE, ")")
            return value
        elif token.type is TokenType.NUMBER:
            return token.value
        elif token.type is TokenType.MINUS:
            return -self.primary()
        elif token.type is TokenType.PLUS:
            return self.primary()
        elif token.type in BUILTIN_FUNCS:
            return self._call(BUILTIN_FUNCS[token.type])
        elif token.type is TokenType.NAME:
            # names still unresolved after lexing were never declared
            return self.symbols.lookup(token.lexeme)
        else:
            raise errors.expected_primary()

    def _call(self, func: BuiltinFunc) -> float:
        """Parses `(arg, ...)` after a built-in name. Argument errors win over a missing `)`"""
        self._expect(TokenType.BRACKET_OPEN, "(")
        args: list[float] = []
        for i in range(func.arity):
            if i > 0:
                self._expect(TokenType.COMMA, ",")
            args.append(self.expression())
        value = func.fn(*args)
        self._expect(TokenType.BRACKET_CLOSE, ")")
        return value

    def _expect(self, token_type: TokenType, lexeme: str) -> Token:
        token = self.tokens.get()
        if token.type is not token_type:
            raise errors.expected_token(lexeme)
        return token


def _fmod(x: float, y: float) -> float:
    # C fmod semantics: sign follows the dividend, nan for an infinite dividend
    if math.isinf(x) or math.isnan(x) or math.isnan(y):
        return math.nan
    return math.fmod(x, y)
