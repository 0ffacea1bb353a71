"""core/token_system.py"""
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple


class TokenType(Enum):
    NUMBER = "number"  # 数值字面量
    ADD = "add"  # +
    SUB = "sub"  # -
    MUL = "mul"  # *
    DIV = "div"  # /
    EXP = "exp"  # ^
    LPAREN = "lparen"  # (
    RPAREN = "rparen"  # )


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class Token(NamedTuple):
    """不可变Token：数值Token携带value，操作符Token只有类型（value恒为0.0）"""
    type: TokenType
    value: float = 0.0

    @property
    def is_number(self):
        return self.type == TokenType.NUMBER

    @property
    def is_paren(self):
        return self.type in (TokenType.LPAREN, TokenType.RPAREN)

    @property
    def name(self):
        if self.is_number:
            return f"{self.value:g}"
        return TOKEN_SYMBOLS[self.type]


class OperatorInfo(NamedTuple):
    precedence: int
    associativity: Associativity


# 字符 -> 操作符Token
OPERATOR_SYMBOLS = MappingProxyType({
    '+': Token(TokenType.ADD),
    '-': Token(TokenType.SUB),
    '*': Token(TokenType.MUL),
    '/': Token(TokenType.DIV),
    '^': Token(TokenType.EXP),
    '(': Token(TokenType.LPAREN),
    ')': Token(TokenType.RPAREN),
})

TOKEN_SYMBOLS = MappingProxyType({
    token.type: symbol for symbol, token in OPERATOR_SYMBOLS.items()
})

# 操作符定义：优先级和结合性，只读
OPERATOR_DEFINITIONS = MappingProxyType({
    TokenType.ADD: OperatorInfo(0, Associativity.LEFT),
    TokenType.SUB: OperatorInfo(0, Associativity.LEFT),
    TokenType.MUL: OperatorInfo(1, Associativity.LEFT),
    TokenType.DIV: OperatorInfo(1, Associativity.LEFT),
    TokenType.EXP: OperatorInfo(2, Associativity.RIGHT),
})


def number_token(value):
    return Token(TokenType.NUMBER, float(value))


def format_tokens(tokens):
    """Token序列转为空格分隔的字符串，用于日志"""
    return ' '.join(token.name for token in tokens)
