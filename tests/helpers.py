"""Token shorthands for building sequences by hand."""

from core import Token, TokenType, number_token


def N(value) -> Token:
    return number_token(value)


ADD = Token(TokenType.ADD)
SUB = Token(TokenType.SUB)
MUL = Token(TokenType.MUL)
DIV = Token(TokenType.DIV)
EXP = Token(TokenType.EXP)
LP = Token(TokenType.LPAREN)
RP = Token(TokenType.RPAREN)
