"""核心模块 - Token系统、分词器、调度场转换和RPN评估器"""
from .token_system import (
    TokenType, Token, Associativity, OperatorInfo,
    OPERATOR_SYMBOLS, OPERATOR_DEFINITIONS, number_token, format_tokens
)
from .errors import EvaluationError, EvaluationResult, get_friendly_error
from .tokenizer import Tokenizer, tokenize, parse_number
from .shunting_yard import ShuntingYardConverter, to_postfix
from .rpn_evaluator import RPNEvaluator, Operators, evaluate_postfix
from .calculator import SimpleCalculator, evaluate

__all__ = [
    'TokenType', 'Token', 'Associativity', 'OperatorInfo',
    'OPERATOR_SYMBOLS', 'OPERATOR_DEFINITIONS', 'number_token', 'format_tokens',
    'EvaluationError', 'EvaluationResult', 'get_friendly_error',
    'Tokenizer', 'tokenize', 'parse_number',
    'ShuntingYardConverter', 'to_postfix',
    'RPNEvaluator', 'Operators', 'evaluate_postfix',
    'SimpleCalculator', 'evaluate'
]
