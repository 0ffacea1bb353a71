"""core/tokenizer.py - 表达式文本 -> Token序列"""
import logging
import re

from core.errors import EvaluationError, EvaluationResult
from core.token_system import OPERATOR_SYMBOLS, number_token

logger = logging.getLogger(__name__)

DIGITS = frozenset('0123456789')

# 数值前缀：可选符号 + (整数[.小数] | .小数)
_NUMBER_PREFIX = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)')


def parse_number(text):
    """宽松的数值解析：取最长的合法十进制前缀，没有合法前缀时返回0.0"""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group())


class Tokenizer:
    """
    两个状态的有限状态机："数值解析"和"操作符解析"
    - 数值解析：收集数字和小数点，遇到空白或操作符时结束
    - 操作符解析：查表得到操作符Token；空白跳过；数字、小数点、或紧跟数字的'-'进入数值解析
    字母在任何状态下都直接报错
    """

    @staticmethod
    def _starts_number(text, i):
        ch = text[i]
        if ch in DIGITS or ch == '.':
            return True
        # 负数字面量：'-' 后面紧跟数字，例如 3 - -2
        return ch == '-' and i + 1 < len(text) and text[i + 1] in DIGITS

    @staticmethod
    def tokenize(text):
        tokens = []
        start_index = 0
        parsing_number = False

        for i, ch in enumerate(text):
            if ch.isalpha():
                logger.debug(f"Alphabetic character {ch!r} at position {i}")
                return EvaluationResult.failure(EvaluationError.INVALID_CHARACTERS)

            is_space = ch.isspace()
            is_operator = ch in OPERATOR_SYMBOLS

            if not parsing_number:
                if Tokenizer._starts_number(text, i):
                    parsing_number = True
                    start_index = i
                elif is_operator:
                    tokens.append(OPERATOR_SYMBOLS[ch])
                elif is_space:
                    continue
                else:
                    logger.debug(f"Unknown operator {ch!r} at position {i}")
                    return EvaluationResult.failure(EvaluationError.UNKNOWN_OPERATOR)
            elif is_space or is_operator:
                parsing_number = False
                tokens.append(number_token(parse_number(text[start_index:i])))
                if is_operator:
                    tokens.append(OPERATOR_SYMBOLS[ch])

        # 字符串结束时仍在解析数值
        if parsing_number:
            tokens.append(number_token(parse_number(text[start_index:])))

        return EvaluationResult.success(tokens)


def tokenize(text):
    return Tokenizer.tokenize(text)
