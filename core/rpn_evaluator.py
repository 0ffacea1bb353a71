"""RPN表达式求值器"""
import logging

import numpy as np

from core.errors import EvaluationError, EvaluationResult
from core.token_system import TokenType, format_tokens

logger = logging.getLogger(__name__)


class Operators:
    """二元操作符的静态方法集合，按IEEE-754 float64语义计算（除零得inf/nan，不抛异常）"""

    @staticmethod
    def add(operand1, operand2):
        return operand1 + operand2

    @staticmethod
    def sub(operand1, operand2):
        return operand1 - operand2

    @staticmethod
    def mul(operand1, operand2):
        return operand1 * operand2

    @staticmethod
    def div(operand1, operand2):
        return np.divide(operand1, operand2)

    @staticmethod
    def exp(operand1, operand2):
        """与C pow一致：溢出得inf，负数的非整数次幂得nan"""
        return np.power(operand1, operand2)


BINARY_OPERATORS = {
    TokenType.ADD: Operators.add,
    TokenType.SUB: Operators.sub,
    TokenType.MUL: Operators.mul,
    TokenType.DIV: Operators.div,
    TokenType.EXP: Operators.exp,
}


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        Args:
            token_sequence: 逆波兰顺序的Token序列
        Returns:
            EvaluationResult，成功时为float
        """
        stack = []

        with np.errstate(all='ignore'):
            for token in token_sequence:
                if token.type == TokenType.NUMBER:
                    stack.append(np.float64(token.value))
                    continue

                # 括号不应出现在RPN序列中
                if token.is_paren:
                    logger.debug(f"Unexpected token in RPN sequence: {token.name}")
                    return EvaluationResult.failure(EvaluationError.UNKNOWN_OPERATOR)

                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.name}")
                    return EvaluationResult.failure(EvaluationError.NOT_ENOUGH_INPUTS)

                operand2 = stack.pop()
                operand1 = stack.pop()
                op_method = BINARY_OPERATORS[token.type]
                stack.append(np.float64(op_method(operand1, operand2)))

        if len(stack) == 0:
            logger.debug("Empty stack after evaluation")
            return EvaluationResult.failure(EvaluationError.NOT_ENOUGH_INPUTS)
        if len(stack) > 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            logger.debug(f"RPN expression: {format_tokens(token_sequence)}")
            return EvaluationResult.failure(EvaluationError.TOO_MANY_INPUTS)

        return EvaluationResult.success(float(stack[0]))


def evaluate_postfix(token_sequence):
    return RPNEvaluator.evaluate(token_sequence)
