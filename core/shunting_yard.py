"""core/shunting_yard.py - 调度场算法：中缀Token序列 -> RPN序列"""
import logging

from config.config import CONVERTER_CONFIG
from core.errors import EvaluationError, EvaluationResult
from core.token_system import OPERATOR_DEFINITIONS, Associativity, TokenType, format_tokens

logger = logging.getLogger(__name__)


class ShuntingYardConverter:
    """
    把中缀Token序列转换为逆波兰序列
    Args:
        single_pop: 新操作符是否只与栈顶比较一次；None时读取CONVERTER_CONFIG
    """

    def __init__(self, single_pop=None):
        if single_pop is None:
            single_pop = CONVERTER_CONFIG["single_pop_precedence_check"]
        self.single_pop = single_pop

    @staticmethod
    def should_pop(incoming, top):
        """incoming操作符入栈前，栈顶top是否应先输出"""
        if top.type == TokenType.LPAREN:
            return False
        incoming_info = OPERATOR_DEFINITIONS[incoming.type]
        top_info = OPERATOR_DEFINITIONS[top.type]
        if incoming_info.associativity == Associativity.LEFT:
            return incoming_info.precedence <= top_info.precedence
        return incoming_info.precedence < top_info.precedence

    def to_postfix(self, tokens):
        rpn = []
        op_stack = []

        for token in tokens:
            if token.type == TokenType.NUMBER:
                rpn.append(token)

            elif token.type == TokenType.LPAREN:
                op_stack.append(token)

            elif token.type == TokenType.RPAREN:
                left_paren_found = False
                while op_stack:
                    popped = op_stack.pop()
                    if popped.type == TokenType.LPAREN:
                        left_paren_found = True
                        break
                    rpn.append(popped)

                if not left_paren_found:
                    logger.debug("Right parenthesis without matching left parenthesis")
                    return EvaluationResult.failure(EvaluationError.MISMATCHED_PARENTHESES)

            else:
                # 二元操作符
                while op_stack and self.should_pop(token, op_stack[-1]):
                    rpn.append(op_stack.pop())
                    if self.single_pop:
                        break
                op_stack.append(token)

        while op_stack:
            popped = op_stack.pop()
            if popped.type == TokenType.LPAREN:
                logger.debug("Left parenthesis left unclosed")
                return EvaluationResult.failure(EvaluationError.MISMATCHED_PARENTHESES)
            rpn.append(popped)

        logger.debug(f"RPN expression: {format_tokens(rpn)}")
        return EvaluationResult.success(rpn)


def to_postfix(tokens, single_pop=None):
    return ShuntingYardConverter(single_pop).to_postfix(tokens)
