"""core/calculator.py - 分词 -> 转RPN -> 求值"""
import logging

from core.rpn_evaluator import RPNEvaluator
from core.shunting_yard import ShuntingYardConverter
from core.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class SimpleCalculator:
    """
    每次调用互相独立，除只读的操作符表外不保存任何状态
    任一阶段失败时原样返回该阶段的错误
    """

    def __init__(self, single_pop=None):
        self.converter = ShuntingYardConverter(single_pop)

    def evaluate(self, text):
        result = Tokenizer.tokenize(text)
        if not result.ok:
            return result

        # 转为RPN
        result = self.converter.to_postfix(result.value)
        if not result.ok:
            return result

        result = RPNEvaluator.evaluate(result.value)
        if not result.ok:
            logger.debug(f"Evaluation of {text!r} failed: {result.error.name}")
        return result


def evaluate(text):
    return SimpleCalculator().evaluate(text)
