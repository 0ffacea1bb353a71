"""core/errors.py - 错误类型和结果类型"""
import math
from enum import Enum


class EvaluationError(Enum):
    INVALID_CHARACTERS = "invalid_characters"
    UNKNOWN_OPERATOR = "unknown_operator"
    MISMATCHED_PARENTHESES = "mismatched_parentheses"
    TOO_MANY_INPUTS = "too_many_inputs"
    NOT_ENOUGH_INPUTS = "not_enough_inputs"


FRIENDLY_ERRORS = {
    EvaluationError.INVALID_CHARACTERS: "Invalid characters were detected in the expression.",
    EvaluationError.UNKNOWN_OPERATOR: "An unknown operator was supplied.",
    EvaluationError.MISMATCHED_PARENTHESES: "Mismatched parentheses were detected!",
    EvaluationError.TOO_MANY_INPUTS: "Too many inputs for a given operation were supplied, e.g. 1 3 + 4",
    EvaluationError.NOT_ENOUGH_INPUTS: "Not enough inputs for the given expression, e.g. 1 - 2 +",
}


def get_friendly_error(error):
    """错误类型 -> 用户可读的提示信息"""
    if isinstance(error, EvaluationError):
        return FRIENDLY_ERRORS[error]
    return "Invalid EvaluationError supplied!"


class EvaluationResult:
    """
    结果类型：要么是成功值，要么是一个EvaluationError
    各阶段都返回它，出错时逐层显式传递，不使用异常
    """
    __slots__ = ('_value', '_error')

    def __init__(self, value=None, error=None):
        if error is not None and not isinstance(error, EvaluationError):
            raise TypeError(f"error must be an EvaluationError, got {type(error).__name__}")
        self._value = value
        self._error = error

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, error):
        return cls(error=error)

    @property
    def ok(self):
        return self._error is None

    @property
    def error(self):
        return self._error

    @property
    def value(self):
        if self._error is not None:
            raise ValueError(f"Result holds an error: {self._error.name}")
        return self._value

    def __eq__(self, other):
        if not isinstance(other, EvaluationResult):
            return NotImplemented
        if self._error != other._error:
            return False
        # nan结果（如0/0）视为相等，同一表达式两次求值的结果一致
        if isinstance(self._value, float) and isinstance(other._value, float):
            if math.isnan(self._value) and math.isnan(other._value):
                return True
        return self._value == other._value

    def __hash__(self):
        return hash((self._error, repr(self._value)))

    def __repr__(self):
        if self.ok:
            return f"EvaluationResult.success({self._value!r})"
        return f"EvaluationResult.failure({self._error})"
