"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 中缀转后缀参数
CONVERTER_CONFIG = {
    # True: 每个新操作符只与栈顶比较一次（参考实现的行为）
    # False: 标准调度场算法，循环弹出直到条件不成立
    "single_pop_precedence_check": False,
}

# 交互式命令行参数
REPL_CONFIG = {
    "prompt": ">> ",
    "result_format": "g",  # 与C++ ostream默认输出一致：6位有效数字
}

# 日志参数
LOGGING_CONFIG = {
    "level": logging.WARNING,  # 交互模式下默认不输出调试日志
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    from core.token_system import OPERATOR_DEFINITIONS, Associativity, TokenType

    assert isinstance(CONVERTER_CONFIG["single_pop_precedence_check"], bool), "开关必须是布尔值"
    assert isinstance(REPL_CONFIG["prompt"], str), "提示符必须是字符串"
    assert format(1.0, REPL_CONFIG["result_format"]) == "1", "结果格式必须是浮点格式"

    expected = {
        TokenType.ADD: (0, Associativity.LEFT),
        TokenType.SUB: (0, Associativity.LEFT),
        TokenType.MUL: (1, Associativity.LEFT),
        TokenType.DIV: (1, Associativity.LEFT),
        TokenType.EXP: (2, Associativity.RIGHT),
    }
    assert dict(OPERATOR_DEFINITIONS) == expected, "操作符优先级/结合性与定义不符"
    logger.debug("Configuration validated successfully!")
    return True
