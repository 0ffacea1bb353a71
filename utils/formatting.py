"""utils/formatting.py"""
from config.config import REPL_CONFIG


def format_result(value, fmt=None):
    """按C++ ostream默认方式输出：6位有效数字，例如 512、0.333333、1e+20、inf、nan"""
    return format(value, fmt or REPL_CONFIG["result_format"])
