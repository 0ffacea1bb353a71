"""主程序入口 - 交互式计算器"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, REPL_CONFIG, validate_config
from core import EvaluationError, SimpleCalculator, get_friendly_error
from utils import format_result

logger = logging.getLogger(__name__)


def read_line(input_stream):
    """读取一行，去掉行尾换行符；输入结束时返回None"""
    line = input_stream.readline()
    if not line:
        return None
    return line.rstrip('\r\n')


def run_repl(input_stream=None, output_stream=None, calculator=None):
    """
    读取-求值-输出循环
    Args:
        input_stream: 输入流，默认sys.stdin
        output_stream: 输出流，默认sys.stdout
        calculator: SimpleCalculator实例，默认按配置新建
    Returns:
        退出码（输入结束时为0）
    """
    if input_stream is None:
        input_stream = sys.stdin
    if output_stream is None:
        output_stream = sys.stdout
    if calculator is None:
        calculator = SimpleCalculator()
    prompt = REPL_CONFIG["prompt"]

    while True:
        output_stream.write(prompt)
        output_stream.flush()
        try:
            user_input = read_line(input_stream)
        except KeyboardInterrupt:
            output_stream.write("\n")
            break
        except UnicodeDecodeError as e:
            # 无法解码的一行按非法字符处理，会话继续
            logger.debug(f"Undecodable input line: {e}")
            output_stream.write(get_friendly_error(EvaluationError.INVALID_CHARACTERS) + "\n")
            continue

        if user_input is None:
            break

        # 空行直接跳过
        if not user_input:
            continue

        result = calculator.evaluate(user_input)
        if result.ok:
            output_stream.write(format_result(result.value) + "\n")
        else:
            output_stream.write(get_friendly_error(result.error) + "\n")

    logger.debug("End of input, exiting")
    return 0


def main():
    logging.basicConfig(
        level=LOGGING_CONFIG['level'],
        format=LOGGING_CONFIG['format']
    )
    validate_config()
    # 无法解码的字节替换为U+FFFD，不中断会话
    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(errors="replace")
    return run_repl()


def cli():
    parser = argparse.ArgumentParser(
        description="Interactive calculator for + - * / ^ and parentheses"
    )
    parser.parse_args()
    sys.exit(main())


if __name__ == "__main__":
    cli()
