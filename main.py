"""主程序入口 - 单次输入 / 循环输入 / 命令行参数 / 批量文件 四种模式"""
import argparse
import logging
import sys

import pandas as pd

from config.config import (
    CALCULATOR_CONFIG, HISTORY_CONFIG, CLI_CONFIG, LOGGING_CONFIG, validate_config
)
from calculator import ExpressionEvaluator
from core import ExpressionError
from data.data_loader import load_expressions, apply_expressions_and_return_results, save_results
from utils import format_result, format_postfix, append_history

logger = logging.getLogger(__name__)


def setup_logging(level):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOGGING_CONFIG['format']
    )


def run_expression(expression, evaluator, args):
    """
    写历史、求值并输出；历史记录与求值是否成功无关
    Returns:
        是否求值成功
    """
    expression = expression.strip()
    if args.history:
        append_history(expression, args.history_path)

    try:
        if args.show_postfix:
            print(f"Postfix: {format_postfix(evaluator.to_postfix(expression))}")
        result = evaluator.evaluate(expression)
    except ExpressionError as e:
        logger.debug(f"{type(e).__name__} for {expression!r}")
        print(f"Error: {e.description}", file=sys.stderr)
        return False

    print(format_result(result, CALCULATOR_CONFIG['max_fraction_digits']))
    return True


def _read_line(prompt):
    try:
        return input(prompt)
    except EOFError:
        return None


def inline_single_mode(evaluator, args):
    line = _read_line(CLI_CONFIG['prompt'])
    if line is None:
        return 0
    return 0 if run_expression(line, evaluator, args) else 1


def inline_multiple_mode(evaluator, args):
    while True:
        line = _read_line(CLI_CONFIG['prompt'])
        if line is None:
            break
        trimmed = line.strip()
        if not trimmed:
            continue
        if trimmed.lower() in CLI_CONFIG['exit_commands']:
            break

        run_expression(trimmed, evaluator, args)

        print(CLI_CONFIG['separator'])
        answer = _read_line(CLI_CONFIG['continue_prompt'])
        if answer is None or answer.strip() in ('n', 'N'):
            break
    return 0


def argument_mode(expression, evaluator, args):
    return 0 if run_expression(expression, evaluator, args) else 1


def batch_mode(evaluator, args):
    expressions = load_expressions(args.batch_file)
    results = apply_expressions_and_return_results(expressions, evaluator)

    if results.empty:
        logger.warning("No expressions found in batch file")
        return 0

    display = results.copy()
    display['result'] = [
        format_result(value, CALCULATOR_CONFIG['max_fraction_digits']) if pd.isna(error) else ''
        for value, error in zip(results['result'], results['error'])
    ]
    display['error'] = results['error'].fillna('')
    print(display.to_string(index=False))

    if args.output_path:
        save_results(results, args.output_path)

    return 1 if results['error'].notna().any() else 0


def _find_option(parser, arg):
    """返回 (action, 是否内联了取值)；非已知选项返回 (None, False)"""
    actions = parser._option_string_actions
    if arg in actions:
        return actions[arg], False
    if arg.startswith('--'):
        name, has_value = arg.split('=', 1)[0], '=' in arg
        if name in actions:
            return actions[name], has_value
        # 长选项缩写，必须唯一
        matches = [s for s in actions if s.startswith('--') and s.startswith(name)]
        if len(matches) == 1:
            return actions[matches[0]], has_value
    return None, False


def _collect_expression(parser, argv):
    """按命令行位置拼接表达式片段：跳过已知选项及其取值，其余（包括 -5+3 这类片段）保持原顺序"""
    parts = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == '--':
            parts.extend(argv[i + 1:])
            break
        action, inline_value = _find_option(parser, arg)
        if action is None:
            parts.append(arg)
        elif action.nargs != 0 and not inline_value:
            i += 1  # 选项的取值
        i += 1
    return ' '.join(parts)


def build_parser():
    parser = argparse.ArgumentParser(description="Console arithmetic expression calculator")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-s",
        dest="mode",
        action="store_const",
        const="single",
        help="Read one expression from the prompt (default)"
    )
    mode.add_argument(
        "-m",
        dest="mode",
        action="store_const",
        const="multiple",
        help="Keep prompting for expressions until 'exit', 'quit' or 'n'"
    )
    mode.add_argument(
        "-a",
        dest="mode",
        action="store_const",
        const="argument",
        help="Evaluate the expression given on the command line"
    )
    mode.add_argument(
        "-f", "--batch_file",
        type=str,
        default=None,
        help="Evaluate every line of a file (e.g. the history file)"
    )
    parser.add_argument(
        "expression",
        nargs="*",
        help="Expression words, joined with spaces"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Save batch results to this CSV file"
    )
    parser.add_argument(
        "--history_path",
        type=str,
        default=HISTORY_CONFIG['history_path'],
        help="Path of the history file"
    )
    parser.add_argument(
        "--no_history",
        dest="history",
        action="store_false",
        default=HISTORY_CONFIG['enabled'],
        help="Do not append expressions to the history file"
    )
    parser.add_argument(
        "--log_base",
        choices=["e", "10"],
        default=str(CALCULATOR_CONFIG['log_base']),
        help="Base of log(): natural (e) or common (10); ln is always natural"
    )
    parser.add_argument(
        "--show_postfix",
        action="store_true",
        help="Print the postfix (RPN) form before the result"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        help="Logging level (default: WARNING)"
    )
    return parser


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args, _ = parser.parse_known_args(argv)
    setup_logging(args.log_level)
    validate_config()

    evaluator = ExpressionEvaluator(log_base=args.log_base)
    expression = _collect_expression(parser, argv)

    if args.batch_file:
        return batch_mode(evaluator, args)

    mode = args.mode
    if mode is None:
        mode = "argument" if expression else "single"
    logger.debug(f"Mode: {mode}")

    if mode == "multiple":
        return inline_multiple_mode(evaluator, args)
    if mode == "argument" and expression:
        return argument_mode(expression, evaluator, args)
    return inline_single_mode(evaluator, args)


if __name__ == "__main__":
    sys.exit(main())
