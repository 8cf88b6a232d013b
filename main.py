"""主程序入口 - 交互式计算、单次计算和批量计算"""
import argparse
import logging

from config.config import *
from calculator import ExpressionEvaluator
from core import sanitize
from data.data_loader import load_expressions, save_results
from utils.formatting import format_line

logger = logging.getLogger(__name__)


def answer(evaluator, raw):
    """返回一行要打印的结果；表达式无效时返回错误提示"""
    result = evaluator.try_evaluate(raw)
    if result is None:
        return CLI_CONFIG['error_message']
    return format_line(sanitize(raw), result)


def run_interactive(evaluator, input_func=input, output_func=print):
    """读取 - 求值 - 输出 循环，EOF 或 exit/quit 时结束"""
    while True:
        try:
            raw = input_func(CLI_CONFIG['prompt'])
        except EOFError:
            break
        if raw.strip().lower() in CLI_CONFIG['exit_commands']:
            break
        output_func(answer(evaluator, raw))


def run_batch(evaluator, args):
    expressions = load_expressions(args.input_file, args.expression_column)
    results = evaluator.evaluate_batch(expressions)

    for _, row in results.iterrows():
        if row['error']:
            print(f"{row['expression']}: {CLI_CONFIG['error_message']}")
        else:
            print(format_line(row['sanitized'], row['result']))

    if args.save_results:
        save_results(results, args.results_path)
    return results


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format=LOGGING_CONFIG['format']
    )
    validate_config()

    evaluator = ExpressionEvaluator(
        right_associative_power=args.right_associative_power or CALCULATOR_CONFIG['right_associative_power'],
        allow_partial=not args.strict and CALCULATOR_CONFIG['allow_partial']
    )
    logger.info(f"Right-associative '^': {evaluator.right_associative_power}, "
                f"partial results: {evaluator.allow_partial}")

    if args.expression is not None:
        print(answer(evaluator, args.expression))
    elif args.input_file:
        run_batch(evaluator, args)
    else:
        run_interactive(evaluator)


def build_parser():
    parser = argparse.ArgumentParser(description="RPN Calculator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Evaluate a single expression and exit"
    )
    parser.add_argument(
        "--input_file",
        type=str,
        default=None,
        help="Path to a text file (one expression per line) or a CSV file"
    )
    parser.add_argument(
        "--expression_column",
        type=str,
        default=BATCH_CONFIG['expression_column'],
        help="Name of the expression column in a CSV input file"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save the batch results to a CSV file"
    )
    parser.add_argument(
        "--results_path",
        type=str,
        default=BATCH_CONFIG['results_path'],
        help="Path to save the batch results"
    )
    parser.add_argument(
        "--right_associative_power",
        action="store_true",
        help="Treat '^' as right-associative (2^3^2 = 512)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject expressions that leave several operands on the stack"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        help="Logging level (default: WARNING)"
    )
    return parser


if __name__ == "__main__":
    main(build_parser().parse_args())
