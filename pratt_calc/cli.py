import argparse
import logging
import sys

from .config import CalcOptions
from .expression import Expression
from .handler import HandlerError
from .parser import ParseError
from .validation import ValidateError

logger = logging.getLogger(__name__)


def build_parser():
    ap = argparse.ArgumentParser(
        prog="pratt-calc",
        description="Parse and evaluate an integer arithmetic expression.",
    )
    ap.add_argument("expr", help="Expression to evaluate, for example '-5! + 2^3^2'")
    ap.add_argument("--config", help="YAML file with options")
    ap.add_argument(
        "--params", default="", help="YAML/JSON object with options, applied last"
    )
    ap.add_argument("--no-tokens", action="store_true", help="Don't print tokens")
    ap.add_argument("--no-ast", action="store_true", help="Don't print the AST")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def load_options(args):
    options = CalcOptions()
    if args.config:
        options = CalcOptions.from_file(args.config, base=options)
    options = CalcOptions.from_yaml(args.params, base=options)
    overrides = {}
    if args.no_tokens:
        overrides["print_tokens"] = False
    if args.no_ast:
        overrides["print_ast"] = False
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return CalcOptions(**options.as_dict() | overrides)


def run(source, options, out=None):
    out = sys.stdout if out is None else out
    expr = Expression(source, options=options)
    if options.print_tokens:
        print("#== Tokens ==", file=out)
        for tok in expr.tokens:
            print(tok, file=out)
        print(file=out)
    if options.print_ast:
        print("#== AST =====", file=out)
        print(expr, file=out, end="\n\n")
    result = expr.eval()
    print(result, file=out)
    return result


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        options = load_options(args)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    logging.basicConfig(level=options.log_level_value)
    try:
        run(args.expr, options)
    except (ParseError, ValidateError, HandlerError, RecursionError) as exc:
        logger.debug("evaluation of %r failed", args.expr, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
