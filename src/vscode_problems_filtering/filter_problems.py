from .arg_parser import parse_args_for_filtering
from .errors import ProblemsError
from .io import read_problems
from .logger import logger, setup_logger
from .matcher import FilterConfig, filter_problems
from .presenter import OutputMode, present
import sys


def output_mode_from_args(args):
    if args.count_only:
        return OutputMode.COUNT
    if args.json:
        return OutputMode.JSON
    if args.jsonl:
        return OutputMode.JSONL
    return OutputMode.TABLE


def run(args, stream=None):
    config = FilterConfig.from_terms(
        args.include_terms, args.exclude_terms, args.ignore_case
    )
    if not config.has_terms:
        logger.warning("No include or exclude terms given, keeping every problem")

    problems = read_problems(args.input, args.input_format)
    kept = filter_problems(problems, config)

    present(
        kept,
        output_mode_from_args(args),
        stream=stream,
        config=config,
        total=len(problems),
        truncate=not args.no_truncate,
    )
    return kept


def main(argv=None):
    args = parse_args_for_filtering(argv)
    setup_logger(args.log_level)

    try:
        run(args)
    except ProblemsError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
