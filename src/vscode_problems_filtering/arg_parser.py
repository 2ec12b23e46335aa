from . import __version__
from .io import INPUT_FORMATS
import argparse


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser():
    parser = argparse.ArgumentParser(
        prog="vscode-problems-filtering",
        description=(
            "Filter problems exported from the VS Code Problems view by "
            "include and exclude terms"
        ),
    )

    input_group = parser.add_argument_group("Input")
    input_group.add_argument(
        "-f",
        "--input",
        required=True,
        metavar="FILE",
        help="JSON file containing the exported problems (may be gzipped)",
    )
    input_group.add_argument(
        "--input-format",
        choices=INPUT_FORMATS,
        default="auto",
        help="Input format. auto uses JSON Lines for .jsonl files (default: auto)",
    )

    filter_group = parser.add_argument_group("Filtering options")
    filter_group.add_argument(
        "-i",
        "--include",
        dest="include_terms",
        action="append",
        default=[],
        metavar="TERM",
        help="Term that must appear in the resource or message. Repeatable; all must match.",
    )
    filter_group.add_argument(
        "-e",
        "--exclude",
        dest="exclude_terms",
        action="append",
        default=[],
        metavar="TERM",
        help="Term that must not appear in the resource or message. Repeatable; any excludes.",
    )
    filter_group.add_argument(
        "--ignore-case",
        action="store_true",
        help="Ignore case when comparing terms",
    )

    output_group = parser.add_argument_group("Output")
    mode_group = output_group.add_mutually_exclusive_group()
    mode_group.add_argument(
        "-c",
        "--count-only",
        action="store_true",
        help="Only print the number of matching problems",
    )
    mode_group.add_argument(
        "--json",
        action="store_true",
        help="Print matching problems as a JSON array",
    )
    mode_group.add_argument(
        "--jsonl",
        action="store_true",
        help="Print matching problems as JSON Lines",
    )
    output_group.add_argument(
        "--no-truncate",
        action="store_true",
        help="Show full resource paths and messages in the table",
    )

    options_group = parser.add_argument_group("General options")
    options_group.add_argument(
        "-l",
        "--log-level",
        type=str,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Set the logging level (default: WARNING)",
    )
    options_group.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def parse_args_for_filtering(argv=None):
    return build_parser().parse_args(argv)
