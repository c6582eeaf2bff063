"""Command line front end.

Usage:
    columnizer table data.txt --ifs , --pad-decimal-digits
    ps aux | columnizer table --max-cell-width 30 --frame wrap
    columnizer format "1234.5" --use-thousand-separator --width 12
    columnizer truncate "Hello World" --width 5
    columnizer is numeric "1,234.50"

Every command takes an optional INPUT argument: a file path, literal
text, or nothing to read standard input.
"""

import argparse
import logging
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape

from . import text as text_ops
from .builder import TableBuilder
from .cell import format_value, is_hex, is_numeric
from .config import Alignment, Frame, TableConfig, load_config
from .errors import ColumnizerError
from .grid import clean
from .input_reader import read_input

logger = logging.getLogger(__name__)

_err_console = Console(stderr=True)

# CLI dests that map one-to-one onto TableConfig fields
_TABLE_OPTIONS = (
    "input_separator", "output_separator", "header_index", "header_count",
    "column_limit_index", "no_divider", "divider_char", "max_cell_width",
    "frame", "ellipsis", "alignment", "pad_decimal_digits",
    "max_decimal_digits", "decimal_separator", "use_thousand_separator",
    "thousand_separator",
)
_FORMAT_OPTIONS = (
    "frame", "ellipsis", "alignment", "pad_decimal_digits",
    "max_decimal_digits", "decimal_separator", "use_thousand_separator",
    "thousand_separator",
)


def _add_input(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="File path or literal text (default: read stdin)",
    )


def _add_frame_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--frame",
        type=Frame.parse,
        default=None,
        help="TRUNCATE, WRAP or NONE (default: TRUNCATE)",
    )
    parser.add_argument(
        "--no-ellipsis",
        dest="ellipsis",
        action="store_const",
        const=False,
        default=None,
        help="Don't append '...' to truncated text",
    )
    parser.add_argument(
        "--alignment",
        type=Alignment.parse,
        default=None,
        help="AUTO, LEFT, RIGHT or CENTER (default: AUTO)",
    )


def _add_number_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--pad-decimal-digits",
        action="store_const",
        const=True,
        default=None,
        help="Always print --max-decimal-digits fraction digits",
    )
    parser.add_argument(
        "--max-decimal-digits",
        type=int,
        default=None,
        help="Fraction digits when padding (default: 2)",
    )
    parser.add_argument(
        "--decimal-separator",
        default=None,
        help="Decimal separator character (default: '.')",
    )
    parser.add_argument(
        "--use-thousand-separator",
        action="store_const",
        const=True,
        default=None,
        help="Group integer digits in threes",
    )
    parser.add_argument(
        "--thousand-separator",
        default=None,
        help="Thousands separator character (default: ',')",
    )


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help="JSON or YAML file with table options; command line options win",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="columnizer",
        description="Format delimiter-separated text into aligned columns",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # table
    table = subparsers.add_parser("table", help="Format input as an aligned table")
    _add_input(table)
    table.add_argument("--ifs", dest="input_separator", default=None,
                       help="Input field separator (default: space)")
    table.add_argument("--ofs", dest="output_separator", default=None,
                       help="Output field separator (default: space)")
    table.add_argument("--header-row", dest="header_index", type=int, default=None,
                       help="1-based header row, 0 for no header (default: 1)")
    table.add_argument("--header-count", type=int, default=None,
                       help="Number of header rows (default: 1)")
    table.add_argument("--max-width-row", dest="column_limit_index", type=int, default=None,
                       help="1-based row holding per-column max widths (default: none)")
    table.add_argument("--no-divider", action="store_const", const=True, default=None,
                       help="Don't draw the divider after the headers")
    table.add_argument("--divider-char", default=None,
                       help="Divider character (default: '-')")
    table.add_argument("--max-cell-width", type=int, default=None,
                       help="Max cell width, 0 for unlimited (default: 40)")
    _add_frame_options(table)
    _add_number_options(table)
    _add_config_option(table)
    table.set_defaults(handler=_cmd_table)

    # format
    fmt = subparsers.add_parser("format", help="Format a single value")
    _add_input(fmt)
    fmt.add_argument("-w", "--width", type=int, default=20,
                     help="Width for truncation, wrapping and alignment (default: 20)")
    _add_frame_options(fmt)
    _add_number_options(fmt)
    _add_config_option(fmt)
    quote = fmt.add_mutually_exclusive_group()
    quote.add_argument("--quote", action="store_true", help="Wrap the result in double quotes")
    quote.add_argument("--single-quote", action="store_true", help="Wrap the result in single quotes")
    fmt.set_defaults(handler=_cmd_format)

    # clean
    cleaner = subparsers.add_parser("clean", help="Trim lines and drop blank ones")
    _add_input(cleaner)
    cleaner.set_defaults(handler=_cmd_clean)

    # left/right/center/wrap/truncate
    for name, help_text in (
        ("left", "Left-align every line"),
        ("right", "Right-align every line"),
        ("center", "Center every line"),
        ("wrap", "Word-wrap every line"),
        ("truncate", "Truncate every line"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        _add_input(sub)
        sub.add_argument("-w", "--width", type=int, default=None,
                         help="Target width (default: widest line, or 20 for wrap/truncate)")
        if name == "truncate":
            sub.add_argument("--no-ellipsis", dest="ellipsis", action="store_false",
                             help="Don't append '...' to truncated lines")
        sub.set_defaults(handler=_cmd_text)

    # is numeric|hex
    check = subparsers.add_parser("is", help="Check whether input is numeric or hex")
    check.add_argument("kind", choices=["numeric", "hex"])
    _add_input(check)
    check.add_argument("--decimal-separator", default=".",
                       help="Decimal separator character (default: '.')")
    check.add_argument("--thousand-separator", default=",",
                       help="Thousands separator character (default: ',')")
    check.set_defaults(handler=_cmd_is)

    return parser


def resolve_config(args: argparse.Namespace, options: Tuple[str, ...]) -> TableConfig:
    """Merge the optional config file with explicit command line options."""
    config = load_config(args.config) if getattr(args, "config", None) else TableConfig()
    overrides: Dict[str, Any] = {}
    for name in options:
        value = getattr(args, name, None)
        if value is not None:
            overrides[name] = value
    if overrides:
        logger.debug("Command line overrides: %s", overrides)
        config = config.replace(**overrides)
    return config


def _cmd_table(args: argparse.Namespace) -> str:
    config = resolve_config(args, _TABLE_OPTIONS)
    return TableBuilder(config).build(read_input(args.input)).text


def _cmd_format(args: argparse.Namespace) -> str:
    config = resolve_config(args, _FORMAT_OPTIONS)
    result = format_value(read_input(args.input), config.cell_format(max(args.width, 0)))
    if args.quote:
        return f'"{result}"'
    if args.single_quote:
        return f"'{result}'"
    return result


def _cmd_clean(args: argparse.Namespace) -> str:
    return clean(read_input(args.input))


def _cmd_text(args: argparse.Namespace) -> str:
    source = read_input(args.input)
    if args.command == "left":
        return text_ops.align_left(source)
    if args.command == "right":
        return text_ops.align_right(source, args.width)
    if args.command == "center":
        return text_ops.align_center(source, args.width)
    width = 20 if args.width is None else args.width
    if args.command == "wrap":
        return text_ops.wrap(source, width)
    return text_ops.truncate(source, width, args.ellipsis)


def _cmd_is(args: argparse.Namespace) -> str:
    source = read_input(args.input)
    if args.kind == "hex":
        result = is_hex(source)
    else:
        result = is_numeric(source, args.decimal_separator, args.thousand_separator)
    return "true" if result else "false"


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:].

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    handler: Callable[[argparse.Namespace], str] = args.handler
    try:
        output = handler(args)
    except ColumnizerError as e:
        _err_console.print(
            f"[bold red]Error:[/bold red] {escape(str(e))}",
            highlight=False,
            soft_wrap=True,
        )
        return 1

    if output:
        sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
