import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .codec import (
    ConversionConfig,
    DecodeError,
    EncodeError,
    Format,
    convert,
)

logger = logging.getLogger(__name__)


def _format_arg(token: str) -> Format:
    try:
        return Format.parse(token)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    formats = "|".join(f.value for f in Format)
    parser = argparse.ArgumentParser(
        prog="byteconv",
        description="Convert bytes between ascii, utf8, hex and decimal text",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-i", "--input", type=_format_arg, required=True, metavar=formats, help="input format"
    )
    parser.add_argument(
        "-o", "--output", type=_format_arg, required=True, metavar=formats, help="output format"
    )
    parser.add_argument(
        "-s",
        "--separator",
        default=None,
        help="separator string: ', ' = 'xx, xx' (requires --grouping)",
    )
    parser.add_argument(
        "-g",
        "--grouping",
        type=int,
        default=None,
        help="byte grouping count: 2 = 'xx xx' (requires --separator)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("data", help="data to decode with the input format")
    return parser


def build_config(args) -> ConversionConfig:
    return ConversionConfig.from_options(
        input_format=args.input,
        output_format=args.output,
        data=args.data,
        separator=args.separator,
        grouping=args.grouping,
    )


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = build_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    logger.debug("converting %s -> %s", config.input_format, config.output_format)
    try:
        result = convert(config)
    except DecodeError as exc:
        parser.error(f"decoding error: {exc}")
    except EncodeError as exc:
        parser.error(f"encoding error: {exc}")

    sys.stdout.write(result + "\n")
    sys.stdout.flush()


__all__ = ["build_arg_parser", "build_config", "main"]
