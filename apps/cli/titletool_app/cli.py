"""CLI entrypoint for creating title images."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from titletool_core import (
    ConfigurationError,
    OutputWriteError,
    RenderConfig,
    Size,
    TitleJob,
    configure_logging,
    get_logger,
    load_config,
    parse_size,
)
from titletool_renderer import TitleRenderer, list_gradients


def _size_arg(value: str) -> Size:
    try:
        return parse_size(value)
    except ConfigurationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="titletool",
        description="titletool -- a utility for creating title images",
    )

    general = parser.add_argument_group("General flags")
    general.add_argument("-v", dest="verbose", action="store_true", help="Verbose status messages")
    general.add_argument("-d", dest="debug", action="store_true", help="Debug status messages")
    general.add_argument("--config", default=None, help="JSON file with render settings")
    general.add_argument("--log-file", default=None, help="Append JSON log lines to this file")
    general.add_argument("--list-gradients", action="store_true", help="Print gradient names and exit")

    inputs = parser.add_argument_group("Input flags")
    inputs.add_argument("--title", metavar="TITLE", default="", help="Set title")
    inputs.add_argument("--subtitle", metavar="TITLE", default="", help="Set subtitle")
    inputs.add_argument("--gradient", metavar="GRADIENT", default=None, help="Set gradient")
    inputs.add_argument("--size", metavar="SIZE", type=_size_arg, default=None, help="Set size (default: 1024, 1024)")

    outputs = parser.add_argument_group("Output flags")
    outputs.add_argument("--outputfile", metavar="OUTPUTFILE", default=None, help="Set output file")

    return parser


def build_job(args: argparse.Namespace, config: RenderConfig) -> TitleJob:
    if not args.outputfile:
        raise ConfigurationError("must have output file parameter")
    return TitleJob(
        output_file=Path(args.outputfile),
        size=args.size or config.size,
        title=args.title,
        subtitle=args.subtitle,
        gradient=args.gradient or None,
    )


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    if not argv:
        parser.print_usage(sys.stderr)
        print("\nFor detailed help: titletool --help", file=sys.stderr)
        return 1

    args = parser.parse_args(argv)
    try:
        logger = configure_logging(
            verbose=args.verbose,
            debug=args.debug,
            log_file=Path(args.log_file) if args.log_file else None,
        )
    except ConfigurationError as exc:
        # the console handler is attached before the log file is opened
        get_logger().error(str(exc), extra={"event": "configuration_error"})
        parser.print_usage(sys.stderr)
        return 1

    if args.list_gradients:
        print("\n".join(list_gradients()))
        return 0

    try:
        config = load_config(Path(args.config)) if args.config else RenderConfig()
        job = build_job(args, config)
    except ConfigurationError as exc:
        logger.error(str(exc), extra={"event": "configuration_error"})
        parser.print_usage(sys.stderr)
        return 1

    logger.info("titletool -- a utility for creating title images")
    try:
        TitleRenderer(config).write(job)
    except OutputWriteError as exc:
        logger.error(str(exc), extra={"event": "write_failed"})
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
