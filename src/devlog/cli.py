"""
Command line front end: write values through a configured Logger.

    devlog --channel warn --prefix deploy "disk almost full" '{"free_mb": 12}'
"""

import json
import logging
import argparse
import sys

from .channels import Channel
from .config import add_logger_arguments, load_logger
from .logger_injection import configure_logging


def _parse_value(text):
    # JSON literals (objects, numbers, ...) are logged as values, anything else as text.
    # 'null' stays text, a bare None is not worth printing.
    try:
        value = json.loads(text)
    except ValueError:
        return text
    return text if value is None else value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Write messages through a development-gated logger')

    add_logger_arguments(parser)

    parser.add_argument('--channel',
                        default=Channel.LOG.value,
                        choices=[channel.value for channel in Channel],
                        help='Channel to write to (default: log)')
    parser.add_argument('--force',
                        action='store_true',
                        help='Write regardless of environment and debug gates')
    parser.add_argument('--raw',
                        action='store_true',
                        help='Treat every value as text instead of parsing JSON literals')
    parser.add_argument('--log-level', default=None,
                        help='Diagnostics logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)')
    parser.add_argument('--log-file', default=None,
                        help='Optional file for diagnostics logging')
    parser.add_argument('values', nargs='*', help='Values to write')
    return parser


def main(argv=None, **logger_kwargs):
    """
    Entry point for the devlog command.

    Args:
        argv: Argument list, sys.argv[1:] if None
        **logger_kwargs: Passed on to Logger (environment_query, sink)

    Returns:
        int: Exit status
    """
    args = build_parser().parse_args(argv)

    if args.log_level or args.log_file:
        level_name = (args.log_level or 'WARNING').upper()
        configure_logging({
            'log_file_path': args.log_file,
            'log_level': getattr(logging, level_name, logging.WARNING)
        })

    values = args.values if args.raw else [_parse_value(value) for value in args.values]
    logger = load_logger(args, **logger_kwargs)

    if args.force:
        logger.force(args.channel, *values)
    else:
        getattr(logger, args.channel)(*values)

    return 0


if __name__ == '__main__':
    sys.exit(main())
