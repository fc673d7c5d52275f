"""
Command line interface for ichiran-bindings.
Mirrors ichiran-cli, but prints decoded results.

Usage:
    ichiran-bindings "日本語テキスト"             # romanization
    ichiran-bindings -i "日本語テキスト"          # with info, as JSON
    ichiran-bindings -f "日本語テキスト"          # full split info, normalized JSON
    ichiran-bindings -f --raw "日本語テキスト"    # full split info, raw JSON
    ichiran-bindings validate dump.json          # check a saved -f dump (strict)
"""

import argparse
import logging
import shlex
import sys
from pathlib import Path
from typing import Optional

from ichiran_bindings import __version__, settings
from ichiran_bindings.errors import IchiranError, NonZeroExit, SchemaError
from ichiran_bindings.models import Segmentations, normalize
from ichiran_bindings.process import IchiranCli
from ichiran_bindings.raw import decode_structured
from ichiran_bindings.shapes import Strictness

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose or settings.DEBUG else logging.INFO
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')


def validate_command(args) -> int:
    """Decode a saved ``ichiran-cli -f`` dump and report schema drift."""
    try:
        if args.file == '-':
            text = sys.stdin.read()
        else:
            text = Path(args.file).read_text(encoding='utf-8')
    except OSError as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    try:
        raw = decode_structured(text, Strictness.STRICT if args.strict else Strictness.LENIENT)
    except SchemaError as e:
        print(f"Schema error at {e}", file=sys.stderr)
        for error in e.errors:
            logger.debug(f"  {error['loc']}: {error['msg']}")
        return 1

    doc = normalize(raw)
    words = sum(
        len(seg.best.words) for seg in doc if isinstance(seg, Segmentations)
    )
    print(f"OK: {len(doc)} segments, {words} words")
    return 0


def main_validate(args: list) -> int:
    """CLI entry point for validate subcommand."""
    parser = argparse.ArgumentParser(
        description='Check a saved ichiran-cli -f dump against the known schema',
        prog='ichiran-bindings validate',
    )

    parser.add_argument(
        'file',
        help="JSON file written by ichiran-cli -f ('-' for stdin)",
    )

    parser.add_argument(
        '--lenient',
        dest='strict',
        action='store_false',
        help='Ignore unknown fields instead of rejecting them',
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log every validation error',
    )

    parsed = parser.parse_args(args)
    configure_logging(parsed.verbose)
    return validate_command(parsed)


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    args_list = args if args is not None else sys.argv[1:]

    if args_list and args_list[0] == 'validate':
        return main_validate(args_list[1:])

    parser = argparse.ArgumentParser(
        description='Decoded output of ichiran-cli (Japanese Morphological Analyzer)',
        prog='ichiran-bindings',
        epilog='Subcommands:\n  ichiran-bindings validate FILE    Check a saved -f dump for schema drift',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        'text',
        nargs='*',
        help='Japanese text to analyze',
    )

    mode = parser.add_mutually_exclusive_group()

    mode.add_argument(
        '-i', '--with-info',
        action='store_true',
        help='Print dictionary info for each word',
    )

    mode.add_argument(
        '-f', '--full',
        action='store_true',
        help='Full split info as JSON',
    )

    parser.add_argument(
        '-l', '--limit',
        type=int,
        default=None,
        metavar='N',
        help='Limit segmentations to N results (use with -f)',
    )

    parser.add_argument(
        '--raw',
        action='store_true',
        help='With -f, print the raw model instead of the normalized one',
    )

    parser.add_argument(
        '--strict',
        action='store_true',
        help='Reject unknown fields in ichiran-cli output',
    )

    parser.add_argument(
        '-c', '--command',
        type=str,
        default=None,
        metavar='CMD',
        help='Command that runs ichiran-cli (default: $ICHIRAN_CLI or ichiran-cli)',
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Debug logging',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'ichiran-bindings {__version__}')
        return 0

    text = ' '.join(parsed.text) if parsed.text else ''

    if not text:
        parser.print_help()
        return 1

    configure_logging(parsed.verbose)

    cli = IchiranCli(
        command=shlex.split(parsed.command) if parsed.command else None,
        strictness=Strictness.STRICT if parsed.strict else None,
    )

    try:
        if parsed.full:
            raw = cli.segment_raw(text, limit=parsed.limit)
            result = raw if parsed.raw else normalize(raw)
            print(result.model_dump_json(indent=2, by_alias=True))

        elif parsed.with_info:
            info = cli.romanize_with_info(text)
            print(info.model_dump_json(indent=2))

        else:
            print(cli.romanize(text))

        return 0

    except NonZeroExit as e:
        print(f'Error: {e}', file=sys.stderr)
        if e.stderr:
            print(e.stderr.rstrip(), file=sys.stderr)
        return 1
    except IchiranError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
