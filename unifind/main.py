# Path: unifind/main.py
"""
unifind - Main Entry Point

Finds Unicode characters by name, annotation, block or sub-heading.

Data Flow:
    INPUT:   NamesList.txt (cached under the user cache directory)
    PROCESS: Parse + match every record against the query terms
    OUTPUT:  One line per match on stdout (or one per block with --cats)

Usage:
    unifind capital a            # Glyphs only
    unifind -c capital a         # Code points (U+0041)
    unifind -v arrow left        # Glyph + name
    unifind -vv greek alpha      # Glyph + name, block, sub-heading, range
    unifind --cats arrow         # Blocks containing matches
    unifind --all --cats         # Every block

Exit status:
    0  matches printed
    1  nothing matched, or the document could not be obtained
    2  no query and no options given, or bad arguments
"""

import argparse
import sys
import traceback
from typing import Optional, Sequence

from . import __version__
from .config_loader import ConfigLoader
from .constants import (
    APP_NAME,
    EXIT_OK, EXIT_FAILURE, EXIT_USAGE, EXIT_INTERRUPTED,
    NOT_FOUND_MESSAGE, STATUS_FAIL,
)
from .core.logger import setup_ipo_logging, get_input_logger
from .exceptions import DocumentProviderError, MissingQuery, NoMatches
from .output.formatters import FormatterRegistry
from .process.search import CharacterSearch


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description='unifind - find Unicode characters by name',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  unifind capital a           Glyphs whose names contain "capital" and "a"
  unifind -c snowman          Code point notation only
  unifind -vv greek alpha     Full details
  unifind --cats arrow        Blocks with matching characters
  unifind --all --cats        List every block
        """
    )

    parser.add_argument(
        'query',
        nargs='*',
        help='Query terms; every term must match (case-insensitive)'
    )

    parser.add_argument(
        '-c', '--code',
        action='store_true',
        help='Print code points only (U+XXXX)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Print character and name; -vv adds block and sub-heading'
    )

    parser.add_argument(
        '--cats', '-cats',
        action='store_true',
        help='Print the sorted block names of the matches instead'
    )

    parser.add_argument(
        '--all',
        action='store_true',
        help='Match every character when no query is given'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'{APP_NAME} {__version__}'
    )

    return parser


def select_format(args: argparse.Namespace) -> str:
    """
    Map command line flags to a formatter name.

    Precedence: --cats, -c, -v, -vv, default glyph.
    """
    if args.cats:
        return 'categories'
    if args.code:
        return 'code'
    if args.verbose == 1:
        return 'verbose'
    if args.verbose >= 2:
        return 'detail'
    return 'glyph'


def query_from_args(args: argparse.Namespace) -> str:
    """
    Join query words with single spaces.

    Options without query words leave an empty query, which matches
    every character.

    Raises:
        MissingQuery: If neither a query term nor any option was given
    """
    query_text = ' '.join(args.query)
    has_options = args.all or args.cats or args.code or args.verbose > 0
    if not query_text.strip() and not has_options:
        raise MissingQuery("no query given (use --all to match every character)")
    return query_text


def initialize_system() -> ConfigLoader:
    """
    Initialize configuration and logging.

    Returns:
        ConfigLoader
    """
    config = ConfigLoader()

    log_level = 'DEBUG' if config.get('debug', False) else config.get('log_level', 'WARNING')
    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=log_level,
        console_output=config.get('log_console', True)
    )

    return config


def run_search(config: ConfigLoader, query_text: str, format_name: str) -> int:
    """
    Search and print results.

    Args:
        config: Configuration loader
        query_text: Query as typed
        format_name: Registered formatter name

    Returns:
        Exit code

    Raises:
        NoMatches: If nothing matched
        DocumentProviderError: If the document cannot be obtained
    """
    logger = get_input_logger('main')
    logger.info(f"Query {query_text!r}, output mode {format_name}")

    result = CharacterSearch(config).search(query_text)

    if result.errors:
        counts = ', '.join(
            f"{category}: {count}"
            for category, count in result.errors.count_by_category().items()
        )
        logger.warning(f"{len(result.errors)} document lines skipped ({counts})")

    if not result:
        raise NoMatches(query_text)

    formatter = FormatterRegistry.get(format_name)
    formatter.write_result(result, sys.stdout)
    return EXIT_OK


def _configure_stdout() -> None:
    """Never fail on glyphs the terminal encoding cannot represent."""
    if hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(errors='replace')


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for unifind.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    try:
        query_text = query_from_args(args)
        config = initialize_system()
        _configure_stdout()
        return run_search(config, query_text, select_format(args))

    except MissingQuery as e:
        print(f"{STATUS_FAIL} {e}", file=sys.stderr)
        return EXIT_USAGE

    except NoMatches:
        print(NOT_FOUND_MESSAGE, file=sys.stderr)
        return EXIT_FAILURE

    except DocumentProviderError as e:
        print(f"{STATUS_FAIL} {e}", file=sys.stderr)
        return EXIT_FAILURE

    except KeyboardInterrupt:
        print("\n[Interrupted]", file=sys.stderr)
        return EXIT_INTERRUPTED

    except Exception as e:
        print(f"{STATUS_FAIL} Unexpected error: {e}", file=sys.stderr)
        traceback.print_exc()
        return EXIT_FAILURE


if __name__ == '__main__':
    sys.exit(main())
