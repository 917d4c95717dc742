"""
Command line interface for redaadic.

Usage:
    python -m redaadic.cli "住んでいます"
    python -m redaadic.cli -j "来ます"        # JSON output
    python -m redaadic.cli -b "している"      # distinct base forms only
    python -m redaadic.cli -d 1 "している"    # limit rule chain length
    python -m redaadic.cli check-update jitendex/index.json [--update]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from redaadic import __version__, settings
from redaadic.deinflector import Deinflection, base_forms, deinflect
from redaadic.models import DeinflectionResponse


def format_deinflection(d: Deinflection) -> str:
    """Format one candidate as a text line."""
    chain = ' -> '.join(d.rule_chain)
    types = ','.join(sorted(t.value for t in d.types))
    return f"{d.text}  [{chain}]  {{{types}}}"


def main_check_update(args: list) -> int:
    """CLI entry point for check-update subcommand."""
    parser = argparse.ArgumentParser(
        description='Check an installed dictionary for a newer revision',
        prog='redaadic check-update',
    )

    parser.add_argument(
        'index',
        metavar='PATH',
        help='Path to the dictionary index.json',
    )

    parser.add_argument(
        '--update', '-u',
        action='store_true',
        help='Download and install the new revision next to index.json',
    )

    parsed = parser.parse_args(args)

    from redaadic.dictionary import DictionaryError, DictionaryPackage

    index_path = Path(parsed.index)
    try:
        package = DictionaryPackage.from_path(index_path)
        state = package.fetch_update()
        print(f'{package.title} {package.revision}: {state.value}')

        if parsed.update and package.update(index_path.parent):
            print(f'Updated {package.title} to {package.revision}')
        return 0

    except (OSError, ValueError, DictionaryError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    args_list = args if args is not None else sys.argv[1:]

    if args_list and args_list[0] == 'check-update':
        return main_check_update(args_list[1:])

    parser = argparse.ArgumentParser(
        description='Command line interface for redaadic (Japanese verb deinflection)',
        prog='redaadic',
        epilog='Subcommands:\n  redaadic check-update PATH    Check a dictionary index.json for updates',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        'words',
        nargs='*',
        help='Inflected Japanese words to deinflect',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print candidates as JSON',
    )

    parser.add_argument(
        '-b', '--base-forms',
        action='store_true',
        help='Print distinct candidate texts only',
    )

    parser.add_argument(
        '-d', '--max-depth',
        type=int,
        default=settings.MAX_DEPTH,
        metavar='N',
        help='Limit rule chains to N rules (default: unlimited, or REDAADIC_MAX_DEPTH)',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args_list)

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    if parsed.version:
        print(f'redaadic {__version__}')
        return 0

    if not parsed.words:
        parser.print_help()
        return 1

    try:
        for word in parsed.words:
            if parsed.base_forms:
                for form in base_forms(word, max_depth=parsed.max_depth):
                    print(form)
                continue

            results = deinflect(word, max_depth=parsed.max_depth)
            if parsed.json:
                response = DeinflectionResponse.from_deinflections(word, results)
                print(json.dumps(response.model_dump(), ensure_ascii=False))
            else:
                lines: List[str] = [format_deinflection(d) for d in results]
                print('\n'.join(lines))
        return 0

    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
