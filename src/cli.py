#!/usr/bin/env python3
"""
Command-line interface for Text Rewrite Tool.
Regex find & rewrite on text, plus time-zone lookup for date strings.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from regex_engine.regex_processor import RegexProcessor
from regex_engine.match_rewriter import STRATEGY_OVERWRITE, STRATEGY_SPLICE
from time_utils.timezones import timezone_for, hour_of_the_day, hours_remaining_in_today


def _read_input(args) -> Optional[str]:
    """Text from --text, --file, or stdin."""
    if args.text is not None:
        return args.text

    if args.file:
        try:
            return Path(args.file).read_text(encoding='utf-8')
        except OSError as e:
            print(f"Failed to read {args.file}: {e}")
            return None

    return sys.stdin.read()


def _prepare(args):
    """Build processor and flags, validating the pattern. Returns (processor, flags) or None."""
    regex_proc = RegexProcessor()

    try:
        flags = regex_proc.parse_flags(args.flags)
    except ValueError as e:
        print(e)
        return None

    is_valid, error = regex_proc.validate_pattern(args.pattern, flags)
    if not is_valid:
        print(f"Invalid regex pattern: {error}")
        return None

    return regex_proc, flags


def _search_range(args, text: str):
    if not args.range:
        return None

    start, end = args.range
    if start < 0 or end > len(text) or start > end:
        print(f"Invalid range {start}-{end} for text of length {len(text)}")
        return False
    return start, end


def find_command(args):
    """Execute find operation."""
    prepared = _prepare(args)
    if prepared is None:
        return 1
    regex_proc, flags = prepared

    text = _read_input(args)
    if text is None:
        return 1

    search_range = _search_range(args, text)
    if search_range is False:
        return 1

    matches = regex_proc.find_in_text(text, args.pattern, flags=flags, search_range=search_range)

    if args.json:
        print(json.dumps({
            'pattern': args.pattern,
            'total_matches': len(matches),
            'matches': [{'start': s, 'end': e, 'match': m} for s, e, m in matches],
        }, indent=2, ensure_ascii=False))
        return 0

    print(f"Pattern: {args.pattern}")
    print()
    for start, end, matched in matches:
        print(f"  → Match: '{matched}' (pos {start}-{end})")

    print(f"\nTotal matches found: {len(matches)}")
    return 0


def rewrite_command(args):
    """Execute rewrite operation."""
    prepared = _prepare(args)
    if prepared is None:
        return 1
    regex_proc, flags = prepared

    text = _read_input(args)
    if text is None:
        return 1

    search_range = _search_range(args, text)
    if search_range is False:
        return 1

    strategy = STRATEGY_SPLICE if args.splice else STRATEGY_OVERWRITE
    try:
        result = regex_proc.replace_in_text(
            text, args.pattern, args.replacement, flags=flags, search_range=search_range,
            max_replacements=args.max_replacements, strategy=strategy)
    except (ValueError, IndexError, regex_proc.regex_module.error) as e:
        # Bad backreference in the replacement template, or a negative limit
        print(f"Rewrite failed: {e}")
        return 1

    if result is None:
        return 1

    if args.output:
        try:
            Path(args.output).write_text(result.new_text, encoding='utf-8')
        except OSError as e:
            print(f"Failed to write {args.output}: {e}")
            return 1

    if args.json:
        print(json.dumps({
            'pattern': args.pattern,
            'replacement': args.replacement,
            'strategy': strategy,
            'matches': result.matches_count,
            'replacements': result.replaced_count,
            'text': result.new_text,
        }, indent=2, ensure_ascii=False))
        return 0

    if args.output:
        print(f"Replacements made: {result.replaced_count} of {result.matches_count} matches")
        print(f"Saved to: {args.output}")
    else:
        sys.stdout.write(result.new_text)
    return 0


def validate_command(args):
    """Validate a pattern."""
    regex_proc = RegexProcessor()
    try:
        flags = regex_proc.parse_flags(args.flags)
    except ValueError as e:
        print(e)
        return 1

    is_valid, error = regex_proc.validate_pattern(args.pattern, flags)
    if is_valid:
        print(f"✓ Valid pattern: {args.pattern}")
        return 0

    print(f"✗ Invalid pattern: {error}")
    return 1


def timezone_command(args):
    """Show the time zone of an ISO 8601 or RFC 822 date string."""
    tz = timezone_for(args.date_string)
    if tz is None:
        if args.json:
            print(json.dumps({"error": "No time zone offset found"}))
        else:
            print(f"No time zone offset found in: {args.date_string}")
        return 1

    offset_seconds = int(tz.utcoffset(None).total_seconds())
    if args.json:
        print(json.dumps({
            'timezone': str(tz),
            'offset_seconds': offset_seconds,
            'hour_of_the_day': hour_of_the_day(tz),
            'hours_remaining_in_today': hours_remaining_in_today(tz),
        }, indent=2))
        return 0

    print(f"Time zone: {tz} ({offset_seconds:+d} s)")
    print(f"Hour of the day: {hour_of_the_day(tz)}")
    print(f"Hours remaining in today: {hours_remaining_in_today(tz)}")
    return 0


def _add_text_arguments(subparser):
    source = subparser.add_mutually_exclusive_group()
    source.add_argument('--text', '-t', help='Text to process (default: read stdin)')
    source.add_argument('--file', '-f', help='File to process')
    subparser.add_argument('--flags', default='', help='Regex flags: i, m, s, x, u (e.g. "im")')
    subparser.add_argument('--range', nargs=2, type=int, metavar=('START', 'END'),
                           help='Only search character positions START to END')


def build_parser():
    parser = argparse.ArgumentParser(
        description='Text Rewrite Tool - Find & rewrite with regex in text'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Find command
    find_parser = subparsers.add_parser('find', help='Find pattern in text')
    find_parser.add_argument('pattern', help='Regex pattern to find')
    _add_text_arguments(find_parser)
    find_parser.add_argument('--json', action='store_true', help='Output as JSON')
    find_parser.set_defaults(func=find_command)

    # Rewrite command
    rewrite_parser = subparsers.add_parser('rewrite', help='Rewrite pattern matches in text')
    rewrite_parser.add_argument('pattern', help='Regex pattern to find')
    rewrite_parser.add_argument('replacement', help='Replacement string (supports $1 or \\1)')
    _add_text_arguments(rewrite_parser)
    rewrite_parser.add_argument('--output', '-o', help='Output file (default: print result)')
    rewrite_parser.add_argument('--splice', action='store_true',
                                help='Replace whole matches instead of overwriting in place')
    rewrite_parser.add_argument('--max-replacements', type=int, default=0,
                                help='Maximum replacements (0 = unlimited)')
    rewrite_parser.add_argument('--json', action='store_true', help='Output as JSON')
    rewrite_parser.set_defaults(func=rewrite_command)

    # Validate command
    validate_parser = subparsers.add_parser('validate', help='Check that a pattern compiles')
    validate_parser.add_argument('pattern', help='Regex pattern')
    validate_parser.add_argument('--flags', default='', help='Regex flags: i, m, s, x, u')
    validate_parser.set_defaults(func=validate_command)

    # Timezone command
    timezone_parser = subparsers.add_parser('timezone', help='Time zone of an ISO 8601 / RFC 822 date')
    timezone_parser.add_argument('date_string', help='Date string ending in an offset, e.g. +01:00')
    timezone_parser.add_argument('--json', action='store_true', help='Output as JSON')
    timezone_parser.set_defaults(func=timezone_command)

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
