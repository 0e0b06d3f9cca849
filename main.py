"""Headline Case - Command-line entry point

Quick examples
--------------

# 1) Convert the arguments
headline-case the quick brown fox jumps over a lazy dog

# 2) Convert every line of a file
headline-case < titles.txt

# 3) Show which rule decided each word
headline-case --explain smith v. jones case
"""

import argparse
import logging
import sys
from typing import List, Optional

from config import Config
from headline_case import HeadlineConfigError, HeadlineFormatter
from headline_case.services import get_vocabulary_service

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='headline-case',
        description='Convert text to New York Times style headline case.',
    )
    parser.add_argument('text', nargs='*',
                        help='text to convert (reads stdin line by line when omitted)')
    parser.add_argument('--vocabulary', metavar='FILE',
                        help='YAML file with always_capitalize / always_lowercase word lists')
    parser.add_argument('--min-length', type=int, metavar='N',
                        help='capitalize words whose alphabetic core has at least N letters')
    parser.add_argument('--explain', action='store_true',
                        help='print the rule that decided each word')
    parser.add_argument('--log-level', default=Config.LOG_LEVEL,
                        help='logging level (default: %(default)s)')
    return parser


def configure_logging(level_name: str) -> None:
    # stdout carries the converted text, logs go to stderr
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def create_formatter(args: argparse.Namespace) -> HeadlineFormatter:
    if args.vocabulary is None and args.min_length is None:
        return HeadlineFormatter.from_config(Config)

    settings = Config.get_headline_config()
    service = get_vocabulary_service(args.vocabulary or settings['vocabulary_file'])
    min_length = args.min_length if args.min_length is not None else settings['min_capitalize_length']
    return HeadlineFormatter(service.build_config(min_length))


def render(formatter: HeadlineFormatter, text: str, explain: bool) -> str:
    if not explain:
        return formatter.format(text)
    lines = [formatter.format(text)]
    for word, verdict in formatter.explain(text):
        lines.append(f"  {word}\t{verdict.decision.value}\t{verdict.rule_type}")
    return '\n'.join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        formatter = create_formatter(args)
    except HeadlineConfigError as e:
        logger.error(f"Invalid headline configuration: {e}")
        print(f"headline-case: {e}", file=sys.stderr)
        return 2

    if args.text:
        print(render(formatter, ' '.join(args.text), args.explain))
        return 0

    for line in sys.stdin:
        print(render(formatter, line.rstrip('\n'), args.explain))
    return 0


if __name__ == '__main__':
    sys.exit(main())
