"""
Print the most frequent words of a text file (or stdin).

Recommended usage (run as a module so package imports work):

    uv run python -m scripts.top_words notes.txt -k 5 --stem english
    cat notes.txt | uv run python -m scripts.top_words --counts
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from topwords.errors import InvalidInputError
from topwords.ranking import FrequentWordSearcher, SearchConfig
from topwords.stemming import available_languages

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the K most frequent words in a text, ignoring stop words.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Path to a text file. Reads stdin when omitted.",
    )
    parser.add_argument(
        "-k",
        "--top-k",
        type=int,
        default=None,
        help="Number of words to print (default: TOPWORDS_TOP_K or 10).",
    )
    parser.add_argument(
        "--stem",
        metavar="LANGUAGE",
        default=None,
        help=f"Count stems instead of words. One of: {', '.join(available_languages())}.",
    )
    parser.add_argument(
        "--stopwords",
        type=Path,
        default=None,
        help="Comma-separated stop-word file (default: bundled English list).",
    )
    parser.add_argument(
        "--counts",
        action="store_true",
        help="Print each word's count next to it.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = SearchConfig.from_env()
    if args.top_k is not None:
        config.top_k = args.top_k
    if args.stem:
        config.stem_language = args.stem
    if args.stopwords:
        config.stopwords_path = args.stopwords

    if args.input is not None:
        if not args.input.exists():
            print(f"Error: input file not found: {args.input}", file=sys.stderr)
            return 2
        try:
            text = args.input.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
            return 2
    else:
        text = sys.stdin.read()

    searcher = FrequentWordSearcher.from_config(config)
    if args.stem and not searcher.is_stemmer_active():
        print(f"Warning: no stemmer for {args.stem!r}; counting unstemmed words", file=sys.stderr)

    try:
        ranked = searcher.most_frequent_with_counts(text)
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    for fw in ranked:
        if args.counts:
            print(f"{fw.word}\t{fw.count}")
        else:
            print(fw.word)
    return 0


if __name__ == "__main__":
    sys.exit(main())
