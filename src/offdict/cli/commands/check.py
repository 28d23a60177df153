"""Integrity check: every synonym must itself be a dictionary key."""

import sys

from offdict.cli import client
from offdict.core.compiler import find_dangling_synonyms
from offdict.core.lexicon import Lexicon


def add_subparser(subparsers):
    parser = subparsers.add_parser("check", help="Check that every synonym resolves to an entry")
    parser.add_argument("--source", help="Artifact path or URL (default: from settings)")
    parser.add_argument("--limit", type=int, default=20, help="Max problems to print")
    parser.set_defaults(func=run_check)


def run_check(args):
    source = args.source or client.default_source()
    try:
        lexicon = Lexicon(client.fetch_dictionary(source))
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    dangling = find_dangling_synonyms(lexicon.raw)
    if not dangling:
        print(f"✓ {len(lexicon)} entries, all synonyms resolve")
        return

    print(f"✗ {len(dangling)} dangling synonyms in {len(lexicon)} entries")
    for d in dangling[:args.limit]:
        print(f"  {d.word} ({d.pos}) -> {d.synonym}")
    sys.exit(1)
