"""Compile WordNet data files into the dictionary artifact."""

import sys
from pathlib import Path

from offdict.core.compiler import build_lexicon, resolve_dict_dir, write_artifact
from offdict.core.config import DEFAULT_ARTIFACT_PATH


def add_subparser(subparsers):
    parser = subparsers.add_parser("build", help="Build dictionary JSON from WordNet data files")
    parser.set_defaults(func=run_build)


def run_build(args):
    dict_dir = resolve_dict_dir()
    out = Path(DEFAULT_ARTIFACT_PATH)

    print(f"Building dictionary JSON from {dict_dir}...")
    try:
        lexicon = build_lexicon(dict_dir)
        write_artifact(lexicon, out)
    except (OSError, UnicodeDecodeError) as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    print(f"✓ Built dictionary entries: {len(lexicon)}")
    print(f"✓ Wrote {out}")
