# src/offdict/core/wordnet.py
"""
Parser for WordNet data files (data.noun, data.verb, data.adj, data.adv).

One synset per line:

    offset lex_filenum ss_type w_cnt word lex_id [word lex_id...] p_cnt ptr... | gloss

w_cnt is hex. Indented lines are the license header.
"""

from dataclasses import dataclass


POS_TAGS = ("noun", "verb", "adj", "adv")

DATA_FILES = {
    "noun": "data.noun",
    "verb": "data.verb",
    "adj": "data.adj",
    "adv": "data.adv",
}

# satellite adjectives ("s") group with head adjectives
SYNSET_TYPES = {
    "n": "noun",
    "v": "verb",
    "a": "adj",
    "s": "adj",
    "r": "adv",
}

GLOSS_SEPARATOR = " | "


@dataclass(frozen=True)
class DataRecord:
    pos: str
    words: tuple[str, ...]
    gloss: str


def parse_word_count(token: str) -> int:
    try:
        return int(token, 16)
    except ValueError:
        return 0


def parse_data_line(line: str) -> DataRecord | None:
    """Parse one data-file line. Returns None for lines that contribute nothing."""
    if not line.strip() or line[:1].isspace():
        return None

    parts = line.split()
    if len(parts) < 4:
        return None

    ss_type, w_cnt = parts[2], parts[3]
    pos = SYNSET_TYPES.get(ss_type)
    if pos is None:
        return None

    count = parse_word_count(w_cnt)
    if count <= 0:
        return None

    rest = parts[4:]
    words = []
    for i in range(count):
        if i * 2 >= len(rest):
            break
        words.append(rest[i * 2].replace("_", " "))

    pipe = line.find(GLOSS_SEPARATOR)
    gloss = line[pipe + len(GLOSS_SEPARATOR):].strip() if pipe >= 0 else ""

    return DataRecord(pos, tuple(words), gloss)
