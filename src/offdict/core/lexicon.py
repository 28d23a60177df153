# src/offdict/core/lexicon.py
"""
Read-only view over the compiled dictionary.

Maps lowercase words to senses grouped by part of speech.
"bank" -> {"noun": [Sense("sloping land ..."), Sense("a financial institution ...")], "verb": [...]}
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Sense:
    definition: str
    synonyms: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, d: dict) -> "Sense":
        return cls(d.get("definition", ""), tuple(d.get("synonyms") or ()))


def check_entry(word: str, entry) -> None:
    """Raise ValueError unless entry is {pos: [{definition, synonyms}, ...]}.

    Non-list values (e.g. a "word" meta field) are tolerated and skipped on lookup.
    """
    if not isinstance(entry, dict):
        raise ValueError(f"Entry for {word!r} must be an object, got {type(entry).__name__}")
    for pos, senses in entry.items():
        if not isinstance(senses, list):
            continue
        for sense in senses:
            if not isinstance(sense, dict):
                raise ValueError(f"Sense in {word!r} ({pos}) must be an object, got {type(sense).__name__}")
            if not isinstance(sense.get("definition", ""), str):
                raise ValueError(f"Definition in {word!r} ({pos}) must be a string")
            if not isinstance(sense.get("synonyms") or [], list):
                raise ValueError(f"Synonyms in {word!r} ({pos}) must be a list")


class Lexicon:
    def __init__(self, mapping: dict):
        if not isinstance(mapping, dict):
            raise ValueError(f"Dictionary must be a JSON object, got {type(mapping).__name__}")
        for word, entry in mapping.items():
            check_entry(word, entry)
        self._mapping = mapping

    @property
    def raw(self) -> dict:
        return self._mapping

    def __contains__(self, word: str) -> bool:
        return word in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)

    def lookup(self, term: str) -> dict[str, list[Sense]] | None:
        """Senses for an already-normalized term, grouped by POS. None if absent."""
        entry = self._mapping.get(term)
        if entry is None:
            return None
        return {
            pos: [Sense.from_dict(d) for d in senses]
            for pos, senses in entry.items()
            if isinstance(senses, list)
        }
