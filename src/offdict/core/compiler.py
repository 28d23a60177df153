# src/offdict/core/compiler.py
"""
Lexicon compiler: WordNet data files -> word -> {pos: [sense, ...]} JSON.

"happy" and "glad" in one adj synset become

    {"happy": {"adj": [{"definition": "...", "synonyms": ["glad"]}]},
     "glad":  {"adj": [{"definition": "...", "synonyms": ["happy"]}]}}
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from offdict.core.config import get_settings
from offdict.core.wordnet import DATA_FILES, DataRecord, parse_data_line


logger = structlog.get_logger()

DEFAULT_WORDNET_DIR = "/usr/share/wordnet"


def normalize(word: str) -> str:
    return word.lower()


@dataclass
class BuildContext:
    lexicon: dict[str, dict[str, list[dict]]] = field(default_factory=dict)
    records: int = 0

    def add_record(self, record: DataRecord) -> None:
        """Append one sense per word of the synset."""
        for word in record.words:
            entry = self.lexicon.setdefault(normalize(word), {})
            senses = entry.setdefault(record.pos, [])
            synonyms = [w for w in record.words if w.lower() != word.lower()]
            senses.append({"definition": record.gloss, "synonyms": synonyms})
        self.records += 1

    def compile_file(self, pos: str, path: Path) -> bool:
        if not path.exists():
            logger.warning("data_file_missing", pos=pos, path=str(path))
            return False

        with open(path, encoding="utf-8") as f:
            for line in f:
                record = parse_data_line(line.rstrip("\n"))
                if record is not None:
                    self.add_record(record)
        return True


def resolve_dict_dir() -> Path:
    settings = get_settings()
    if settings.wordnet_dir:
        return Path(settings.wordnet_dir)
    if os.environ.get("WNSEARCHDIR"):
        return Path(os.environ["WNSEARCHDIR"])
    if os.environ.get("WNHOME"):
        return Path(os.environ["WNHOME"]) / "dict"
    return Path(DEFAULT_WORDNET_DIR)


def build_lexicon(dict_dir: Path) -> dict[str, dict[str, list[dict]]]:
    ctx = BuildContext()
    for pos, filename in DATA_FILES.items():
        ctx.compile_file(pos, Path(dict_dir) / filename)
    logger.info("lexicon_built", entries=len(ctx.lexicon), synsets=ctx.records)
    return ctx.lexicon


def write_artifact(lexicon: dict, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(lexicon, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("artifact_written", path=str(path), entries=len(lexicon))
    return path


@dataclass(frozen=True)
class DanglingSynonym:
    word: str
    pos: str
    synonym: str


def find_dangling_synonyms(lexicon: dict) -> list[DanglingSynonym]:
    """Synonyms that would re-query to nothing."""
    dangling = []
    for word, entry in lexicon.items():
        for pos, senses in entry.items():
            for sense in senses:
                for synonym in sense.get("synonyms", []):
                    if normalize(synonym) not in lexicon:
                        dangling.append(DanglingSynonym(word, pos, synonym))
    return dangling
