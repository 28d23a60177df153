# tests/conftest.py
"""Shared fixtures: a tiny WordNet dict/ directory and a compiled artifact."""

import json

import pytest
import structlog

LICENSE = "  1 This software and database is being provided to you, the LICENSEE, by  \n"

DATA = {
    "data.adj": (
        LICENSE
        + "01148283 00 a 02 happy 0 glad 0 001 ! 01149494 a 0101 | feeling joy  \n"
        + "01367211 00 s 02 glad 0 Happy 0 000 | eagerly disposed to act  \n"
    ),
    "data.noun": (
        LICENSE
        + "09213565 17 n 02 bank 0 depository_financial_institution 0 000 | a financial institution  \n"
        + "09213566 17 n 00 000 | nothing here  \n"
    ),
    "data.verb": (
        LICENSE
        + "02000000 40 v 01 bank 0 000 | do business with a bank  \n"
    ),
}


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def dict_dir(tmp_path):
    d = tmp_path / "dict"
    d.mkdir()
    for name, text in DATA.items():
        (d / name).write_text(text, encoding="utf-8")
    return d


@pytest.fixture
def sample_lexicon():
    return {
        "happy": {
            "adj": [
                {"definition": "feeling joy", "synonyms": ["glad"]},
            ],
        },
        "glad": {
            "adj": [
                {"definition": "feeling joy", "synonyms": ["happy"]},
            ],
        },
        "bank": {
            "noun": [
                {"definition": "a financial institution", "synonyms": []},
            ],
            "verb": [
                {"definition": "do business with a bank", "synonyms": []},
            ],
        },
    }


@pytest.fixture
def artifact(tmp_path, sample_lexicon):
    path = tmp_path / "public" / "dictionary.json"
    path.parent.mkdir()
    path.write_text(json.dumps(sample_lexicon), encoding="utf-8")
    return path
