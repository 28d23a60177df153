# src/offdict/core/lookup.py
"""
Lookup controller.

Owns everything a lookup screen shows: the query field, the current result,
the error line, the load state and the history. Key handlers and renderers
read from here and nowhere else.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

import httpx
import structlog

from offdict.core.history import QueryHistory
from offdict.core.lexicon import Lexicon, Sense


logger = structlog.get_logger()

EMPTY_QUERY = "Please enter a word."
NOT_LOADED = "Dictionary not loaded yet."
LOAD_FAILED = "Failed to load dictionary."
NO_MATCH = "No match."


class LoadState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class Status(str, Enum):
    FOUND = "found"
    NO_MATCH = "no_match"
    EMPTY = "empty"
    UNAVAILABLE = "unavailable"


@dataclass
class LookupOutcome:
    status: Status
    term: str
    entry: dict[str, list[Sense]] | None = None


class LookupController:
    def __init__(self, history: QueryHistory | None = None):
        self.history = history or QueryHistory()
        self.lexicon: Lexicon | None = None
        self.state = LoadState.LOADING
        self.query = ""
        self.term = ""
        self.result: dict[str, list[Sense]] | None = None
        self.error = ""
        self.focused = True

    @property
    def ready(self) -> bool:
        return self.state == LoadState.READY

    def load(self, fetch: Callable[[], dict]) -> LoadState:
        """Run the one-time dictionary load. A failure disables querying for good."""
        if self.state != LoadState.LOADING:
            return self.state
        try:
            self.lexicon = Lexicon(fetch())
        except (httpx.HTTPError, OSError, ValueError) as e:
            logger.error("dictionary_load_failed", error=str(e))
            self.state = LoadState.FAILED
            self.error = LOAD_FAILED
            return self.state

        logger.info("dictionary_loaded", entries=len(self.lexicon))
        self.state = LoadState.READY
        return self.state

    def search(self, text: str | None = None) -> LookupOutcome:
        term = (self.query if text is None else text).strip().lower()
        if not term:
            self.error = EMPTY_QUERY
            self.result = None
            return LookupOutcome(Status.EMPTY, term)

        if not self.ready:
            self.error = LOAD_FAILED if self.state == LoadState.FAILED else NOT_LOADED
            return LookupOutcome(Status.UNAVAILABLE, term)

        self.term = term
        entry = self.lexicon.lookup(term)
        self.history.push(term)

        if entry is None:
            self.result = None
            self.error = NO_MATCH
            return LookupOutcome(Status.NO_MATCH, term)

        self.result = entry
        self.error = ""
        return LookupOutcome(Status.FOUND, term, entry)

    def history_back(self) -> None:
        value = self.history.back()
        if value is not None:
            self.query = value

    def history_forward(self) -> None:
        value = self.history.forward()
        if value is not None:
            self.query = value

    def clear(self) -> None:
        self.query = ""
        self.result = None

    def select_synonym(self, word: str) -> LookupOutcome:
        self.query = word
        outcome = self.search(word)
        self.focused = True
        return outcome

    def handle_key(self, key: str) -> bool:
        """Keyboard bindings. Returns True when the key was consumed."""
        key = key.lower()
        if key == "escape":
            self.clear()
            return True
        if not self.focused:
            return False
        if key == "enter":
            self.search()
            return True
        if key == "up":
            if not len(self.history):
                return False
            self.history_back()
            return True
        if key == "down":
            if not len(self.history):
                return False
            self.history_forward()
            return True
        return False
