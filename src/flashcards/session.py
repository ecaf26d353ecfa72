"""Study session: the cards, their stats and the transcript for one user."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .card_store import CardStore
from .codec import apply_records, decode, encode, read_lines, write_lines
from .quiz import AnswerSource, QuizResult, run_session
from .stats import StatsLedger
from .transcript import Transcript

log = logging.getLogger(__name__)


@dataclass
class StudySession:
    ledger: StatsLedger = field(default_factory=StatsLedger)
    store: Optional[CardStore] = None
    transcript: Transcript = field(default_factory=Transcript)
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self) -> None:
        if self.store is None:
            self.store = CardStore(ledger=self.ledger)
        elif self.store.ledger is not self.ledger:
            raise ValueError("store must share the session's ledger")

    @classmethod
    def seeded(cls, seed: Optional[int]) -> "StudySession":
        return cls(rng=random.Random(seed))

    def import_cards(self, path: str | Path) -> int:
        """Load a card file into the store; returns the number of records read."""
        records = decode(read_lines(path))
        count = apply_records(records, self.store, self.ledger)
        log.info("Imported %d cards from %s", count, path)
        return count

    def export_cards(self, path: str | Path) -> int:
        write_lines(path, encode(self.store, self.ledger))
        log.info("Exported %d cards to %s", len(self.store), path)
        return len(self.store)

    def quiz(self, rounds: int, answer_for: AnswerSource) -> Iterator[QuizResult]:
        return run_session(self.store, self.ledger, rounds, answer_for, self.rng)

    def hardest(self) -> Tuple[List[str], int]:
        terms = self.ledger.hardest()
        return terms, self.ledger.count(terms[0])

    def reset_stats(self) -> None:
        self.ledger.reset()

    def save_log(self, path: str | Path) -> None:
        self.transcript.save(path)
        log.info("Saved %d transcript lines to %s", len(self.transcript), path)
