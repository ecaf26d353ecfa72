"""Quiz rounds: pick a card, check the answer, count mistakes.

Outcomes:
- correct: answer equals the card's definition exactly
- wrong_other_term: answer is wrong but is the definition of another card
- wrong: answer matches no card
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional

from .card_store import CardStore
from .errors import EmptyStore
from .stats import StatsLedger

log = logging.getLogger(__name__)

AnswerSource = Callable[[str], str]


class Outcome(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    WRONG_OTHER_TERM = "wrong_other_term"


@dataclass(frozen=True)
class QuizResult:
    term: str
    answer: str
    outcome: Outcome
    correct_definition: str
    other_term: Optional[str] = None  # set only for WRONG_OTHER_TERM

    @property
    def is_correct(self) -> bool:
        return self.outcome is Outcome.CORRECT


def evaluate_answer(store: CardStore, ledger: StatsLedger, term: str, answer: str) -> QuizResult:
    """Grade *answer* for *term* and record a mistake if it is wrong."""
    definition = store.definition_of(term)
    if definition is None:
        raise KeyError(term)
    if answer == definition:
        return QuizResult(term, answer, Outcome.CORRECT, definition)

    ledger.record_error(term)
    other = store.lookup_term_by_definition(answer)
    if other is not None and other != term:
        return QuizResult(term, answer, Outcome.WRONG_OTHER_TERM, definition, other)
    return QuizResult(term, answer, Outcome.WRONG, definition)


def run_session(
    store: CardStore,
    ledger: StatsLedger,
    rounds: int,
    answer_for: AnswerSource,
    rng: Optional[random.Random] = None,
) -> Iterator[QuizResult]:
    """Start a quiz of *rounds* questions drawn uniformly with replacement.

    Args:
        store: Cards to draw from (not modified)
        ledger: Receives one error per wrong answer
        rounds: Number of questions; 0 asks nothing
        answer_for: Called with the term, returns the user's definition
        rng: Random source with ``randrange``; a fresh ``random.Random`` if omitted

    Returns:
        Lazy iterator yielding one QuizResult per round. The next answer is
        requested only when the next result is pulled.

    Raises:
        EmptyStore: If the store has no cards (checked before any answer is asked)
        ValueError: If *rounds* is negative
    """
    if len(store) == 0:
        raise EmptyStore()
    if rounds < 0:
        raise ValueError(f"rounds must be >= 0, got {rounds}")
    return _play(store, ledger, rounds, answer_for, rng or random.Random())


def _play(
    store: CardStore,
    ledger: StatsLedger,
    rounds: int,
    answer_for: AnswerSource,
    rng: random.Random,
) -> Iterator[QuizResult]:
    for n in range(rounds):
        term, _ = store.card_at(rng.randrange(len(store)))
        answer = answer_for(term)
        result = evaluate_answer(store, ledger, term, answer)
        log.debug("Round %d/%d: %r -> %s", n + 1, rounds, term, result.outcome.value)
        yield result
